import argparse
from dataclasses import dataclass, fields
import logging
from pathlib import Path
from typing import Sequence

from kuhn3p.cards import card_to_rank, parse_deal, rank_to_card
from kuhn3p.constants import FREE_PARAM_NAMES, NUM_PLAYERS, NUM_RANKS, NUM_SITUATIONS, PARAM_NAMES, ActionType
from kuhn3p.errors import ConstructionError
from kuhn3p.eval import ProfileEvaluator
from kuhn3p.game import KUHN_3P_SHAPE, parse_betting
from kuhn3p.player import EquilibriumPlayer
from kuhn3p.strategy import strategy_grid
from kuhn3p.types import GameShape, MatchStateView

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayerConfig:
    c11: float = 0.25
    b11: float = 0.1
    b21: float = 0.2
    b32: float = 0.5
    c33: float = 0.25
    c34: float = 0.0
    # derived; used as given for sub-families 2 and 3 only
    b23: float = 0.0
    b33: float = 0.0
    b41: float = 0.0
    c21: float = 0.0
    seed: int = 0
    game_path: str | None = None
    log_level: str = "INFO"

    command: str = "table"
    seat: int = 0
    card: str = "J"
    history: str = ""
    samples: int = 1
    deal: str | None = None

    def named_params(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in PARAM_NAMES}

    def game_shape(self) -> GameShape:
        if self.game_path is None:
            return KUHN_3P_SHAPE
        return GameShape.from_gamedef(Path(self.game_path).read_text())


def build_arg_parser() -> argparse.ArgumentParser:
    defaults = PlayerConfig()
    parser = argparse.ArgumentParser(
        prog="kuhn3p",
        description="Equilibrium player for 3-player Kuhn poker",
    )
    for name in PARAM_NAMES:
        help_text = None if name in FREE_PARAM_NAMES else "derived; overwritten for sub-family 1"
        parser.add_argument(f"--{name}", type=float, default=getattr(defaults, name), help=help_text)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--game", dest="game_path", default=defaults.game_path, help="game definition file")
    parser.add_argument(
        "--log_level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("table", help="print every seat/situation/rank distribution")

    act = sub.add_parser("act", help="distribution and sampled actions for one decision")
    act.add_argument("--seat", type=int, required=True, choices=range(NUM_PLAYERS))
    act.add_argument("--card", required=True, help="private card, one of J Q K A")
    act.add_argument("--history", default="", help="betting so far, e.g. 'cr'")
    act.add_argument("--samples", type=int, default=defaults.samples)

    evaluate = sub.add_parser("evaluate", help="exact expected utility of the self-play profile")
    evaluate.add_argument("--deal", default=None, help="one card per seat, e.g. 'JQK'; all deals if omitted")
    return parser


def config_from_args(args: argparse.Namespace) -> PlayerConfig:
    values = {f.name: getattr(args, f.name) for f in fields(PlayerConfig) if getattr(args, f.name, None) is not None}
    return PlayerConfig(**values)


def _format_probs(probs) -> str:
    return " ".join(f"{a.name.lower()}={float(probs[a]):.4f}" for a in ActionType)


def run_table(player: EquilibriumPlayer) -> list[str]:
    grid = strategy_grid(player.params)
    lines = []
    for seat in range(NUM_PLAYERS):
        for situation in range(NUM_SITUATIONS):
            for rank in range(NUM_RANKS):
                probs = grid[seat, situation, rank]
                lines.append(f"seat {seat} situation {situation + 1} {rank_to_card(rank)}: {_format_probs(probs)}")
    return lines


def run_act(player: EquilibriumPlayer, cfg: PlayerConfig) -> list[str]:
    view = MatchStateView(seat=cfg.seat, card_rank=card_to_rank(cfg.card), history=parse_betting(cfg.history))
    lines = [_format_probs(player.action_probs(view))]
    for _ in range(cfg.samples):
        lines.append(player.action(view).action_type.name.lower())
    return lines


def run_evaluate(player: EquilibriumPlayer, cfg: PlayerConfig) -> list[str]:
    evaluator = ProfileEvaluator.self_play(player)
    if cfg.deal:
        utilities = evaluator.deal_utilities(parse_deal(cfg.deal))
    else:
        utilities = evaluator.expected_utilities()
    return [f"seat {seat}: {float(u):+.6f}" for seat, u in enumerate(utilities)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    cfg = config_from_args(args)
    logging.basicConfig(level=getattr(logging, cfg.log_level))

    try:
        game_shape = cfg.game_shape()
    except (OSError, ValueError) as e:
        parser.error(f"Cannot read game definition: {e}")

    try:
        player = EquilibriumPlayer.from_named_params(
            seed=cfg.seed,
            game_shape=game_shape,
            **cfg.named_params(),
        )
    except ConstructionError as e:
        logger.error("Cannot build player (%s): %s", e.kind.value, e)
        return 2

    if cfg.command == "act":
        try:
            lines = run_act(player, cfg)
        except ValueError as e:
            parser.error(str(e))
    elif cfg.command == "evaluate":
        try:
            lines = run_evaluate(player, cfg)
        except ValueError as e:
            parser.error(str(e))
    else:
        lines = run_table(player)

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
