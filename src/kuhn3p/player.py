import logging
from typing import Sequence

import torch

from .errors import WrongGameShapeError
from .game import KUHN_3P_SHAPE, format_betting, is_3p_kuhn_poker_game
from .params import EquilibriumFamily, ParameterVector, check_params
from .sampling import draw_uniform, make_generator, sample_action
from .strategy import seat_strategy
from .types import Action, GameShape, MatchStateView

logger = logging.getLogger(__name__)


class EquilibriumPlayer:
    """
    Plays one seat of 3-player Kuhn poker from a member of the equilibrium family.

    Construction validates the game shape and the strategy parameters (filling
    in derived ones) and seeds a private generator; it raises a
    ``ConstructionError`` subclass on any failure. Afterwards ``action`` only
    consumes random draws.
    """

    def __init__(
        self,
        game_shape: GameShape,
        params: ParameterVector | Sequence[float],
        seed: int,
    ) -> None:
        if not is_3p_kuhn_poker_game(game_shape):
            raise WrongGameShapeError("equilibrium player used in non-Kuhn game")
        if not isinstance(params, ParameterVector):
            params = ParameterVector(tuple(params))

        result = check_params(params)
        self.params: ParameterVector = result.unwrap()
        self.family: EquilibriumFamily = result.family
        self.game_shape = game_shape
        self.seed = int(seed)
        self.generator: torch.Generator = make_generator(self.seed)

        logger.info("Equilibrium player ready: sub-family %d, seed %d", int(self.family), self.seed)

    @classmethod
    def from_named_params(
        cls,
        *,
        seed: int = 0,
        game_shape: GameShape = KUHN_3P_SHAPE,
        **named: float,
    ) -> "EquilibriumPlayer":
        return cls(game_shape, ParameterVector.from_named(**named), seed)

    def action_probs(self, view: MatchStateView) -> torch.Tensor:
        return seat_strategy(view.seat).action_probs(view.card_rank, view.history, self.params)

    def action(self, view: MatchStateView) -> Action:
        probs = self.action_probs(view)
        r = draw_uniform(self.generator)
        action_type = sample_action(probs, r)
        logger.debug(
            "seat %d card %d history '%s': probs=%s r=%.6f -> %s",
            view.seat,
            view.card_rank,
            format_betting(view.history),
            probs.tolist(),
            r,
            action_type.name,
        )
        return Action(action_type=action_type, size=0)

