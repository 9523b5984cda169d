from dataclasses import dataclass, field
from typing import Sequence

from .constants import ActionType, BettingType


@dataclass(frozen=True, slots=True)
class GameShape:
    betting_type: BettingType
    num_rounds: int
    max_raises: tuple[int, ...]
    num_suits: int
    num_ranks: int
    num_hole_cards: int
    num_board_cards: tuple[int, ...]
    num_players: int

    @classmethod
    def from_gamedef(cls, text: str) -> "GameShape":
        """
        Parse a plain-text ``GAMEDEF ... END GAMEDEF`` block.

        Keys are matched case-insensitively. Per-round keys (``maxRaises``,
        ``numBoardCards``) take one integer per round. Keys that do not affect
        the shape (``blind``, ``raiseSize``, ``firstPlayer``, ...) are ignored.
        """
        betting_type: BettingType | None = None
        values: dict[str, list[int]] = {}
        in_block = False

        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            lowered = line.lower()
            if lowered == "gamedef":
                in_block = True
                continue
            if lowered == "end gamedef":
                break
            if not in_block:
                continue
            if lowered in ("limit", "nolimit"):
                betting_type = BettingType.LIMIT if lowered == "limit" else BettingType.NO_LIMIT
                continue
            if "=" not in line:
                raise ValueError(f"Malformed game definition line: {raw!r}")
            key, rhs = line.split("=", 1)
            try:
                values[key.strip().lower()] = [int(tok) for tok in rhs.split()]
            except ValueError:
                # fractional blinds
                continue

        if betting_type is None:
            raise ValueError("Game definition does not name a betting type")

        def scalar(key: str) -> int:
            if key.lower() not in values or not values[key.lower()]:
                raise ValueError(f"Game definition is missing {key}")
            return values[key.lower()][0]

        num_rounds = scalar("numRounds")
        max_raises = tuple(values.get("maxraises", []))
        num_board_cards = tuple(values.get("numboardcards", [0] * num_rounds))
        return cls(
            betting_type=betting_type,
            num_rounds=num_rounds,
            max_raises=max_raises,
            num_suits=scalar("numSuits"),
            num_ranks=scalar("numRanks"),
            num_hole_cards=scalar("numHoleCards"),
            num_board_cards=num_board_cards,
            num_players=scalar("numPlayers"),
        )


@dataclass(frozen=True, slots=True)
class Action:
    action_type: ActionType
    size: int = 0


@dataclass(slots=True)
class MatchStateView:
    seat: int
    card_rank: int
    history: Sequence[ActionType] = field(default_factory=tuple)
