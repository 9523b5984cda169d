from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .constants import (
    ACTION_CHARS,
    ANTE,
    NUM_PLAYERS,
    NUM_RANKS,
    RAISE_SIZE,
    ActionType,
    BettingType,
)
from .types import GameShape

KUHN_3P_SHAPE = GameShape(
    betting_type=BettingType.LIMIT,
    num_rounds=1,
    max_raises=(1,),
    num_suits=1,
    num_ranks=NUM_RANKS,
    num_hole_cards=1,
    num_board_cards=(0,),
    num_players=NUM_PLAYERS,
)


def is_3p_kuhn_poker_game(shape: GameShape) -> bool:
    return (
        shape.betting_type == BettingType.LIMIT
        and shape.num_rounds == 1
        and len(shape.max_raises) >= 1
        and shape.max_raises[0] == 1
        and shape.num_suits == 1
        and shape.num_ranks == NUM_RANKS
        and shape.num_hole_cards == 1
        and len(shape.num_board_cards) >= 1
        and shape.num_board_cards[0] == 0
        and shape.num_players == NUM_PLAYERS
    )


@dataclass(slots=True)
class BettingState:
    """Replay of the single betting round. Seats act 0, 1, 2; one raise at most."""

    next_seat: int = 0
    num_actions: int = 0
    bettor: int | None = None
    folded: set[int] = field(default_factory=set)
    contributions: list[float] = field(default_factory=lambda: [ANTE] * NUM_PLAYERS)

    @property
    def terminal(self) -> bool:
        if self.bettor is None:
            return self.num_actions == NUM_PLAYERS
        return self.num_actions > 0 and self.next_seat == self.bettor

    def legal_actions(self) -> tuple[ActionType, ...]:
        if self.terminal:
            return ()
        if self.bettor is None:
            return (ActionType.CALL, ActionType.RAISE)
        return (ActionType.FOLD, ActionType.CALL)

    def apply(self, action: ActionType) -> None:
        action = ActionType(action)
        if action not in self.legal_actions():
            raise ValueError(f"{action.name} is not legal for seat {self.next_seat} after {self.num_actions} actions")

        seat = self.next_seat
        if action == ActionType.RAISE:
            self.bettor = seat
            self.contributions[seat] += RAISE_SIZE
        elif action == ActionType.FOLD:
            self.folded.add(seat)
        elif self.bettor is not None:
            self.contributions[seat] += RAISE_SIZE

        self.num_actions += 1
        self.next_seat = (seat + 1) % NUM_PLAYERS


def replay(history: Iterable[ActionType]) -> BettingState:
    state = BettingState()
    for action in history:
        state.apply(action)
    return state


def validate_history(history: Iterable[ActionType]) -> None:
    replay(history)


def acting_seat(history: Iterable[ActionType]) -> int | None:
    state = replay(history)
    return None if state.terminal else state.next_seat


def legal_actions(history: Iterable[ActionType]) -> tuple[ActionType, ...]:
    return replay(history).legal_actions()


def is_terminal(history: Iterable[ActionType]) -> bool:
    return replay(history).terminal


def payoffs(history: Iterable[ActionType], cards: Sequence[int]) -> tuple[float, ...]:
    """Net chips won by each seat at the end of the round."""
    if len(cards) != NUM_PLAYERS:
        raise ValueError(f"Expected {NUM_PLAYERS} cards, got {len(cards)}")
    state = replay(history)
    if not state.terminal:
        raise ValueError("Payoffs are only defined for finished rounds")

    contenders = [seat for seat in range(NUM_PLAYERS) if seat not in state.folded]
    winner = max(contenders, key=lambda seat: cards[seat])
    pot = sum(state.contributions)
    return tuple(
        (pot if seat == winner else 0.0) - state.contributions[seat] for seat in range(NUM_PLAYERS)
    )


def parse_betting(betting: str) -> list[ActionType]:
    """Convert a betting string such as 'crf' into action types."""
    out = []
    for ch in betting.strip().lower():
        if ch not in ACTION_CHARS:
            raise ValueError(f"Invalid action character {ch!r} in {betting!r}")
        out.append(ActionType(ACTION_CHARS.index(ch)))
    return out


def format_betting(history: Iterable[ActionType]) -> str:
    return "".join(ACTION_CHARS[int(a)] for a in history)
