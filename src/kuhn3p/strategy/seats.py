from abc import ABC, abstractmethod
import logging
from typing import Sequence

import torch

from ..constants import NUM_ACTIONS, NUM_PLAYERS, NUM_RANKS, NUM_SITUATIONS, ActionType
from ..game import replay
from ..params import ParameterVector
from .tables import A, SEAT1_TABLE, SEAT2_TABLE, Slot

logger = logging.getLogger(__name__)

OPENING_SITUATION = 1


def _probs_tensor(p: float, *, raise_open: bool) -> torch.Tensor:
    probs = torch.zeros(NUM_ACTIONS, dtype=torch.float64)
    if raise_open:
        probs[ActionType.CALL] = 1.0 - p
        probs[ActionType.RAISE] = p
    else:
        probs[ActionType.FOLD] = 1.0 - p
        probs[ActionType.CALL] = p
    return probs


class SeatStrategy(ABC):
    """
    Maps a decision of one seat to an action distribution.

    ``classify`` turns the public betting history into a situation number
    (1..4), ``resolve`` turns a situation and private card rank into the
    probability of the aggressive legal action: raise while the betting is
    still unopened, call once facing the capped bet.
    """

    seat: int

    @abstractmethod
    def classify(self, history: Sequence[ActionType]) -> int:
        ...

    @abstractmethod
    def resolve(self, situation: int, rank: int, params: ParameterVector) -> float:
        ...

    def raise_open(self, situation: int) -> bool:
        return situation == OPENING_SITUATION

    def check_decision_point(self, history: Sequence[ActionType]) -> None:
        state = replay(history)
        if state.terminal or state.next_seat != self.seat:
            raise ValueError(f"Seat {self.seat} does not act after history of length {len(history)}")

    def action_probs(self, rank: int, history: Sequence[ActionType], params: ParameterVector) -> torch.Tensor:
        if not (0 <= rank < NUM_RANKS):
            raise ValueError(f"Card rank out of range: {rank}")
        history = tuple(ActionType(a) for a in history)
        self.check_decision_point(history)

        situation = self.classify(history)
        p = self.resolve(situation, rank, params)
        logger.debug("seat %d: situation %d, rank %d, p=%.6f", self.seat, situation, rank, p)
        return _probs_tensor(p, raise_open=self.raise_open(situation))


class Seat0Strategy(SeatStrategy):
    seat = 0

    def classify(self, history: Sequence[ActionType]) -> int:
        if len(history) == 0:
            return 1
        if history[1] == ActionType.CALL:
            return 2
        if history[2] == ActionType.FOLD:
            return 3
        return 4

    def resolve(self, situation: int, rank: int, params: ParameterVector) -> float:
        return A[rank][situation - 1]


class _TableSeatStrategy(SeatStrategy):
    table: tuple[tuple[float | Slot, ...], ...]

    def resolve(self, situation: int, rank: int, params: ParameterVector) -> float:
        entry = self.table[situation - 1][rank]
        if isinstance(entry, Slot):
            return params[entry.index]
        return entry


class Seat1Strategy(_TableSeatStrategy):
    seat = 1
    table = SEAT1_TABLE

    def classify(self, history: Sequence[ActionType]) -> int:
        if len(history) == 1:
            return 1 if history[0] == ActionType.CALL else 2
        if history[3] == ActionType.FOLD:
            return 3
        return 4


class Seat2Strategy(_TableSeatStrategy):
    seat = 2
    table = SEAT2_TABLE

    def classify(self, history: Sequence[ActionType]) -> int:
        if history[0] == ActionType.CALL:
            return 1 if history[1] == ActionType.CALL else 2
        if history[1] == ActionType.FOLD:
            return 3
        return 4


SEAT_STRATEGIES: tuple[SeatStrategy, ...] = (Seat0Strategy(), Seat1Strategy(), Seat2Strategy())


def seat_strategy(seat: int) -> SeatStrategy:
    if not (0 <= seat < NUM_PLAYERS):
        raise ValueError(f"seat must be in [0, {NUM_PLAYERS - 1}], got {seat}")
    return SEAT_STRATEGIES[seat]


def strategy_grid(params: ParameterVector) -> torch.Tensor:
    """Distributions for every (seat, situation, rank), shape (3, 4, 4, 3)."""
    grid = torch.zeros((NUM_PLAYERS, NUM_SITUATIONS, NUM_RANKS, NUM_ACTIONS), dtype=torch.float64)
    for strategy in SEAT_STRATEGIES:
        for situation in range(1, NUM_SITUATIONS + 1):
            raise_open = strategy.raise_open(situation)
            for rank in range(NUM_RANKS):
                p = strategy.resolve(situation, rank, params)
                grid[strategy.seat, situation - 1, rank] = _probs_tensor(p, raise_open=raise_open)
    return grid
