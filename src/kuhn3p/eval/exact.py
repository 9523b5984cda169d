from itertools import permutations
from typing import Sequence

import torch

from kuhn3p.constants import NUM_PLAYERS, NUM_RANKS, ActionType
from kuhn3p.game import payoffs, replay
from kuhn3p.player import EquilibriumPlayer
from kuhn3p.types import MatchStateView


class ProfileEvaluator:
    """
    Exact expected utility of a strategy profile.

    Every deal of three distinct ranks is equally likely; for each deal the
    betting tree is walked and terminal payoffs are weighted by the product of
    the acting seats' action probabilities.
    """

    def __init__(self, players: Sequence[EquilibriumPlayer]) -> None:
        if len(players) != NUM_PLAYERS:
            raise ValueError(f"Expected {NUM_PLAYERS} players, got {len(players)}")
        self.players = tuple(players)

    @classmethod
    def self_play(cls, player: EquilibriumPlayer) -> "ProfileEvaluator":
        return cls([player] * NUM_PLAYERS)

    def expected_utilities(self) -> torch.Tensor:
        deals = list(permutations(range(NUM_RANKS), NUM_PLAYERS))
        total = torch.zeros(NUM_PLAYERS, dtype=torch.float64)
        for cards in deals:
            total += self.deal_utilities(cards)
        return total / len(deals)

    def deal_utilities(self, cards: Sequence[int]) -> torch.Tensor:
        if len(cards) != NUM_PLAYERS or len(set(cards)) != NUM_PLAYERS:
            raise ValueError(f"A deal needs {NUM_PLAYERS} distinct ranks, got {list(cards)}")
        return self._traverse((), tuple(cards))

    def _traverse(self, history: tuple[ActionType, ...], cards: tuple[int, ...]) -> torch.Tensor:
        state = replay(history)
        if state.terminal:
            return torch.tensor(payoffs(history, cards), dtype=torch.float64)

        seat = state.next_seat
        view = MatchStateView(seat=seat, card_rank=cards[seat], history=history)
        probs = self.players[seat].action_probs(view)

        value = torch.zeros(NUM_PLAYERS, dtype=torch.float64)
        for action in state.legal_actions():
            p = float(probs[action])
            if p == 0.0:
                continue
            value += p * self._traverse(history + (action,), cards)
        return value
