from dataclasses import replace

import pytest

from kuhn3p.constants import ActionType, BettingType
from kuhn3p.game import (
    KUHN_3P_SHAPE,
    acting_seat,
    format_betting,
    is_3p_kuhn_poker_game,
    is_terminal,
    legal_actions,
    parse_betting,
    payoffs,
    validate_history,
)
from kuhn3p.types import GameShape


def test_kuhn_shape_is_accepted() -> None:
    assert is_3p_kuhn_poker_game(KUHN_3P_SHAPE)


@pytest.mark.parametrize(
    "changes",
    [
        {"betting_type": BettingType.NO_LIMIT},
        {"num_rounds": 2},
        {"max_raises": (2,)},
        {"num_suits": 2},
        {"num_ranks": 3},
        {"num_hole_cards": 2},
        {"num_board_cards": (1,)},
        {"num_players": 2},
    ],
)
def test_other_shapes_are_rejected(changes: dict) -> None:
    assert not is_3p_kuhn_poker_game(replace(KUHN_3P_SHAPE, **changes))


def test_gamedef_parses_to_kuhn_shape(kuhn_gamedef: str) -> None:
    assert GameShape.from_gamedef(kuhn_gamedef) == KUHN_3P_SHAPE


def test_gamedef_leduc_is_not_kuhn(kuhn_gamedef: str) -> None:
    text = kuhn_gamedef.replace("numRounds = 1", "numRounds = 2").replace("numRanks = 4", "numRanks = 3")
    text = text.replace("maxRaises = 1", "maxRaises = 2 2").replace("numBoardCards = 0", "numBoardCards = 0 1")
    shape = GameShape.from_gamedef(text)
    assert shape.num_rounds == 2
    assert shape.num_board_cards == (0, 1)
    assert not is_3p_kuhn_poker_game(shape)


def test_gamedef_without_betting_type_is_rejected(kuhn_gamedef: str) -> None:
    with pytest.raises(ValueError):
        GameShape.from_gamedef(kuhn_gamedef.replace("limit\n", ""))


def test_betting_string_round_trip() -> None:
    history = parse_betting("crf")
    assert history == [ActionType.CALL, ActionType.RAISE, ActionType.FOLD]
    assert format_betting(history) == "crf"
    with pytest.raises(ValueError):
        parse_betting("cx")


def test_acting_seat_and_legal_actions() -> None:
    assert acting_seat([]) == 0
    assert legal_actions([]) == (ActionType.CALL, ActionType.RAISE)
    assert acting_seat(parse_betting("ccr")) == 0
    assert legal_actions(parse_betting("ccr")) == (ActionType.FOLD, ActionType.CALL)
    assert acting_seat(parse_betting("ccrc")) == 1
    assert acting_seat(parse_betting("r")) == 1


@pytest.mark.parametrize("betting", ["ccc", "rff", "rcc", "crcc", "ccrff", "ccrcc"])
def test_terminal_histories(betting: str) -> None:
    history = parse_betting(betting)
    assert is_terminal(history)
    assert acting_seat(history) is None
    assert legal_actions(history) == ()


@pytest.mark.parametrize("betting", ["rr", "f", "cf", "cccc", "crr"])
def test_impossible_histories_are_rejected(betting: str) -> None:
    with pytest.raises(ValueError):
        validate_history(parse_betting(betting))


def test_payoffs() -> None:
    assert payoffs(parse_betting("ccc"), [0, 1, 2]) == (-1.0, -1.0, 2.0)
    assert payoffs(parse_betting("rff"), [0, 1, 2]) == (2.0, -1.0, -1.0)
    assert payoffs(parse_betting("crcc"), [3, 0, 1]) == (4.0, -2.0, -2.0)
    assert payoffs(parse_betting("ccrfc"), [3, 0, 1]) == (-1.0, -2.0, 3.0)
    with pytest.raises(ValueError):
        payoffs(parse_betting("cc"), [0, 1, 2])
