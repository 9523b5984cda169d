from dataclasses import replace

import pytest

from kuhn3p.constants import ActionType, Rank
from kuhn3p.errors import (
    ConstructionError,
    ErrorKind,
    FamilyConstraintViolatedError,
    ParameterOutOfFamilyRangeError,
    ParameterOutOfUnitIntervalError,
    WrongGameShapeError,
)
from kuhn3p.game import KUHN_3P_SHAPE, legal_actions, parse_betting
from kuhn3p.params import EquilibriumFamily, ParameterVector
from kuhn3p.player import EquilibriumPlayer
from kuhn3p.types import Action, MatchStateView


def test_construction_derives_family_1_parameters(make_params) -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, list(make_params().values), seed=7)
    assert player.family == EquilibriumFamily.FAMILY_1
    assert player.params["b23"] == 0.0
    assert player.params["b33"] == pytest.approx(0.75)
    assert player.params["b41"] == pytest.approx(0.6)
    assert player.params["c21"] == 0.5


def test_from_named_params_derives_family_1(family_1_free) -> None:
    player = EquilibriumPlayer.from_named_params(seed=3, **family_1_free)
    assert player.seed == 3
    assert player.params["b41"] == pytest.approx(0.6)


def test_from_named_params_keeps_derived_slots_for_family_2() -> None:
    player = EquilibriumPlayer.from_named_params(c11=0.0, b41=0.6, c21=0.5)
    assert player.family == EquilibriumFamily.FAMILY_2
    assert player.params["b41"] == 0.6
    assert player.params["c21"] == 0.5
    view = MatchStateView(seat=1, card_rank=Rank.ACE, history=parse_betting("c"))
    assert player.action_probs(view)[ActionType.RAISE].item() == pytest.approx(0.6)


def test_wrong_game_shape_fails_construction(make_params) -> None:
    with pytest.raises(WrongGameShapeError) as excinfo:
        EquilibriumPlayer(replace(KUHN_3P_SHAPE, num_players=2), make_params(), seed=0)
    assert excinfo.value.kind == ErrorKind.WRONG_GAME_SHAPE


def test_constraint_violation_fails_construction(make_params) -> None:
    # b21=0.2, b11=0.1, b32=0.5 allow c33 up to 0.275.
    with pytest.raises(FamilyConstraintViolatedError, match="c33 too large"):
        EquilibriumPlayer(KUHN_3P_SHAPE, make_params(c33=0.3), seed=0)
    with pytest.raises(FamilyConstraintViolatedError, match="b21 greater than 1/4"):
        EquilibriumPlayer(KUHN_3P_SHAPE, make_params(b21=0.2501), seed=0)


@pytest.mark.parametrize("c11", [0.51, 1.0, -0.01])
def test_out_of_range_c11_fails_construction(c11: float, make_params) -> None:
    with pytest.raises(ParameterOutOfFamilyRangeError):
        EquilibriumPlayer(KUHN_3P_SHAPE, make_params(c11=c11), seed=0)


def test_unchecked_families_still_get_bounds_check() -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, ParameterVector.from_named(c11=0.5, b21=0.9), seed=0)
    assert player.family == EquilibriumFamily.FAMILY_3
    assert player.params["b21"] == 0.9

    with pytest.raises(ParameterOutOfUnitIntervalError):
        EquilibriumPlayer(KUHN_3P_SHAPE, ParameterVector.from_named(c11=0.0, c33=1.5), seed=0)


def test_construction_errors_are_value_errors(make_params) -> None:
    with pytest.raises(ValueError):
        EquilibriumPlayer(KUHN_3P_SHAPE, make_params(c11=0.9), seed=0)
    with pytest.raises(ValueError) as excinfo:
        EquilibriumPlayer(KUHN_3P_SHAPE, [0.25, 0.1], seed=0)
    assert not isinstance(excinfo.value, ConstructionError)


def test_action_has_zero_size_and_is_legal(family_1_params) -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=11)
    decisions = [
        (0, ""),
        (1, "c"),
        (1, "r"),
        (2, "cc"),
        (2, "cr"),
        (0, "ccr"),
        (0, "crf"),
        (0, "crc"),
        (1, "ccrf"),
        (1, "ccrc"),
        (2, "rf"),
        (2, "rc"),
    ]
    for seat, betting in decisions:
        history = parse_betting(betting)
        for rank in Rank:
            for _ in range(5):
                action = player.action(MatchStateView(seat=seat, card_rank=rank, history=history))
                assert action.size == 0
                assert action.action_type in legal_actions(history)


def test_pure_decision_is_always_taken(family_1_params) -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=0)
    view = MatchStateView(seat=0, card_rank=Rank.JACK, history=[])
    assert {player.action(view) for _ in range(20)} == {Action(ActionType.CALL, 0)}


def test_mixed_decision_samples_both_legal_actions(family_1_params) -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=5)
    view = MatchStateView(seat=0, card_rank=Rank.KING, history=parse_betting("crf"))
    seen = {player.action(view).action_type for _ in range(200)}
    assert seen == {ActionType.FOLD, ActionType.CALL}


def test_same_seed_same_actions(family_1_params) -> None:
    view = MatchStateView(seat=1, card_rank=Rank.JACK, history=parse_betting("c"))
    a = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=42)
    b = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=42)
    assert [a.action(view) for _ in range(50)] == [b.action(view) for _ in range(50)]


def test_action_probs_does_not_consume_draws(family_1_params) -> None:
    view = MatchStateView(seat=2, card_rank=Rank.JACK, history=parse_betting("cc"))
    a = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=9)
    b = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=9)
    for _ in range(3):
        a.action_probs(view)
    assert a.action_probs(view).tolist() == pytest.approx([0.0, 0.75, 0.25])
    assert [a.action(view) for _ in range(10)] == [b.action(view) for _ in range(10)]


def test_bad_view_is_rejected(family_1_params) -> None:
    player = EquilibriumPlayer(KUHN_3P_SHAPE, family_1_params, seed=0)
    with pytest.raises(ValueError):
        player.action(MatchStateView(seat=3, card_rank=0, history=[]))
    with pytest.raises(ValueError):
        player.action_probs(MatchStateView(seat=1, card_rank=0, history=[]))
