from .constants import ActionType, Rank
from .errors import (
    ConstructionError,
    ErrorKind,
    FamilyConstraintViolatedError,
    ParameterOutOfFamilyRangeError,
    ParameterOutOfUnitIntervalError,
    WrongGameShapeError,
)
from .game import KUHN_3P_SHAPE, is_3p_kuhn_poker_game
from .params import EquilibriumFamily, ParameterVector, check_params, classify_family
from .player import EquilibriumPlayer
from .types import Action, GameShape, MatchStateView

__all__ = [
    "Action",
    "ActionType",
    "ConstructionError",
    "EquilibriumFamily",
    "EquilibriumPlayer",
    "ErrorKind",
    "FamilyConstraintViolatedError",
    "GameShape",
    "KUHN_3P_SHAPE",
    "MatchStateView",
    "ParameterOutOfFamilyRangeError",
    "ParameterOutOfUnitIntervalError",
    "ParameterVector",
    "Rank",
    "WrongGameShapeError",
    "check_params",
    "classify_family",
    "is_3p_kuhn_poker_game",
]
