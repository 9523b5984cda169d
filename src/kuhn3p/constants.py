from enum import IntEnum


class ActionType(IntEnum):
    FOLD = 0
    CALL = 1
    RAISE = 2


class Rank(IntEnum):
    JACK = 0
    QUEEN = 1
    KING = 2
    ACE = 3


class BettingType(IntEnum):
    LIMIT = 0
    NO_LIMIT = 1


NUM_ACTIONS = len(ActionType)
NUM_RANKS = len(Rank)
NUM_PLAYERS = 3
NUM_SITUATIONS = 4

ANTE = 1.0
RAISE_SIZE = 1.0

ACTION_CHARS = "fcr"
RANK_CHARS = "JQKA"

# Slot order is significant: callers pass the vector positionally.
PARAM_NAMES = ("c11", "b11", "b21", "b32", "c33", "c34", "b23", "b33", "b41", "c21")
FREE_PARAM_NAMES = PARAM_NAMES[:6]
NUM_PARAMS = len(PARAM_NAMES)

(
    C11_INDEX,
    B11_INDEX,
    B21_INDEX,
    B32_INDEX,
    C33_INDEX,
    C34_INDEX,
    B23_INDEX,
    B33_INDEX,
    B41_INDEX,
    C21_INDEX,
) = range(NUM_PARAMS)

SUB_FAMILY_DEFINING_PARAM_INDEX = C11_INDEX
