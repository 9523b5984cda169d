from typing import Callable

import pytest

from kuhn3p.params import ParameterVector, check_params

FAMILY_1_FREE = {"c11": 0.25, "b11": 0.1, "b21": 0.2, "b32": 0.5, "c33": 0.25, "c34": 0.4}


@pytest.fixture
def family_1_free() -> dict[str, float]:
    return dict(FAMILY_1_FREE)


@pytest.fixture
def make_params() -> Callable[..., ParameterVector]:
    def _make(**overrides: float) -> ParameterVector:
        return ParameterVector.from_named(**{**FAMILY_1_FREE, **overrides})

    return _make


@pytest.fixture
def family_1_params(make_params) -> ParameterVector:
    return check_params(make_params()).unwrap()


KUHN_GAMEDEF = """\
# 3-player Kuhn poker
GAMEDEF
limit
numPlayers = 3
numRounds = 1
blind = 1 1 1
raiseSize = 1
firstPlayer = 1
maxRaises = 1
numSuits = 1
numRanks = 4
numHoleCards = 1
numBoardCards = 0
END GAMEDEF
"""


@pytest.fixture
def kuhn_gamedef() -> str:
    return KUHN_GAMEDEF
