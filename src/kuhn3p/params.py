"""
Strategy parameters of the 3-player Kuhn poker equilibrium family.

The family is split into three sub-families selected by the value of ``c11``
(the probability that seat 2 bets a Jack after two checks). Only sub-family 1
has closed-form constraints; checking it also fills in the parameters the
equilibrium forces as functions of the free ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
import math
from typing import Iterator, Sequence

from .constants import (
    B11_INDEX,
    B21_INDEX,
    B23_INDEX,
    B32_INDEX,
    B33_INDEX,
    B41_INDEX,
    C21_INDEX,
    C33_INDEX,
    NUM_PARAMS,
    PARAM_NAMES,
    SUB_FAMILY_DEFINING_PARAM_INDEX,
)
from .errors import (
    ConstructionError,
    FamilyConstraintViolatedError,
    ParameterOutOfFamilyRangeError,
    ParameterOutOfUnitIntervalError,
)

logger = logging.getLogger(__name__)


class EquilibriumFamily(IntEnum):
    FAMILY_1 = 1
    FAMILY_2 = 2
    FAMILY_3 = 3


SUB_FAMILY_DEFINING_PARAM_VALUES = {
    0.0: EquilibriumFamily.FAMILY_2,
    0.5: EquilibriumFamily.FAMILY_3,
}


@dataclass(frozen=True, slots=True)
class ParameterVector:
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) != NUM_PARAMS:
            raise ValueError(f"Expected {NUM_PARAMS} strategy parameters, got {len(self.values)}")
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    @classmethod
    def from_named(cls, **named: float) -> ParameterVector:
        """
        Build a vector from parameters given by name; unnamed slots start at 0.

        Derived slots (b23, b33, b41, c21) are accepted too: sub-family 1
        overwrites them on checking, sub-families 2 and 3 use them as given.
        """
        unknown = set(named) - set(PARAM_NAMES)
        if unknown:
            raise ValueError(f"Unknown strategy parameters: {sorted(unknown)}")
        return cls(tuple(float(named.get(name, 0.0)) for name in PARAM_NAMES))

    def __len__(self) -> int:
        return NUM_PARAMS

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, key: int | str) -> float:
        if isinstance(key, str):
            if key not in PARAM_NAMES:
                raise KeyError(key)
            key = PARAM_NAMES.index(key)
        return self.values[key]

    def replace(self, updates: dict[int, float]) -> ParameterVector:
        values = list(self.values)
        for index, value in updates.items():
            values[index] = value
        return ParameterVector(tuple(values))

    def as_dict(self) -> dict[str, float]:
        return dict(zip(PARAM_NAMES, self.values))

    @property
    def beta(self) -> float:
        return max(self.values[B11_INDEX], self.values[B21_INDEX])


@dataclass(frozen=True, slots=True)
class ParamCheckResult:
    params: ParameterVector | None
    family: EquilibriumFamily | None
    error: ConstructionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ParameterVector:
        if self.error is not None:
            raise self.error
        assert self.params is not None
        return self.params


def classify_family(c11: float) -> EquilibriumFamily | None:
    """Only the exact values 0 and 1/2 select families 2 and 3; no tolerance is applied."""
    for value, family in SUB_FAMILY_DEFINING_PARAM_VALUES.items():
        if c11 == value:
            return family
    if 0.0 < c11 < 0.5:
        return EquilibriumFamily.FAMILY_1
    return None


def check_family_1(params: ParameterVector) -> ParamCheckResult:
    b11 = params[B11_INDEX]
    b21 = params[B21_INDEX]
    b32 = params[B32_INDEX]
    c33 = params[C33_INDEX]
    family = EquilibriumFamily.FAMILY_1

    def violated(message: str) -> ParamCheckResult:
        return ParamCheckResult(None, family, FamilyConstraintViolatedError(message))

    if b21 > 1 / 4:
        return violated("b21 greater than 1/4")
    if b11 > b21:
        return violated("b11 greater than b21")
    if b32 > (2 + 3 * b11 + 4 * b21) / 4:
        return violated("b32 too large for any sub-family 1 equilibrium")
    if c33 < 1 / 2 - b32:
        return violated("c33 too small for any sub-family 1 equilibrium")
    if c33 > 1 / 2 - b32 + (3 * b11 + 4 * b21) / 4:
        return violated("c33 too large for any sub-family 1 equilibrium")

    derived = params.replace(
        {
            B23_INDEX: 0.0,
            B33_INDEX: (1 + b11 + 2 * b21) / 2,
            B41_INDEX: 2 * b11 + 2 * b21,
            C21_INDEX: 1 / 2,
        }
    )
    return ParamCheckResult(derived, family)


def check_params(params: ParameterVector | Sequence[float]) -> ParamCheckResult:
    if not isinstance(params, ParameterVector):
        params = ParameterVector(tuple(params))

    family = classify_family(params[SUB_FAMILY_DEFINING_PARAM_INDEX])
    if family is None:
        return ParamCheckResult(
            None,
            None,
            ParameterOutOfFamilyRangeError("c11 parameter outside of range for any equilibrium sub-family"),
        )

    if family == EquilibriumFamily.FAMILY_1:
        result = check_family_1(params)
        if not result.ok:
            return result
        params = result.params
    else:
        # TODO: add the closed-form constraints for sub-families 2 and 3.
        logger.warning("Sub-family %d parameters are not checked beyond the [0, 1] bounds", int(family))

    for name, value in zip(PARAM_NAMES, params):
        if math.isnan(value) or value < 0.0 or value > 1.0:
            return ParamCheckResult(
                None,
                family,
                ParameterOutOfUnitIntervalError(f"strategy parameters must be in [0,1], got {name}={value}"),
            )

    return ParamCheckResult(params, family)
