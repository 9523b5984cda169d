from enum import Enum


class ErrorKind(Enum):
    WRONG_GAME_SHAPE = "wrong_game_shape"
    PARAMETER_OUT_OF_FAMILY_RANGE = "parameter_out_of_family_range"
    FAMILY_CONSTRAINT_VIOLATED = "family_constraint_violated"
    PARAMETER_OUT_OF_UNIT_INTERVAL = "parameter_out_of_unit_interval"


class ConstructionError(ValueError):
    """Raised when an equilibrium player cannot be built from its inputs."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WrongGameShapeError(ConstructionError):
    kind = ErrorKind.WRONG_GAME_SHAPE


class ParameterOutOfFamilyRangeError(ConstructionError):
    kind = ErrorKind.PARAMETER_OUT_OF_FAMILY_RANGE


class FamilyConstraintViolatedError(ConstructionError):
    kind = ErrorKind.FAMILY_CONSTRAINT_VIOLATED


class ParameterOutOfUnitIntervalError(ConstructionError):
    kind = ErrorKind.PARAMETER_OUT_OF_UNIT_INTERVAL
