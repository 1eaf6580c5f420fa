"""Error types raised by the calculator core.

Every error carries a stable ``code`` which the CLI uses as its exit status.
"""

from enum import IntEnum

from .models import Entity
from .units import get_spec


class ErrorCode(IntEnum):
    """Exit status for each failure kind."""

    TOO_MANY_INPUTS = 1
    MISSING_INPUT = 2
    TIME_SYNTAX = 3
    SPEED_SYNTAX = 4
    DISTANCE_SYNTAX = 5
    OUTPUT_FORMAT = 6
    SPEED_OUTPUT_FORMAT = 7
    DISTANCE_OUTPUT_FORMAT = 8
    OUTPUT_NOT_APPLICABLE = 9
    PRECISION_SYNTAX = 10
    NO_TARGET = 11
    DIVISION_BY_ZERO = 12
    RESULT_OUT_OF_RANGE = 13
    CONFIGURATION = 14


class CalculatorError(Exception):
    """Base class for all calculator failures."""

    code: ErrorCode = ErrorCode.NO_TARGET

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        """Snake-case name of the failure kind."""
        return self.code.name.lower()


class TooManyInputsError(CalculatorError):
    """Raised when time, distance and speed are all given."""

    code = ErrorCode.TOO_MANY_INPUTS

    def __init__(self) -> None:
        super().__init__("Only two of time, distance and speed may be given")


class MissingInputError(CalculatorError):
    """Raised when none of time, distance and speed is given."""

    code = ErrorCode.MISSING_INPUT

    def __init__(self) -> None:
        super().__init__("At least one of time, distance or speed is required")


class QuantitySyntaxError(CalculatorError):
    """Raised when an input string cannot be parsed."""

    entity: Entity

    def __init__(self, value: str) -> None:
        spec = get_spec(self.entity)
        super().__init__(f"Invalid {spec.display_name} syntax for -{spec.option_key}: '{value}'")
        self.value = value


class TimeSyntaxError(QuantitySyntaxError):
    code = ErrorCode.TIME_SYNTAX
    entity = Entity.TIME


class SpeedSyntaxError(QuantitySyntaxError):
    code = ErrorCode.SPEED_SYNTAX
    entity = Entity.SPEED


class DistanceSyntaxError(QuantitySyntaxError):
    code = ErrorCode.DISTANCE_SYNTAX
    entity = Entity.DISTANCE


class OutputFormatError(CalculatorError):
    """Raised when the requested output unit is unusable."""

    code = ErrorCode.OUTPUT_FORMAT

    def __init__(self, unit: str, expected: list[str] | None = None) -> None:
        message = f"Invalid output unit: '{unit}'"
        if expected:
            message += f"; expected one of {', '.join(expected)}"
        super().__init__(message)
        self.unit = unit


class SpeedOutputFormatError(OutputFormatError):
    code = ErrorCode.SPEED_OUTPUT_FORMAT


class DistanceOutputFormatError(OutputFormatError):
    code = ErrorCode.DISTANCE_OUTPUT_FORMAT


class OutputUnitNotApplicableError(CalculatorError):
    """Raised when an output unit is given but time is the target."""

    code = ErrorCode.OUTPUT_NOT_APPLICABLE

    def __init__(self) -> None:
        super().__init__("An output unit cannot be used when the result is a time")


class PrecisionSyntaxError(CalculatorError):
    code = ErrorCode.PRECISION_SYNTAX

    def __init__(self, value: str, maximum: int) -> None:
        super().__init__(f"Precision must be an integer from 0 to {maximum}, got '{value}'")
        self.value = value


class NoTargetError(CalculatorError):
    """Raised when no formula exists for the requested target."""

    code = ErrorCode.NO_TARGET


class DivisionByZeroError(CalculatorError):
    """Raised instead of producing an infinite or undefined result."""

    code = ErrorCode.DIVISION_BY_ZERO


class ResultOutOfRangeError(CalculatorError):
    """Raised when a result does not fit a finite float."""

    code = ErrorCode.RESULT_OUT_OF_RANGE


class ConfigurationError(CalculatorError):
    """Raised when PACECALC_* settings are invalid."""

    code = ErrorCode.CONFIGURATION
