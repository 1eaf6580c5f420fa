"""Time, distance and speed calculator engine."""

from .calculation import calculate
from .errors import CalculatorError, ErrorCode
from .models import CalculationRequest, CalculationResult, Entity, Mode

__all__ = [
    "calculate",
    "CalculatorError",
    "ErrorCode",
    "CalculationRequest",
    "CalculationResult",
    "Entity",
    "Mode",
]
