"""Data models for the calculator."""

from .calculation import CalculationRequest, CalculationResult, Mode
from .entity import EntitySpec
from .enums import Entity

__all__ = [
    # Enums
    "Entity",
    # Records
    "EntitySpec",
    "Mode",
    "CalculationRequest",
    "CalculationResult",
]
