"""Enumeration types for calculator models."""

from enum import Enum


class Entity(str, Enum):
    """Physical quantity taking part in a calculation."""

    TIME = "time"
    DISTANCE = "distance"
    SPEED = "speed"
