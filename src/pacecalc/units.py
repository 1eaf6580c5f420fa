"""Unit registry for time, distance and speed.

All factors convert a value expressed in a unit to the entity's base unit
(seconds, meters, meters per second) by multiplication.
"""

from types import MappingProxyType
from typing import Any, Mapping

from .models import Entity, EntitySpec

# Time factors (to seconds)
TIME_FACTORS = {
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
    "w": 604800.0,
}

# Distance factors (to meters)
DISTANCE_FACTORS = {
    "m": 1.0,
    "yd": 0.9144,
    "km": 1000.0,
    "mi": 1609.344,
}


def _speed_factor(distance_unit: str, time_unit: str) -> float:
    return DISTANCE_FACTORS[distance_unit] / TIME_FACTORS[time_unit]


# Pace units share the factor of the matching distance-per-second unit;
# the reciprocal flag decides whether the value gets inverted.
SPEED_FACTORS = {
    "m/s": _speed_factor("m", "s"),
    "km/h": _speed_factor("km", "h"),
    "yd/s": _speed_factor("yd", "s"),
    "mi/h": _speed_factor("mi", "h"),
    "s/m": _speed_factor("m", "s"),
    "s/yd": _speed_factor("yd", "s"),
    "s/km": _speed_factor("km", "s"),
    "s/mi": _speed_factor("mi", "s"),
    "/m": _speed_factor("m", "s"),
    "/yd": _speed_factor("yd", "s"),
    "/km": _speed_factor("km", "s"),
    "/mi": _speed_factor("mi", "s"),
}

SPEED_LABELS = {
    "m/s": "m/s",
    "km/h": "km/h",
    "yd/s": "yd/s",
    "mi/h": "mi/h",
    "s/m": "sec/m",
    "s/yd": "sec/yd",
    "s/km": "sec/km",
    "s/mi": "sec/mi",
    "/m": "/m",
    "/yd": "/yd",
    "/km": "/km",
    "/mi": "/mi",
}

UNIT_TABLE: Mapping[Entity, EntitySpec] = MappingProxyType(
    {
        Entity.TIME: EntitySpec(
            entity=Entity.TIME,
            display_name="time",
            option_key="t",
            default_unit="s",
            base_unit="s",
            factors=TIME_FACTORS,
            labels={unit: unit for unit in TIME_FACTORS},
        ),
        Entity.DISTANCE: EntitySpec(
            entity=Entity.DISTANCE,
            display_name="distance",
            option_key="d",
            default_unit="m",
            base_unit="m",
            factors=DISTANCE_FACTORS,
            labels={unit: unit for unit in DISTANCE_FACTORS},
        ),
        Entity.SPEED: EntitySpec(
            entity=Entity.SPEED,
            display_name="speed",
            option_key="s",
            default_unit="km/h",
            base_unit="m/s",
            factors=SPEED_FACTORS,
            labels=SPEED_LABELS,
            reciprocal={unit: unit.startswith(("s/", "/")) for unit in SPEED_FACTORS},
        ),
    }
)


def get_spec(entity: Entity) -> EntitySpec:
    """Return the unit record for *entity*."""
    return UNIT_TABLE[entity]


def _lookup(table: Mapping[str, Any], entity: Entity, unit: str) -> Any:
    try:
        return table[unit]
    except KeyError:
        raise KeyError(f"Unknown {entity.value} unit: {unit!r}") from None


def factor(entity: Entity, unit: str) -> float:
    """Return the factor converting *unit* to the base unit of *entity*."""
    return float(_lookup(get_spec(entity).factors, entity, unit))


def label(entity: Entity, unit: str) -> str:
    """Return the display label for *unit*."""
    return str(_lookup(get_spec(entity).labels, entity, unit))


def default_unit(entity: Entity) -> str:
    return get_spec(entity).default_unit


def base_unit(entity: Entity) -> str:
    return get_spec(entity).base_unit


def is_reciprocal(unit: str, entity: Entity = Entity.SPEED) -> bool:
    """Return True when *unit* is a pace (time per distance) unit."""
    spec = get_spec(entity)
    _lookup(spec.factors, entity, unit)
    return spec.reciprocal.get(unit, False)


def units_for(entity: Entity) -> list[str]:
    """Return the unit names of *entity* in declaration order."""
    return list(get_spec(entity).factors)


def to_base(value: float, entity: Entity, unit: str) -> float:
    """
    Convert *value* expressed in *unit* to the base unit of *entity*.

    Pace values are inverted, so ``to_base(300, SPEED, "s/km")`` is the
    speed of 300 seconds per kilometer in meters per second.

    Raises:
        ZeroDivisionError: For a pace of zero
    """
    if is_reciprocal(unit, entity):
        return factor(entity, unit) / value
    return value * factor(entity, unit)


def from_base(value: float, entity: Entity, unit: str) -> float:
    """
    Convert a base-unit *value* of *entity* to *unit*.

    Raises:
        ZeroDivisionError: When a zero speed is converted to a pace
    """
    converted = value / factor(entity, unit)
    if is_reciprocal(unit, entity):
        return 1 / converted
    return converted


__all__ = [
    "UNIT_TABLE",
    "get_spec",
    "factor",
    "label",
    "default_unit",
    "base_unit",
    "is_reciprocal",
    "units_for",
    "to_base",
    "from_base",
]
