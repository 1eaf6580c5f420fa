"""Rendering of base-unit results."""

import math

from . import units
from .errors import DivisionByZeroError, ResultOutOfRangeError
from .models import Entity

# (divisor to the next larger unit, suffix), smallest unit first
DURATION_UNITS = (
    (60, "s"),
    (60, "m"),
    (24, "h"),
    (7, "d"),
)
WEEK_SUFFIX = "w"


def format_duration(seconds: float) -> str:
    """
    Format seconds as a compact duration.

    Rounds to the nearest second (halves up). The largest non-zero unit is
    written as is, every smaller unit is zero-padded to two digits.

    Examples:
        ``59`` -> ``"59s"``, ``90`` -> ``"1m30s"``, ``3661`` -> ``"1h01m01s"``,
        ``604800`` -> ``"1w00d00h00m00s"``

    Raises:
        ResultOutOfRangeError: If *seconds* is not finite
    """
    if not math.isfinite(seconds):
        raise ResultOutOfRangeError(f"Cannot format a duration of {seconds}")

    remaining = math.floor(seconds + 0.5)
    parts: list[tuple[int, str]] = []
    for divisor, suffix in DURATION_UNITS:
        parts.append((remaining % divisor, suffix))
        remaining //= divisor
    parts.append((remaining, WEEK_SUFFIX))
    parts.reverse()

    # Drop leading zero units but always keep seconds
    while len(parts) > 1 and parts[0][0] == 0:
        parts.pop(0)

    (leading, leading_suffix), rest = parts[0], parts[1:]
    return f"{leading}{leading_suffix}" + "".join(f"{value:02d}{suffix}" for value, suffix in rest)


def format_number(value: float, unit_label: str, precision: int) -> str:
    """
    Format a fixed-point number followed by its unit label.

    Raises:
        ResultOutOfRangeError: If *value* is not finite
    """
    if not math.isfinite(value):
        raise ResultOutOfRangeError(f"Cannot format {value} {unit_label}")
    return f"{value:.{precision}f} {unit_label}"


def convert_output(target: Entity, base_value: float, unit: str) -> float:
    """
    Convert a base-unit result to *unit*, inverting pace units.

    Raises:
        DivisionByZeroError: When a zero speed is converted to a pace
        ResultOutOfRangeError: If the converted value does not fit a float
    """
    try:
        value = units.from_base(base_value, target, unit)
    except ZeroDivisionError:
        raise DivisionByZeroError(f"A speed of zero has no pace in {unit}") from None
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise ResultOutOfRangeError(f"The {target.value} is out of range in {unit}")
    return value


def render(target: Entity, value: float, unit: str | None, precision: int) -> str:
    """
    Render a result already converted to *unit*.

    Time is always a humanized duration; *unit* and *precision* are ignored.
    Pace units starting with ``/`` are rendered as a duration per distance
    unit (``5m00s/km``), ``s/<unit>`` paces and every other unit as a
    fixed-point number with its label (``300.00 sec/km``, ``10.00 km/h``).
    """
    if target is Entity.TIME:
        return format_duration(value)

    unit = unit or units.default_unit(target)
    unit_label = units.label(target, unit)

    if target is Entity.SPEED and units.is_reciprocal(unit) and unit.startswith("/"):
        return format_duration(value) + unit_label
    return format_number(value, unit_label, precision)
