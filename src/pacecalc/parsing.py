"""Parsers turning user input strings into base-unit values."""

import logging
import math
import re

from . import units
from .errors import (
    DistanceSyntaxError,
    DivisionByZeroError,
    PrecisionSyntaxError,
    SpeedSyntaxError,
    TimeSyntaxError,
)
from .models import Entity

logger = logging.getLogger(__name__)

# Compound time prefixes, consumed once each and only in this order
TIME_PREFIXES = ("w", "d", "h", "m")
_TIME_PREFIX_PATTERNS = {unit: re.compile(rf"^(\d+){unit}") for unit in TIME_PREFIXES}
_SECONDS_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)s?$")

_DISTANCE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(yd|m|km|mi)?$")

# 330/mi, 5m30s/km
_PACE_PATTERN = re.compile(r"^(.+)/(m|yd|km|mi)$")
# 12km/h, 3.5m/s, 300s/km
_SPEED_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(m/s|km/h|yd/s|mi/h|s/m|s/yd|s/km|s/mi)?$")

_PRECISION_PATTERN = re.compile(r"^\d+$")
MAX_PRECISION = 20


def parse_time(value: str) -> float:
    """
    Parse a compound duration into seconds.

    Accepts ``<int>w``, ``<int>d``, ``<int>h`` and ``<int>m`` prefixes, each at
    most once and in that order, followed by optional plain seconds
    (``<number>[.<number>]`` with an optional ``s``). Sub-units are not range
    checked, so ``1h90m`` is 9000 seconds.

    Args:
        value: Duration such as ``90``, ``1h30m`` or ``2w3d4.5s``

    Returns:
        Duration in seconds

    Raises:
        TimeSyntaxError: If *value* is not a valid duration or does not fit a float
    """
    remainder = value.strip()
    if not remainder:
        raise TimeSyntaxError(value)

    seconds = 0.0
    try:
        for unit in TIME_PREFIXES:
            match = _TIME_PREFIX_PATTERNS[unit].match(remainder)
            if match:
                seconds += int(match.group(1)) * units.factor(Entity.TIME, unit)
                remainder = remainder[match.end() :]

        if remainder:
            match = _SECONDS_PATTERN.match(remainder)
            if not match:
                raise TimeSyntaxError(value)
            seconds += float(match.group(1))
    except (OverflowError, ValueError):
        raise TimeSyntaxError(value) from None

    if not math.isfinite(seconds):
        raise TimeSyntaxError(value)

    logger.debug(f"Parsed time '{value}' as {seconds}s")
    return seconds


def parse_distance(value: str) -> float:
    """
    Parse a distance into meters.

    Raises:
        DistanceSyntaxError: If *value* is not ``<number>[yd|m|km|mi]``
            or does not fit a float
    """
    match = _DISTANCE_PATTERN.match(value.strip())
    if not match:
        raise DistanceSyntaxError(value)

    unit = match.group(2) or units.default_unit(Entity.DISTANCE)
    meters = units.to_base(float(match.group(1)), Entity.DISTANCE, unit)
    if not math.isfinite(meters):
        raise DistanceSyntaxError(value)

    logger.debug(f"Parsed distance '{value}' as {meters}m")
    return meters


def parse_speed(value: str) -> float:
    """
    Parse a speed or pace into meters per second.

    Two forms are accepted:

    - pace, ``<time>/<distance unit>``: a duration per one distance unit,
      where ``<time>`` follows :func:`parse_time` (``330/mi``, ``4m30s/km``)
    - speed, ``<number>[unit]`` where unit is a distance-per-time unit or an
      ``s/<distance unit>`` pace unit; ``km/h`` is assumed when omitted

    Raises:
        SpeedSyntaxError: If *value* matches neither form or does not fit a float
        DivisionByZeroError: For a pace of zero seconds
    """
    text = value.strip()

    pace_match = _PACE_PATTERN.match(text)
    if pace_match:
        try:
            seconds = parse_time(pace_match.group(1))
        except TimeSyntaxError:
            raise SpeedSyntaxError(value) from None
        distance = units.factor(Entity.DISTANCE, pace_match.group(2))
        if seconds == 0:
            raise DivisionByZeroError(f"Pace of zero seconds is not a speed: '{value}'")
        speed = distance / seconds
        if not math.isfinite(speed):
            raise SpeedSyntaxError(value)
        logger.debug(f"Parsed pace '{value}' as {speed}m/s")
        return speed

    match = _SPEED_PATTERN.match(text)
    if not match:
        raise SpeedSyntaxError(value)

    number = float(match.group(1))
    if not math.isfinite(number):
        raise SpeedSyntaxError(value)

    unit = match.group(2) or units.default_unit(Entity.SPEED)
    try:
        speed = units.to_base(number, Entity.SPEED, unit)
    except ZeroDivisionError:
        raise DivisionByZeroError(f"Pace of zero seconds is not a speed: '{value}'") from None
    except OverflowError:
        raise SpeedSyntaxError(value) from None
    if not math.isfinite(speed):
        raise SpeedSyntaxError(value)

    logger.debug(f"Parsed speed '{value}' as {speed}m/s")
    return speed


def parse_precision(value: str) -> int:
    """
    Parse the number of decimal places for numeric output.

    Raises:
        PrecisionSyntaxError: If *value* is not an integer from 0 to MAX_PRECISION
    """
    digits = value.strip()
    if not _PRECISION_PATTERN.match(digits):
        raise PrecisionSyntaxError(value, MAX_PRECISION)
    significant = digits.lstrip("0") or "0"
    # int() rejects strings over 4300 digits
    if len(significant) > len(str(MAX_PRECISION)) or int(significant) > MAX_PRECISION:
        raise PrecisionSyntaxError(value, MAX_PRECISION)
    return int(significant)


PARSERS = {
    Entity.TIME: parse_time,
    Entity.DISTANCE: parse_distance,
    Entity.SPEED: parse_speed,
}


def parse_quantity(entity: Entity, value: str) -> float:
    """Parse *value* with the parser for *entity*."""
    return PARSERS[entity](value)
