"""End-to-end calculation: parse, select, compute and format."""

import logging

from . import units
from .calculator import compute
from .config import get_settings
from .errors import (
    DistanceOutputFormatError,
    OutputFormatError,
    OutputUnitNotApplicableError,
    SpeedOutputFormatError,
)
from .formatting import convert_output, render
from .modes import select_mode
from .models import CalculationRequest, CalculationResult, Entity
from .parsing import parse_precision, parse_quantity

logger = logging.getLogger(__name__)

OUTPUT_FORMAT_ERRORS: dict[Entity, type[OutputFormatError]] = {
    Entity.SPEED: SpeedOutputFormatError,
    Entity.DISTANCE: DistanceOutputFormatError,
}


def resolve_output_unit(target: Entity, unit: str | None) -> str | None:
    """
    Validate the requested output unit against *target*.

    Returns:
        The unit to render in, the target's default when *unit* is None,
        or None when the target is time

    Raises:
        OutputUnitNotApplicableError: If a unit is given for a time target
        OutputFormatError: If *unit* is blank
        SpeedOutputFormatError: If *unit* is not a speed or pace unit
        DistanceOutputFormatError: If *unit* is not a distance unit
    """
    if target is Entity.TIME:
        if unit is not None:
            raise OutputUnitNotApplicableError()
        return None

    if unit is None:
        return units.default_unit(target)

    unit = unit.strip()
    if not unit:
        raise OutputFormatError(unit)
    allowed = units.units_for(target)
    if unit not in allowed:
        raise OUTPUT_FORMAT_ERRORS[target](unit, allowed)
    return unit


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Run one calculation.

    Given two of time, distance and speed the third is computed; given one,
    it is converted to the output unit.

    Args:
        request: Raw option values

    Returns:
        Result holding the rendered line and the underlying numbers

    Raises:
        CalculatorError: Any failure, carrying its exit code
    """
    mode = select_mode(request.provided())
    logger.debug(f"Target {mode.target.value}, recalculate={mode.recalculate}")

    if request.precision is not None:
        precision = parse_precision(request.precision)
    else:
        precision = get_settings().default_precision

    raw = {
        Entity.TIME: request.time,
        Entity.DISTANCE: request.distance,
        Entity.SPEED: request.speed,
    }
    values = {entity: parse_quantity(entity, text) for entity, text in raw.items() if text is not None}

    unit = resolve_output_unit(mode.target, request.output_unit)

    if mode.recalculate:
        base_value = compute(mode.target, values)
    else:
        base_value = values[mode.target]

    if unit is None:
        output_value = base_value
    else:
        output_value = convert_output(mode.target, base_value, unit)

    text = render(mode.target, output_value, unit, precision)
    logger.debug(f"Result {base_value} {units.base_unit(mode.target)} -> '{text}'")

    return CalculationResult(
        target=mode.target,
        recalculated=mode.recalculate,
        base_value=base_value,
        output_value=output_value,
        unit=unit,
        text=text,
    )
