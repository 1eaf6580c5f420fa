"""The distance = speed x time relation."""

import logging
import math
from collections.abc import Mapping

from .errors import DivisionByZeroError, NoTargetError, ResultOutOfRangeError
from .models import Entity

logger = logging.getLogger(__name__)


def compute(target: Entity, values: Mapping[Entity, float]) -> float:
    """
    Derive *target* from the other two quantities.

    All values are in base units (s, m, m/s) and so is the result.

    Raises:
        NoTargetError: If an input needed for *target* is missing
        DivisionByZeroError: If the divisor is zero
        ResultOutOfRangeError: If the result does not fit a float
    """
    try:
        if target is Entity.DISTANCE:
            result = values[Entity.SPEED] * values[Entity.TIME]
        elif target is Entity.SPEED:
            result = values[Entity.DISTANCE] / values[Entity.TIME]
        elif target is Entity.TIME:
            result = values[Entity.DISTANCE] / values[Entity.SPEED]
        else:
            raise NoTargetError(f"No formula for target {target!r}")
    except KeyError as e:
        raise NoTargetError(f"Cannot compute {target.value}: missing {e.args[0].value}") from None
    except OverflowError:
        result = math.inf
    except ZeroDivisionError:
        divisor = Entity.TIME if target is Entity.SPEED else Entity.SPEED
        raise DivisionByZeroError(
            f"Cannot compute {target.value} with a {divisor.value} of zero"
        ) from None

    if not math.isfinite(result):
        raise ResultOutOfRangeError(f"The computed {target.value} is too large")

    inputs = {entity.value: value for entity, value in values.items()}
    logger.debug(f"Computed {target.value} = {result} from {inputs}")
    return result
