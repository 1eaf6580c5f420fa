"""Selection of the target quantity from the supplied inputs."""

from collections.abc import Iterable

from .errors import MissingInputError, TooManyInputsError
from .models import Entity, Mode

ALL_ENTITIES = frozenset(Entity)


def select_mode(provided: Iterable[Entity]) -> Mode:
    """
    Decide which quantity to produce.

    With two inputs the missing third one is computed. With a single input
    that same quantity is the target and only unit conversion happens.

    Raises:
        TooManyInputsError: If all three quantities are given
        MissingInputError: If none is given
    """
    given = frozenset(provided)

    if given == ALL_ENTITIES:
        raise TooManyInputsError()
    if not given:
        raise MissingInputError()
    if len(given) == 1:
        (target,) = given
        return Mode(target=target, recalculate=False)

    (target,) = ALL_ENTITIES - given
    return Mode(target=target, recalculate=True)
