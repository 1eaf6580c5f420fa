"""Tests for target selection."""

import pytest

from pacecalc.errors import ErrorCode, MissingInputError, TooManyInputsError
from pacecalc.models import Entity, Mode
from pacecalc.modes import select_mode


@pytest.mark.parametrize(
    "provided, target",
    [
        ({Entity.TIME, Entity.DISTANCE}, Entity.SPEED),
        ({Entity.TIME, Entity.SPEED}, Entity.DISTANCE),
        ({Entity.DISTANCE, Entity.SPEED}, Entity.TIME),
    ],
)
def test_two_inputs_compute_the_third(provided, target):
    """Test the missing quantity becomes the target."""
    assert select_mode(provided) == Mode(target=target, recalculate=True)


@pytest.mark.parametrize("entity", list(Entity))
def test_single_input_is_converted(entity):
    """Test a single input is its own target without recalculation."""
    mode = select_mode([entity])
    assert mode.target == entity
    assert mode.recalculate is False


def test_no_input():
    """Test no input fails."""
    with pytest.raises(MissingInputError) as exc_info:
        select_mode(set())
    assert exc_info.value.code == ErrorCode.MISSING_INPUT
    assert exc_info.value.kind == "missing_input"


def test_three_inputs():
    """Test three inputs fail."""
    with pytest.raises(TooManyInputsError) as exc_info:
        select_mode({Entity.TIME, Entity.DISTANCE, Entity.SPEED})
    assert exc_info.value.code == 1


def test_mode_is_immutable():
    """Test modes cannot be modified after selection."""
    mode = select_mode({Entity.SPEED})
    with pytest.raises(Exception):
        mode.target = Entity.TIME
