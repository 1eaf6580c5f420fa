"""Calculation command for pace CLI."""

import json
import logging

import typer

from cli import display
from pacecalc import CalculationRequest, CalculatorError, calculate

logger = logging.getLogger(__name__)


def run(
    time: str | None = None,
    distance: str | None = None,
    speed: str | None = None,
    precision: str | None = None,
    output: str | None = None,
    json_output: bool = False,
) -> None:
    """
    Compute the missing quantity, or convert a single one, and print it.

    Raises:
        typer.Exit: With the error's code when the calculation fails
    """
    request = CalculationRequest(
        time=time,
        distance=distance,
        speed=speed,
        output_unit=output,
        precision=precision,
    )
    logger.debug(f"Request: {request.model_dump(exclude_none=True)}")

    try:
        result = calculate(request)
    except CalculatorError as e:
        logger.debug(f"Calculation failed: {e.kind} ({e.code})")
        display.display_error(e.message)
        display.display_info("Run 'pace --help' for usage")
        raise typer.Exit(code=int(e.code)) from None

    if json_output:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        display.display_result(result.text)
