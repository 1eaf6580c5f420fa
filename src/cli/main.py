#!/usr/bin/env python3
"""
pace - Time, distance and speed calculator

Give two of time, distance and speed to compute the third, or give one to
convert it to another unit.

Usage:
    pace -t 1h -d 10km           # 10.00 km/h
    pace -d 10km -s 5m/s         # 33m20s
    pace -t 50m -s 300/km        # 10000.00 m
    pace -s 12km/h -o /km        # 5m00s/km
    pace units                   # Supported units
"""

import logging
import sys

import typer
from rich.console import Console

from cli import __version__, display
from cli.commands import calc, units
from pacecalc import CalculatorError
from pacecalc.config import get_settings

# Create the main app
app = typer.Typer(
    name="pace",
    help="Compute time, distance or speed from the other two.",
    no_args_is_help=False,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pace version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    time: str | None = typer.Option(
        None, "--time", "-t", help="Elapsed time, e.g. 90, 1h30m, 2d4h5m3.5s"
    ),
    distance: str | None = typer.Option(
        None, "--distance", "-d", help="Distance in m, yd, km or mi, e.g. 10km"
    ),
    speed: str | None = typer.Option(
        None, "--speed", "-s", help="Speed or pace, e.g. 12km/h, 5m/s, 300s/km, 4m30s/km"
    ),
    precision: str | None = typer.Option(
        None, "--precision", "-p", help="Decimal places for numeric output (default 2)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output unit for a distance or speed result, e.g. mi, /km"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    pace - Compute time, distance or speed from the other two.

    Run without arguments to see this help.
    """
    if ctx.invoked_subcommand is not None:
        return

    options = (time, distance, speed, precision, output)
    if all(option is None for option in options) and not verbose and not json_output:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    try:
        configure_logging(verbose)
    except CalculatorError as e:
        display.display_error(e.message)
        raise typer.Exit(code=int(e.code)) from None

    calc.run(
        time=time,
        distance=distance,
        speed=speed,
        precision=precision,
        output=output,
        json_output=json_output,
    )


# Register commands directly on the app
app.command(name="units")(units.list_units)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
