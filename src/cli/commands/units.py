"""Units command for pace CLI."""

import json

import typer

from cli import display
from pacecalc import units
from pacecalc.models import Entity


def list_units(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """List every supported unit."""
    data = {
        entity.value: [
            {
                "unit": unit,
                "label": units.label(entity, unit),
                "factor": units.factor(entity, unit),
                "pace": units.is_reciprocal(unit, entity),
                "default": unit == units.default_unit(entity),
            }
            for unit in units.units_for(entity)
        ]
        for entity in Entity
    }

    if json_output:
        print(json.dumps(data, indent=2))
    else:
        display.display_units(data)
