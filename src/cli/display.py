"""Display utilities for pace CLI with Rich formatting."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def display_result(text: str) -> None:
    """Display a calculation result as a single plain line."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def display_units(data: dict[str, list[dict[str, Any]]]) -> None:
    """Display supported units, one table per entity."""
    for entity, rows in data.items():
        table = Table(title=f"{entity.capitalize()} Units", show_header=True, border_style="cyan")
        table.add_column("Unit", style="cyan")
        table.add_column("Label", style="green")
        table.add_column("Factor", justify="right")
        table.add_column("Pace", justify="center", style="yellow")
        table.add_column("", justify="center")

        for row in rows:
            table.add_row(
                row["unit"],
                row["label"],
                f"{row['factor']:g}",
                "yes" if row["pace"] else "",
                "[bold yellow]*[/bold yellow]" if row["default"] else "",
            )

        console.print(table)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {escape(message)}")
