"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.cli.io import console

TITLES = {
    "trebuchet": "Trebuchet Calibration",
    "cube_game": "Cube Game",
    "schematic": "Engine Schematic",
}


def render_puzzle_result(result: dict[str, Any]) -> None:
    """Display both answers of a puzzle run, then any skipped lines."""

    puzzle = result.get("puzzle") or ""
    lines = [
        f"[bold]Part one:[/] {result.get('part_one')}",
        f"[bold]Part two:[/] {result.get('part_two')}",
    ]
    console.print(Panel("\n".join(lines), title=TITLES.get(puzzle, puzzle)))

    errors = result.get("errors") or []
    if errors:
        render_skipped_lines(errors)


def render_skipped_lines(errors: list[dict[str, Any]]) -> None:
    """Render the lines that were skipped as malformed."""

    table = Table(title="Skipped lines", show_lines=False)
    table.add_column("Line", justify="right", style="yellow")
    table.add_column("Reason")
    table.add_column("Content", overflow="fold")
    for error in errors:
        table.add_row(
            str(error.get("line_number", "")),
            escape(str(error.get("reason", ""))),
            escape(str(error.get("line", ""))),
        )
    console.print(table)


def render_settings(settings: dict[str, Any]) -> None:
    """Render the effective configuration as a two-column table."""

    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for section, values in settings.items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        else:
            table.add_row(section, str(values))
    console.print(table)
