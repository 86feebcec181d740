"""Settings command for the puzzle CLI."""

from __future__ import annotations

import typer
from rich.markup import escape

from src.cli.io import console
from src.cli.renderers import render_settings
from src.cli.utils import resolve_orchestrator


def settings_show(
    as_json: bool = typer.Option(False, "--json", help="Print settings as JSON."),
) -> None:
    """Display the effective configuration, including environment overrides."""

    orchestrator = resolve_orchestrator()
    try:
        settings = orchestrator.execute("config_show", {})
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc
    if as_json:
        console.print_json(data=settings)
    else:
        render_settings(settings)
