"""Advent puzzle solver CLI package."""

from __future__ import annotations

import logging

import typer

from src.cli.commands.puzzles import cube_game, schematic, trebuchet
from src.cli.commands.settings import settings_show
from src.cli.io import console
from src.cli.renderers import (
    render_puzzle_result,
    render_settings,
    render_skipped_lines,
)
from src.cli.runtime import (
    get_orchestrator,
    get_runtime,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from src.cli.utils import apply_log_override, load_lines, resolve_orchestrator
from src.core.logging_setup import configure_logging
from src.core.orchestrator import Orchestrator
from src.services.config_service import ConfigService

logger = logging.getLogger(__name__)

# Typer applications ---------------------------------------------------------

app = typer.Typer(add_completion=False, help="Advent puzzle solvers")
settings_app = typer.Typer(
    add_completion=False, help="Inspect the effective configuration."
)


@settings_app.callback(invoke_without_command=True)
def _settings_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        settings_show(as_json=False)


# Command registration -------------------------------------------------------

app.command("trebuchet")(trebuchet)
app.command("cube-game")(cube_game)
app.command("schematic")(schematic)

settings_app.command("show")(settings_show)

app.add_typer(settings_app, name="settings")


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer apps / entrypoints
    "app",
    "settings_app",
    "main",
    # Console & logging
    "console",
    "logger",
    "configure_logging",
    # Runtime
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
    "resolve_orchestrator",
    # Commands
    "trebuchet",
    "cube_game",
    "schematic",
    "settings_show",
    # Renderers
    "render_puzzle_result",
    "render_settings",
    "render_skipped_lines",
    # Utilities
    "apply_log_override",
    "load_lines",
    # External classes re-exported for tests/compatibility
    "ConfigService",
    "Orchestrator",
]
