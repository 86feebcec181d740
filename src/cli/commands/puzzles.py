"""Puzzle solving commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.markup import escape

from src.cli.io import console
from src.cli.renderers import render_puzzle_result
from src.cli.utils import apply_log_override, load_lines, resolve_orchestrator
from src.core.errors import ParseError

logger = logging.getLogger(__name__)

INPUT_HELP = "Path to the puzzle input text file."
SKIP_HELP = "Skip malformed lines and report them instead of failing."
JSON_HELP = "Print the answers as JSON."
LOG_LEVEL_HELP = "Override logging level for this invocation (e.g., DEBUG, INFO)."


def _solve(
    workflow: str,
    input_path: Path,
    *,
    skip_invalid: bool,
    as_json: bool,
    log_level: str | None,
) -> None:
    orchestrator = resolve_orchestrator()
    apply_log_override(log_level)

    lines = load_lines(input_path)
    context = {"lines": lines, "skip_invalid": skip_invalid}
    try:
        payload = orchestrator.execute(workflow, context)
    except ParseError as exc:
        console.print(f"[red]Invalid input: {escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc

    result = payload.get("result") or {}
    logger.info("Puzzle solved.", extra={"workflow": workflow})
    if as_json:
        console.print_json(data=result)
    else:
        render_puzzle_result(result)


def trebuchet(
    input_path: Path = typer.Argument(..., help=INPUT_HELP),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help=SKIP_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_HELP),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Sum calibration values, digits only and then with spelled-out digits."""

    _solve(
        "trebuchet",
        input_path,
        skip_invalid=skip_invalid,
        as_json=as_json,
        log_level=log_level,
    )


def cube_game(
    input_path: Path = typer.Argument(..., help=INPUT_HELP),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help=SKIP_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_HELP),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Sum ids of feasible games and the power of each game's minimum cube set."""

    _solve(
        "cube_game",
        input_path,
        skip_invalid=skip_invalid,
        as_json=as_json,
        log_level=log_level,
    )


def schematic(
    input_path: Path = typer.Argument(..., help=INPUT_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_HELP),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Sum part numbers adjacent to a symbol and the ratios of all gears."""

    _solve(
        "schematic",
        input_path,
        skip_invalid=False,
        as_json=as_json,
        log_level=log_level,
    )
