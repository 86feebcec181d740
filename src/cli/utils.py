"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from src.cli.io import console
from src.core.errors import InputReadError
from src.core.input_reader import read_input

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["src.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def load_lines(input_path: Path) -> list[str]:
    """Read the puzzle input or exit with code 1."""

    try:
        return read_input(input_path)
    except InputReadError as exc:
        logger.error("input_unreadable", extra={"path": str(exc.path)})
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc


def resolve_orchestrator():
    """Return the runtime orchestrator or exit with code 1 on bad configuration."""

    try:
        return _cli().get_orchestrator()
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc
