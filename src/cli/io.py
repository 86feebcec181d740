"""Shared console utilities for the puzzle CLI."""

from __future__ import annotations

from rich.console import Console

# Answers go to stdout; the JSON log handler writes to stderr.
console = Console()

__all__ = ["console"]
