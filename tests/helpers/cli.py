"""Shared test doubles and utilities for src.cli tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

import src.cli as cli

Handler = Callable[[Dict[str, Any]], Dict[str, Any]]


class RecordingOrchestrator:
    """Orchestrator double that records calls and dispatches handlers."""

    def __init__(self, *, handlers: Optional[Mapping[str, Handler]] = None) -> None:
        self._handlers: Dict[str, Handler] = dict(handlers or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def execute(self, workflow: str, context: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((workflow, context))
        handler = self._handlers.get(workflow)
        if handler:
            return handler(context)
        return {"workflow": workflow, "result": {}}


def mute_console(monkeypatch: Any) -> list[Any]:
    """Silence Rich console output and return the list of printed objects."""

    printed: list[Any] = []
    monkeypatch.setattr(cli.console, "print", lambda *args, **kwargs: printed.extend(args))
    monkeypatch.setattr(
        cli.console, "print_json", lambda *args, **kwargs: printed.append(kwargs.get("data"))
    )
    return printed


def patch_runtime(monkeypatch: Any, orchestrator: RecordingOrchestrator) -> None:
    """Patch runtime helpers to operate on the supplied orchestrator."""

    monkeypatch.setattr(cli, "get_runtime", lambda: orchestrator)
    monkeypatch.setattr(cli, "get_orchestrator", lambda: orchestrator)
    monkeypatch.setattr(cli, "set_runtime", lambda runtime: None)


def solved(puzzle: str, part_one: int, part_two: int) -> Handler:
    """Handler returning fixed answers for ``puzzle``."""

    def handler(_: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "workflow": puzzle,
            "result": {
                "puzzle": puzzle,
                "part_one": part_one,
                "part_two": part_two,
                "errors": [],
            },
        }

    return handler


__all__ = [
    "RecordingOrchestrator",
    "mute_console",
    "patch_runtime",
    "solved",
]
