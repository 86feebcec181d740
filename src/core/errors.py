"""Error taxonomy shared by the puzzle solvers.

Updates:
    v0.1.0 - 2023-12-03 - Introduced input and parse error types.
    v0.2.0 - 2023-12-04 - Added ParseReport for skip-and-continue parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PuzzleError(Exception):
    """Base class for errors raised while solving a puzzle."""


class InputReadError(PuzzleError):
    """Raised when the puzzle input cannot be opened or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read input '{self.path}': {reason}")


class ParseError(PuzzleError, ValueError):
    """Raised when a single input line does not match the expected grammar.

    Attributes:
        line_number (int): 1-based position of the offending line.
        line (str): Raw line content.
        reason (str): Human readable description of the mismatch.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} ({line!r})")

    def as_dict(self) -> dict[str, Any]:
        """Return the error as a JSON-serializable dictionary."""

        return {
            "line_number": self.line_number,
            "line": self.line,
            "reason": self.reason,
        }


@dataclass(slots=True)
class ParseReport(Generic[T]):
    """Records parsed from an input alongside the lines that were skipped."""

    records: list[T] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
