"""Puzzle answer container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import ParseError


@dataclass(slots=True)
class PuzzleResult:
    """Answers for one puzzle run plus any lines skipped along the way."""

    puzzle: str
    part_one: int
    part_two: int
    errors: list[ParseError] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-serializable dictionary."""

        return {
            "puzzle": self.puzzle,
            "part_one": self.part_one,
            "part_two": self.part_two,
            "errors": [error.as_dict() for error in self.errors],
        }
