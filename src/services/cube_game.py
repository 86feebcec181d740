"""Cube bag game solver.

Updates:
    v0.1.0 - 2023-12-02 - Parsed game records and checked them against bag limits.
    v0.1.1 - 2023-12-02 - Added minimum cube set power.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..core.errors import ParseError
from ..core.input_reader import parse_lines
from .config_service import CubeLimits
from .results import PuzzleResult

_GAME_PATTERN = re.compile(r"^Game (?P<id>\d+): (?P<rounds>.+)$")
_COUNT_PATTERN = re.compile(r"^(?P<count>\d+) (?P<color>[a-z]+)$")


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass(frozen=True, slots=True)
class ColorCount:
    color: Color
    count: int


@dataclass(frozen=True, slots=True)
class Round:
    """Cubes revealed in one handful."""

    counts: tuple[ColorCount, ...]

    def totals(self) -> dict[Color, int]:
        """Per-color totals; a color listed twice in one handful is summed."""

        totals = {color: 0 for color in Color}
        for entry in self.counts:
            totals[entry.color] += entry.count
        return totals


@dataclass(frozen=True, slots=True)
class Game:
    id: int
    rounds: tuple[Round, ...]


def parse_game(line: str, line_number: int = 1) -> Game:
    """Parse a ``Game <id>: <n> <color>, ...; ...`` record.

    Args:
        line (str): Raw game record.
        line_number (int): 1-based line number used in error reports.

    Returns:
        Game: Parsed game with its rounds in order.

    Raises:
        ParseError: If the record does not follow the game grammar.
    """

    match = _GAME_PATTERN.match(line.strip())
    if not match:
        raise ParseError(line_number, line, "expected 'Game <id>: <rounds>'")

    rounds: list[Round] = []
    for raw_round in match.group("rounds").split(";"):
        counts: list[ColorCount] = []
        for raw_count in raw_round.split(","):
            count_match = _COUNT_PATTERN.match(raw_count.strip())
            if not count_match:
                raise ParseError(
                    line_number, line, f"expected '<count> <color>', got {raw_count.strip()!r}"
                )
            try:
                color = Color(count_match.group("color"))
            except ValueError as exc:
                raise ParseError(
                    line_number, line, f"unknown color {count_match.group('color')!r}"
                ) from exc
            counts.append(ColorCount(color, int(count_match.group("count"))))
        rounds.append(Round(tuple(counts)))
    return Game(int(match.group("id")), tuple(rounds))


def is_feasible(game: Game, limits: CubeLimits | None = None) -> bool:
    """Return True when every round fits inside the bag limits."""

    limits = limits or CubeLimits()
    caps = {Color(color): cap for color, cap in limits.as_dict().items()}
    return all(
        total <= caps[color]
        for round_ in game.rounds
        for color, total in round_.totals().items()
    )


def minimum_set(game: Game) -> dict[Color, int]:
    """Fewest cubes of each color that make ``game`` possible."""

    needed = {color: 0 for color in Color}
    for round_ in game.rounds:
        for color, total in round_.totals().items():
            needed[color] = max(needed[color], total)
    return needed


def game_power(game: Game) -> int:
    return math.prod(minimum_set(game).values())


class CubeGameService:
    """Scores cube game records."""

    name = "cube_game"

    def __init__(
        self, limits: CubeLimits | None = None, logger: logging.Logger | None = None
    ) -> None:
        self._limits = limits or CubeLimits()
        self._logger = logger or logging.getLogger(__name__)

    def solve(self, lines: Sequence[str], *, skip_invalid: bool = False) -> PuzzleResult:
        """Sum feasible game ids and minimum-set powers.

        Args:
            lines (Sequence[str]): Game records, one per line.
            skip_invalid (bool): Skip malformed records instead of failing.

        Returns:
            PuzzleResult: Id sum of feasible games and total power.

        Raises:
            ParseError: If a record is malformed and ``skip_invalid`` is false.
        """

        report = parse_lines(
            lines,
            lambda line_number, line: parse_game(line, line_number),
            skip_invalid=skip_invalid,
            log=self._logger,
        )
        games = report.records
        feasible = [game.id for game in games if is_feasible(game, self._limits)]
        total_power = sum(game_power(game) for game in games)
        self._logger.info(
            "cube_game_solved",
            extra={
                "games": len(games),
                "feasible": len(feasible),
                "skipped": len(report.errors),
            },
        )
        return PuzzleResult(self.name, sum(feasible), total_power, list(report.errors))
