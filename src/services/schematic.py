"""Engine schematic solver.

Updates:
    v0.1.0 - 2023-12-03 - Summed part numbers adjacent to a symbol.
    v0.2.0 - 2023-12-04 - Added gear ratios.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..core.grid import (
    DEFAULT_SYMBOLS,
    GEAR_SYMBOL,
    Number,
    Symbol,
    parse_numbers,
    parse_symbols,
)
from .results import PuzzleResult


def part_numbers(numbers: Iterable[Number], symbols: Iterable[Symbol]) -> list[Number]:
    """Return the numbers whose border contains at least one symbol."""

    positions = {symbol.position for symbol in symbols}
    return [number for number in numbers if not number.border().isdisjoint(positions)]


def gear_ratios(numbers: Sequence[Number], symbols: Iterable[Symbol]) -> list[int]:
    """Return the ratio of every gear.

    A gear is a ``*`` symbol adjacent to exactly two numbers; its ratio is the
    product of their values.
    """

    borders = [(number, number.border()) for number in numbers]
    ratios: list[int] = []
    for symbol in symbols:
        if symbol.char != GEAR_SYMBOL:
            continue
        adjacent = [number for number, border in borders if symbol.position in border]
        if len(adjacent) == 2:
            ratios.append(adjacent[0].value * adjacent[1].value)
    return ratios


class SchematicService:
    """Reads engine schematics and totals their part numbers."""

    name = "schematic"

    def __init__(
        self,
        symbols: Iterable[str] = DEFAULT_SYMBOLS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._symbols = frozenset(symbols)
        self._logger = logger or logging.getLogger(__name__)

    def solve(self, lines: Sequence[str]) -> PuzzleResult:
        """Sum part numbers and gear ratios for a schematic.

        Grid scanning cannot fail: characters outside the marker set are
        ignored, so there is no error policy to select.

        Args:
            lines (Sequence[str]): Grid rows.

        Returns:
            PuzzleResult: Part number total and gear ratio total.
        """

        rows = [line.rstrip("\r\n") for line in lines]
        symbols = parse_symbols(rows, self._symbols, log=self._logger)
        numbers = parse_numbers(rows, log=self._logger)
        parts = part_numbers(numbers, symbols)
        ratios = gear_ratios(numbers, symbols)
        self._logger.info(
            "schematic_solved",
            extra={
                "symbols": len(symbols),
                "numbers": len(numbers),
                "part_numbers": len(parts),
                "gears": len(ratios),
            },
        )
        return PuzzleResult(
            self.name,
            sum(number.value for number in parts),
            sum(ratios),
        )
