"""Engine schematic grid entities.

Updates:
    v0.1.0 - 2023-12-03 - Added symbol and number extraction for character grids.
    v0.1.1 - 2023-12-04 - Dropped border cells left of column 0 or above row 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

DEFAULT_SYMBOLS: frozenset[str] = frozenset("*$+#")
GEAR_SYMBOL = "*"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        row (int): Row index (0 at top).
        col (int): Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    @property
    def in_grid(self) -> bool:
        return self.row >= 0 and self.col >= 0


@dataclass(frozen=True, slots=True)
class Numeral:
    """A single digit read from the grid."""

    position: Position
    value: int


@dataclass(frozen=True, slots=True)
class Symbol:
    """A recognised marker character and where it was found."""

    position: Position
    char: str


@dataclass(frozen=True, slots=True)
class Number:
    """A contiguous horizontal run of numerals forming one integer literal."""

    numerals: tuple[Numeral, ...]

    def __post_init__(self) -> None:
        if not self.numerals:
            raise ValueError("Number requires at least one numeral.")
        row = self.numerals[0].position.row
        start = self.numerals[0].position.col
        for offset, numeral in enumerate(self.numerals):
            if numeral.position != Position(row, start + offset):
                raise ValueError(
                    f"Numerals must be contiguous on one row; got {numeral.position}."
                )

    @property
    def row(self) -> int:
        return self.numerals[0].position.row

    @property
    def start_col(self) -> int:
        return self.numerals[0].position.col

    @property
    def end_col(self) -> int:
        return self.numerals[-1].position.col

    @property
    def cells(self) -> frozenset[Position]:
        return frozenset(numeral.position for numeral in self.numerals)

    @property
    def value(self) -> int:
        """Decimal value, most significant numeral first."""

        size = len(self.numerals)
        return sum(
            numeral.value * 10 ** (size - index - 1)
            for index, numeral in enumerate(self.numerals)
        )

    def border(self) -> frozenset[Position]:
        """Return the cells 8-adjacent to the run, excluding the run itself.

        The leftmost numeral contributes the left column (three cells) plus the
        cells above and below it, the rightmost numeral mirrors that on the
        right, and interior numerals add only the cells above and below. A
        single numeral contributes its full 8-neighbourhood. Cells with a
        negative row or column lie outside any grid and are dropped.

        Returns:
            frozenset[Position]: Border cells inside the non-negative quadrant.
        """

        border: set[Position] = set()
        last = len(self.numerals) - 1
        for index, numeral in enumerate(self.numerals):
            here = numeral.position
            border.add(here.offset(-1, 0))
            border.add(here.offset(1, 0))
            if index == 0:
                border.add(here.offset(-1, -1))
                border.add(here.offset(1, -1))
                border.add(here.offset(0, -1))
            if index == last:
                border.add(here.offset(-1, 1))
                border.add(here.offset(1, 1))
                border.add(here.offset(0, 1))
        return frozenset(position for position in border if position.in_grid)


def bounding_box_border(number: Number) -> frozenset[Position]:
    """Border of ``number`` computed as its padded bounding box minus its cells."""

    box = {
        Position(row, col)
        for row in range(number.row - 1, number.row + 2)
        for col in range(number.start_col - 1, number.end_col + 2)
    }
    return frozenset(
        position for position in box - number.cells if position.in_grid
    )


def parse_symbols(
    rows: Sequence[str],
    symbols: Iterable[str] = DEFAULT_SYMBOLS,
    *,
    log: logging.Logger | None = None,
) -> list[Symbol]:
    """Collect recognised marker characters in row-major order.

    Args:
        rows (Sequence[str]): Grid rows; lengths may differ.
        symbols (Iterable[str]): Closed set of marker characters to recognise.
        log (logging.Logger | None): Optional sink for trace output.

    Returns:
        list[Symbol]: Symbols in scan order. Digits, ``.`` and any character
        outside ``symbols`` are ignored.
    """

    recognised = frozenset(symbols)
    found = [
        Symbol(Position(row, col), char)
        for row, line in enumerate(rows)
        for col, char in enumerate(line)
        if char in recognised and not char.isdigit() and char != "."
    ]
    (log or logger).debug(
        "symbols_parsed", extra={"count": len(found), "rows": len(rows)}
    )
    return found


def parse_numbers(
    rows: Sequence[str], *, log: logging.Logger | None = None
) -> list[Number]:
    """Collect every maximal horizontal run of ASCII digits.

    A run is sealed at the first non-digit character or at the end of its row,
    so numbers never span rows.

    Args:
        rows (Sequence[str]): Grid rows; lengths may differ.
        log (logging.Logger | None): Optional sink for trace output.

    Returns:
        list[Number]: Numbers in row-major order.
    """

    numbers: list[Number] = []
    for row, line in enumerate(rows):
        pending: list[Numeral] = []
        for col, char in enumerate(line):
            if "0" <= char <= "9":
                pending.append(Numeral(Position(row, col), int(char)))
            elif pending:
                numbers.append(Number(tuple(pending)))
                pending = []
        if pending:
            numbers.append(Number(tuple(pending)))
    (log or logger).debug(
        "numbers_parsed", extra={"count": len(numbers), "rows": len(rows)}
    )
    return numbers
