"""Trebuchet calibration solver.

Updates:
    v0.1.0 - 2023-12-01 - Summed first/last digit calibration values.
    v0.2.0 - 2023-12-02 - Added spelled-out digits for the second part.
    v0.2.1 - 2023-12-05 - Lines with only spelled-out digits no longer abort part one.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..core.errors import ParseError
from ..core.input_reader import parse_lines
from ..core.tokenizer import calibration_value, extract_digits, normalize_digits
from .results import PuzzleResult


class CalibrationService:
    """Computes calibration totals for trebuchet documents."""

    name = "trebuchet"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def line_value(self, line: str, *, spelled: bool) -> int:
        """Return the calibration value of a single line.

        Args:
            line (str): Raw document line.
            spelled (bool): Treat spelled-out digits ("one".."nine") as digits.

        Returns:
            int: Two-digit calibration value.

        Raises:
            ValueError: If the line holds no usable digit.
        """

        if spelled:
            digits = normalize_digits(line, log=self._logger)
        else:
            digits = extract_digits(line)
        return calibration_value(digits)

    def solve(self, lines: Sequence[str], *, skip_invalid: bool = False) -> PuzzleResult:
        """Sum the calibration values for both puzzle parts.

        Part two reads spelled-out digits, so it is the authority on whether a
        line is malformed and runs under the selected error policy. Part one
        only sees ASCII digits: a line that holds nothing but spelled-out
        digits is valid input, it just has no part-one value, so it is always
        skipped there and reported in ``errors``.

        Args:
            lines (Sequence[str]): Document lines.
            skip_invalid (bool): Skip lines without any digit instead of failing.

        Returns:
            PuzzleResult: Totals for both parts and the skipped lines.

        Raises:
            ParseError: If a line has no digit at all and ``skip_invalid`` is
                false.
        """

        spelled = parse_lines(
            lines,
            self._line_parser(spelled=True),
            skip_invalid=skip_invalid,
            log=self._logger,
        )
        plain = parse_lines(
            lines,
            self._line_parser(spelled=False),
            skip_invalid=True,
            log=self._logger,
        )
        errors = [*plain.errors, *spelled.errors]

        self._logger.info(
            "calibration_solved",
            extra={"lines": len(lines), "skipped": len(errors)},
        )
        return PuzzleResult(
            self.name, sum(plain.records), sum(spelled.records), errors
        )

    def _line_parser(self, spelled: bool) -> Callable[[int, str], int]:
        part = "part two" if spelled else "part one"

        def parse(line_number: int, line: str) -> int:
            try:
                return self.line_value(line, spelled=spelled)
            except ValueError as exc:
                raise ParseError(line_number, line, f"{exc} in {part}") from exc

        return parse
