"""Puzzle input loading and line-oriented parsing.

Updates:
    v0.1.0 - 2023-12-01 - Read whole input files into memory.
    v0.2.0 - 2023-12-04 - Added fail-fast and skip-and-continue line parsing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from .errors import InputReadError, ParseError, ParseReport

T = TypeVar("T")

logger = logging.getLogger(__name__)


def read_input(path: Path | str) -> list[str]:
    """Read a puzzle input file into a list of lines.

    Args:
        path (Path | str): Location of the UTF-8 text input.

    Returns:
        list[str]: Lines without their terminators.

    Raises:
        InputReadError: If the file is missing, unreadable or not valid UTF-8.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(source, str(exc)) from exc
    lines = text.splitlines()
    logger.debug("input_loaded", extra={"path": str(source), "lines": len(lines)})
    return lines


def parse_lines(
    lines: Iterable[str],
    parser: Callable[[int, str], T],
    *,
    skip_invalid: bool = False,
    log: logging.Logger | None = None,
) -> ParseReport[T]:
    """Apply ``parser`` to every non-blank line.

    Args:
        lines (Iterable[str]): Raw input lines.
        parser (Callable[[int, str], T]): Receives the 1-based line number and
            the line; raises ``ParseError`` on malformed input.
        skip_invalid (bool): Collect parse errors and keep going instead of
            raising the first one.
        log (logging.Logger | None): Optional sink for skipped-line warnings.

    Returns:
        ParseReport[T]: Parsed records and the errors that were skipped.

    Raises:
        ParseError: On the first malformed line when ``skip_invalid`` is false.
    """

    sink = log or logger
    report: ParseReport[T] = ParseReport()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            report.records.append(parser(line_number, line))
        except ParseError as exc:
            if not skip_invalid:
                raise
            sink.warning(
                "line_skipped",
                extra={"line_number": exc.line_number, "reason": exc.reason},
            )
            report.errors.append(exc)
    return report
