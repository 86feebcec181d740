"""Digit tokenizer for calibration lines.

Updates:
    v0.1.0 - 2023-12-01 - Added spelled-out digit normalization.
    v0.1.1 - 2023-12-02 - Kept the last letter of a matched word so overlaps like "oneight" resolve.
"""

from __future__ import annotations

import logging

DIGIT_WORDS: dict[str, str] = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}

# Longest first so ties always resolve to the longest candidate.
_CANDIDATES: tuple[tuple[str, str], ...] = tuple(
    sorted(DIGIT_WORDS.items(), key=lambda item: (-len(item[0]), item[0]))
)

logger = logging.getLogger(__name__)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def extract_digits(line: str) -> str:
    """Return the ASCII digits of ``line`` in their original order."""

    return "".join(char for char in line if _is_ascii_digit(char))


def normalize_digits(line: str, *, log: logging.Logger | None = None) -> str:
    """Replace spelled-out digits with numerals and drop everything else.

    The cursor only advances by ``len(word) - 1`` after a word match, so a word
    sharing its last letter with the next one ("twone", "eightwo") yields both.

    Args:
        line (str): Raw calibration line.
        log (logging.Logger | None): Optional sink for trace output.

    Returns:
        str: Digit characters, explicit or word-derived, in reading order.
    """

    sink = log or logger
    result: list[str] = []
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if _is_ascii_digit(char):
            result.append(char)
            index += 1
            continue

        for word, numeral in _CANDIDATES:
            if line.startswith(word, index):
                result.append(numeral)
                index += len(word) - 1
                break
        else:
            index += 1

    normalized = "".join(result)
    sink.debug("normalized_line", extra={"line": line, "digits": normalized})
    return normalized


def calibration_value(digits: str) -> int:
    """Combine the first and last digit of ``digits`` into a two-digit value.

    Args:
        digits (str): Digit-only string such as the output of ``normalize_digits``.

    Returns:
        int: ``10 * first + last``; a lone digit is used for both places.

    Raises:
        ValueError: If ``digits`` is empty.
    """

    if not digits:
        raise ValueError("no digits found")
    return int(digits[0]) * 10 + int(digits[-1])
