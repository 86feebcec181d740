"""Example puzzle inputs shared across tests."""

from __future__ import annotations

from pathlib import Path

CALIBRATION_DIGITS = """\
1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

CALIBRATION_WORDS = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""

CUBE_GAMES = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""

SCHEMATIC = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def write_input(directory: Path, text: str, name: str = "input.txt") -> Path:
    """Write ``text`` to ``directory/name`` and return the path."""

    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


__all__ = [
    "CALIBRATION_DIGITS",
    "CALIBRATION_WORDS",
    "CUBE_GAMES",
    "SCHEMATIC",
    "write_input",
]
