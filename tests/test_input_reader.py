from __future__ import annotations

from pathlib import Path

import pytest

from src.core.errors import InputReadError, ParseError
from src.core.input_reader import parse_lines, read_input
from tests.helpers.inputs import CALIBRATION_DIGITS, write_input


def test_read_input_returns_lines_without_terminators(tmp_path: Path) -> None:
    path = write_input(tmp_path, CALIBRATION_DIGITS)
    lines = read_input(path)
    assert lines == ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]


def test_read_input_missing_file_raises_input_error(tmp_path: Path) -> None:
    with pytest.raises(InputReadError) as excinfo:
        read_input(tmp_path / "absent.txt")
    assert excinfo.value.path == tmp_path / "absent.txt"


def test_read_input_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(InputReadError):
        read_input(path)


def _int_parser(line_number: int, line: str) -> int:
    if not line.strip().isdigit():
        raise ParseError(line_number, line, "expected an integer")
    return int(line)


def test_parse_lines_fail_fast_raises_first_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_lines(["1", "x", "y"], _int_parser)
    assert excinfo.value.line_number == 2


def test_parse_lines_skip_invalid_collects_errors() -> None:
    report = parse_lines(["1", "x", "", "3", "y"], _int_parser, skip_invalid=True)
    assert report.records == [1, 3]
    assert [error.line_number for error in report.errors] == [2, 5]
    assert not report.ok


def test_parse_error_serializes_details() -> None:
    error = ParseError(4, "Game x", "expected 'Game <id>: <rounds>'")
    assert error.as_dict() == {
        "line_number": 4,
        "line": "Game x",
        "reason": "expected 'Game <id>: <rounds>'",
    }
    assert "line 4" in str(error)
    assert isinstance(error, ValueError)
