from __future__ import annotations

import logging

import pytest

from src.core.grid import parse_numbers, parse_symbols
from src.services.schematic import SchematicService, gear_ratios, part_numbers
from tests.helpers.inputs import SCHEMATIC

GRID = SCHEMATIC.splitlines()


def test_part_numbers_exclude_isolated_numbers() -> None:
    parts = part_numbers(parse_numbers(GRID), parse_symbols(GRID))
    values = [number.value for number in parts]
    assert 114 not in values
    assert 58 not in values
    assert sum(values) == 4361


def test_gear_ratios_need_exactly_two_numbers() -> None:
    ratios = gear_ratios(parse_numbers(GRID), parse_symbols(GRID))
    assert ratios == [467 * 35, 755 * 598]


def test_solve_example() -> None:
    result = SchematicService().solve(GRID)
    assert (result.part_one, result.part_two) == (4361, 467835)
    assert result.errors == []


def test_symbols_on_grid_edges_do_not_break_borders() -> None:
    grid = ["*12", "3..", "..$"]
    result = SchematicService().solve(grid)
    assert result.part_one == 15
    assert result.part_two == 36


def test_unrecognised_markers_are_ignored_unless_configured() -> None:
    grid = ["12@", "..."]
    assert SchematicService().solve(grid).part_one == 0
    assert SchematicService(symbols="@").solve(grid).part_one == 12


def test_solve_reports_through_supplied_logger(caplog: pytest.LogCaptureFixture) -> None:
    observer = logging.getLogger("tests.schematic")
    with caplog.at_level(logging.INFO, logger="tests.schematic"):
        SchematicService(logger=observer).solve(GRID)
    records = [record for record in caplog.records if record.name == "tests.schematic"]
    assert any(record.getMessage() == "schematic_solved" for record in records)
    solved = next(record for record in records if record.getMessage() == "schematic_solved")
    assert solved.part_numbers == 8


def test_extended_marker_set_counts_real_input_markers() -> None:
    grid = ["1.2.3.4.5.6", "@./.=.%.&.-"]
    assert SchematicService().solve(grid).part_one == 0
    assert SchematicService(symbols="*$+#@/=%&-").solve(grid).part_one == 21
