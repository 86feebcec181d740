from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import typer
from rich.panel import Panel
from rich.table import Table

import src.cli as cli
from src.core.errors import ParseError
from tests.helpers.cli import RecordingOrchestrator, mute_console, patch_runtime, solved
from tests.helpers.inputs import CALIBRATION_DIGITS, SCHEMATIC, write_input


@pytest.fixture()
def orchestrator(monkeypatch: pytest.MonkeyPatch) -> RecordingOrchestrator:
    recording = RecordingOrchestrator(
        handlers={
            "trebuchet": solved("trebuchet", 142, 142),
            "schematic": solved("schematic", 4361, 467835),
        }
    )
    patch_runtime(monkeypatch, recording)
    return recording


def test_trebuchet_passes_lines_to_workflow(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    printed = mute_console(monkeypatch)
    path = write_input(tmp_path, CALIBRATION_DIGITS)

    cli.trebuchet(input_path=path, skip_invalid=False, as_json=False, log_level=None)

    workflow, context = orchestrator.calls[0]
    assert workflow == "trebuchet"
    assert context == {"lines": CALIBRATION_DIGITS.splitlines(), "skip_invalid": False}
    assert isinstance(printed[0], Panel)


def test_schematic_json_output(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    printed = mute_console(monkeypatch)
    path = write_input(tmp_path, SCHEMATIC)

    cli.schematic(input_path=path, as_json=True, log_level=None)

    assert printed == [
        {"puzzle": "schematic", "part_one": 4361, "part_two": 467835, "errors": []}
    ]


def test_missing_input_exits_with_code_one(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    mute_console(monkeypatch)

    with pytest.raises(typer.Exit) as excinfo:
        cli.cube_game(
            input_path=tmp_path / "absent.txt",
            skip_invalid=False,
            as_json=False,
            log_level=None,
        )
    assert excinfo.value.exit_code == 1
    assert orchestrator.calls == []


def test_parse_error_exits_with_code_one(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fail(context: dict[str, Any]) -> dict[str, Any]:
        raise ParseError(1, context["lines"][0], "expected 'Game <id>: <rounds>'")

    patch_runtime(monkeypatch, RecordingOrchestrator(handlers={"cube_game": fail}))
    printed = mute_console(monkeypatch)
    path = write_input(tmp_path, "nonsense\n")

    with pytest.raises(typer.Exit) as excinfo:
        cli.cube_game(input_path=path, skip_invalid=False, as_json=False, log_level=None)
    assert excinfo.value.exit_code == 1
    assert "line 1" in printed[0]


def test_invalid_log_level_is_bad_parameter(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    mute_console(monkeypatch)
    path = write_input(tmp_path, CALIBRATION_DIGITS)

    with pytest.raises(typer.BadParameter):
        cli.trebuchet(input_path=path, skip_invalid=False, as_json=False, log_level="loud")


def test_skipped_lines_are_rendered_as_table(monkeypatch: pytest.MonkeyPatch) -> None:
    printed = mute_console(monkeypatch)

    cli.render_puzzle_result(
        {
            "puzzle": "trebuchet",
            "part_one": 209,
            "part_two": 281,
            "errors": [{"line_number": 2, "line": "eightwothree", "reason": "no digits"}],
        }
    )

    assert isinstance(printed[0], Panel)
    assert isinstance(printed[1], Table)
    assert printed[1].row_count == 1


def test_settings_show_renders_table(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch
) -> None:
    printed = mute_console(monkeypatch)

    cli.settings_show(as_json=False)

    assert orchestrator.calls == [("config_show", {})]
    assert isinstance(printed[0], Table)
