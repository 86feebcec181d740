from pathlib import Path
import logging
import sys
from typing import Iterator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.cli import runtime  # noqa: E402
from src.core import logging_setup  # noqa: E402
from src.services.config_service import ConfigService  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test fresh logging state and no cached orchestrator."""

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)
    monkeypatch.delenv(logging_setup.LOG_LEVEL_ENV, raising=False)
    runtime.set_runtime(None)
    ConfigService.clear_cache()
    yield
    runtime.set_runtime(None)
    ConfigService.clear_cache()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
