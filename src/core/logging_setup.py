"""Logging configuration helpers.

Updates:
    v0.1.0 - 2023-12-01 - Structured JSON logging on stderr.
    v0.1.1 - 2023-12-02 - Honour the AOC_LOG_LEVEL environment override.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Mapping

LOG_LEVEL_ENV = "AOC_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

_configured = False
_handler: logging.Handler | None = None

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """Formatter that emits one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        payload.update(_extract_extra_fields(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def resolve_level(config: Mapping[str, Any] | None = None) -> str:
    """Pick the effective level name from the environment or configuration.

    Args:
        config (Mapping[str, Any] | None): Logging section from settings.yaml.

    Returns:
        str: Upper-cased level name; the environment wins over configuration.
    """

    env_level = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if env_level:
        return env_level.upper()
    config = config or {}
    return str(config.get("level", DEFAULT_LEVEL)).upper()


def configure_logging(config: Mapping[str, Any] | None = None) -> None:
    """Configure application-wide logging with structured JSON output.

    Args:
        config (Mapping[str, Any] | None): Optional logging configuration
            dictionary. Supports a `level` key; `AOC_LOG_LEVEL` overrides it.
    """

    global _configured, _handler
    if _configured:
        return

    level = getattr(logging, resolve_level(config), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _handler = handler
    _configured = True


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }


def set_runtime_level(level_name: str) -> None:
    """Adjust logging level at runtime.

    Args:
        level_name (str): Desired logging level name (e.g., `DEBUG`, `INFO`).

    Raises:
        ValueError: If the level name is not recognized by the logging module.
    """

    if not level_name:
        return
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _handler:
        _handler.setLevel(level)
