"""Configuration service for the puzzle solvers.

Updates:
    v0.1.0 - 2023-12-01 - Logging settings from config/settings.yaml.
    v0.2.0 - 2023-12-02 - Added cube game bag limits.
    v0.3.0 - 2023-12-03 - Added the schematic marker set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader
from ..core.grid import DEFAULT_SYMBOLS

logger = logging.getLogger(__name__)

DEFAULT_LIMITS: dict[str, int] = {"red": 12, "green": 13, "blue": 14}


@dataclass(slots=True, frozen=True)
class CubeLimits:
    """Maximum number of cubes of each color in the bag."""

    red: int = DEFAULT_LIMITS["red"]
    green: int = DEFAULT_LIMITS["green"]
    blue: int = DEFAULT_LIMITS["blue"]

    def as_dict(self) -> dict[str, int]:
        return {"red": self.red, "green": self.green, "blue": self.blue}


class ConfigService:
    """Loads and exposes configuration for the solvers."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        Falls back to built-in defaults when no configuration directory or
        settings file is available.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        try:
            self._loader: ConfigLoader | None = ConfigLoader(base_path=config_path)
            self._settings = self._loader.load("settings")
        except FileNotFoundError as exc:
            logger.warning("config_defaults_used", extra={"error": str(exc)})
            self._loader = None
            self._settings = {}

    @property
    def config_dir(self) -> Path | None:
        """Return the resolved configuration directory, or None on defaults."""
        return self._loader.base_path if self._loader else None

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section("app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section("logging")

    @property
    def cube_limits(self) -> CubeLimits:
        """Return the bag limits used by the cube game.

        Raises:
            ValueError: If a configured limit is not a non-negative integer.
        """

        configured = self._section("cube_game").get("limits") or {}
        if not isinstance(configured, dict):
            raise ValueError("cube_game.limits must be a mapping of color to count.")
        values = dict(DEFAULT_LIMITS)
        for color, count in configured.items():
            if color not in values:
                raise ValueError(f"Unknown cube color in limits: '{color}'")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Limit for '{color}' must be a non-negative integer.")
            values[color] = count
        return CubeLimits(**values)

    @property
    def schematic_symbols(self) -> frozenset[str]:
        """Return the closed set of marker characters for the schematic grid.

        Raises:
            ValueError: If the set contains digits, `.` or multi-character entries.
        """

        configured = self._section("schematic").get("symbols")
        if not configured:
            return DEFAULT_SYMBOLS
        chars = list(configured) if isinstance(configured, str) else configured
        symbols: set[str] = set()
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Schematic symbol must be one character: {char!r}")
            if char.isdigit() or char == "." or char.isspace():
                raise ValueError(f"Character {char!r} cannot be a schematic symbol.")
            symbols.add(char)
        return frozenset(symbols)

    def _section(self, name: str) -> dict[str, Any]:
        section = self._settings.get(name, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()
