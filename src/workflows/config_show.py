"""Config inspection workflow.

Updates:
    v0.1.0 - 2023-12-03 - Report effective solver settings.
    v0.1.1 - 2023-12-05 - Report the resolved configuration directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.logging_setup import resolve_level
from ..services.config_service import ConfigService


@dataclass
class ConfigShowWorkflow:
    name: str = "config_show"
    config_path: Path | None = None

    def run(self, context: dict) -> dict:
        """Return configuration details suitable for CLI rendering.

        Args:
            context (dict): Unused, maintained for workflow interface compatibility.

        Returns:
            dict: Effective settings, with environment overrides applied.
        """

        service = ConfigService(config_path=self.config_path)
        config_dir = service.config_dir
        return {
            "config_dir": str(config_dir) if config_dir else "(built-in defaults)",
            "app": service.app_metadata,
            "logging": {"level": resolve_level(service.logging_config)},
            "cube_game": {"limits": service.cube_limits.as_dict()},
            "schematic": {"symbols": "".join(sorted(service.schematic_symbols))},
        }
