"""Runtime wiring for the puzzle CLI."""

from __future__ import annotations

import logging
from typing import Any

from src.core.logging_setup import configure_logging
from src.core.logging_setup import set_runtime_level  # re-export via utils
from src.core.orchestrator import Orchestrator
from src.services.calibration import CalibrationService
from src.services.config_service import ConfigService
from src.services.cube_game import CubeGameService
from src.services.schematic import SchematicService
from src.workflows.calibrate import CalibrationWorkflow
from src.workflows.config_show import ConfigShowWorkflow
from src.workflows.cube_game import CubeGameWorkflow
from src.workflows.schematic import SchematicWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: Orchestrator | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService


def initialize_runtime() -> Orchestrator:
    """Load configuration, configure logging and register the solver workflows."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")

    solver_logger = logging.getLogger("src.solvers")
    orchestrator = Orchestrator(
        workflows={
            "trebuchet": CalibrationWorkflow(
                calibration_service=CalibrationService(logger=solver_logger)
            ),
            "cube_game": CubeGameWorkflow(
                cube_game_service=CubeGameService(
                    limits=config_service.cube_limits, logger=solver_logger
                )
            ),
            "schematic": SchematicWorkflow(
                schematic_service=SchematicService(
                    symbols=config_service.schematic_symbols, logger=solver_logger
                )
            ),
            "config_show": ConfigShowWorkflow(),
        }
    )
    logger.debug("Runtime initialization completed.")
    return orchestrator


def get_runtime() -> Orchestrator:
    """Return the lazily-initialized orchestrator."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: Orchestrator | None) -> None:
    """Replace the cached orchestrator."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    """Return the cached orchestrator instance."""

    return get_runtime()


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("src.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
