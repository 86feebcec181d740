"""Puzzle workflow dispatch.

Updates:
    v0.1.0 - 2023-12-01 - Named solver workflows with duration logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Protocol


class Workflow(Protocol):
    """Protocol describing the workflow contract."""

    name: str

    def run(self, context: dict) -> dict:
        """Execute the workflow and return a response.

        Args:
            context (dict): Input data required by the workflow.

        Returns:
            dict: Workflow-specific result payload.
        """

        ...


@dataclass(slots=True)
class Orchestrator:
    workflows: dict[str, Workflow] = field(default_factory=dict)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), repr=False
    )

    def execute(self, workflow_name: str, context: dict) -> dict:
        """Run a registered workflow with the supplied context.

        Args:
            workflow_name (str): Name of the workflow to execute.
            context (dict): Payload passed to the workflow, usually `lines`.

        Returns:
            dict: Output produced by the workflow.

        Raises:
            KeyError: If the workflow name is unknown.
        """

        workflow = self.workflows.get(workflow_name)
        if not workflow:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.")
        started = perf_counter()
        try:
            result = workflow.run(context)
        except Exception as exc:
            duration_ms = (perf_counter() - started) * 1000
            self.logger.error(
                "workflow_failed",
                extra={
                    "workflow": workflow_name,
                    "duration_ms": round(duration_ms, 2),
                    "error": str(exc),
                },
            )
            raise

        duration_ms = (perf_counter() - started) * 1000
        self.logger.info(
            "workflow_completed",
            extra={
                "workflow": workflow_name,
                "duration_ms": round(duration_ms, 2),
                "input_lines": len(context.get("lines") or ()),
            },
        )
        return result

    def register(self, workflow: Workflow) -> None:
        """Register a workflow implementation with the orchestrator.

        Args:
            workflow (Workflow): Workflow instance to make available.
        """

        self.workflows[workflow.name] = workflow
