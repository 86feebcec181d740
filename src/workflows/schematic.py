"""Workflow wrapper for the engine schematic."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.schematic import SchematicService


@dataclass
class SchematicWorkflow:
    schematic_service: SchematicService
    name: str = "schematic"

    def run(self, context: dict) -> dict:
        """Total part numbers and gear ratios for the grid in `lines`."""

        lines = context.get("lines")
        if lines is None:
            raise ValueError("Schematic requires grid lines.")
        result = self.schematic_service.solve(lines)
        return {"workflow": self.name, "result": result.as_dict()}
