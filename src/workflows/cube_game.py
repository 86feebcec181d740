"""Workflow wrapper for the cube bag game."""

from __future__ import annotations

from dataclasses import dataclass

from ..services.cube_game import CubeGameService


@dataclass
class CubeGameWorkflow:
    cube_game_service: CubeGameService
    name: str = "cube_game"

    def run(self, context: dict) -> dict:
        """Score the game records supplied in `lines`."""

        lines = context.get("lines")
        if lines is None:
            raise ValueError("Cube game requires input lines.")
        result = self.cube_game_service.solve(
            lines, skip_invalid=bool(context.get("skip_invalid"))
        )
        return {"workflow": self.name, "result": result.as_dict()}
