"""Trebuchet calibration workflow.

Updates:
    v0.1.0 - 2023-12-01 - Added module and method docstrings.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..services.calibration import CalibrationService


@dataclass
class CalibrationWorkflow:
    calibration_service: CalibrationService
    name: str = "trebuchet"

    def run(self, context: dict) -> dict:
        """Run the calibration workflow.

        Args:
            context (dict): Context payload containing `lines` and optionally
                `skip_invalid`.

        Returns:
            dict: Serialized puzzle result.

        Raises:
            ValueError: If the input lines are missing from context.
        """

        lines = context.get("lines")
        if lines is None:
            raise ValueError("Context missing 'lines'.")
        result = self.calibration_service.solve(
            lines, skip_invalid=bool(context.get("skip_invalid"))
        )
        return {"workflow": self.name, "result": result.as_dict()}
