"""Graph controls validator.

Validates GraphControls with helpful error messages and suggestions.
Advisory only: the chart pipeline produces its own error state, this
validator lets a form highlight the offending field before submitting.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from graphplot.config import Config
from graphplot.controls import GraphControls
from graphplot.presets import COMMON_EQUATIONS, SAMPLE_DATA
from graphplot.series.literal import parse_literal
from graphplot.series.sampler import count_points


class FieldError(BaseModel):
    """Structured validation error with suggestions."""

    field: str
    message: str
    received_value: Any = None
    expected: str = ""
    suggestions: List[str] = []

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "step",
                "message": "Step must be greater than zero",
                "received_value": 0,
                "expected": "Positive number (typically 0.01 to 1)",
                "suggestions": ["Use step=0.1 for smooth curves"],
            }
        }
    )


class ValidationResult(BaseModel):
    """Result of graph controls validation."""

    is_valid: bool
    errors: List[FieldError] = []


class GraphControlsValidator:
    """Validates GraphControls with helpful error messages and suggestions."""

    def __init__(self, max_points: Optional[int] = None):
        self.max_points = max_points if max_points is not None else Config.get_max_points()

    def validate(self, controls: GraphControls) -> ValidationResult:
        """Validate controls and return structured validation results."""
        errors: List[FieldError] = []

        if controls.uses_equation:
            errors.extend(self._validate_equation(controls))
            errors.extend(self._validate_range(controls))
        else:
            errors.extend(self._validate_data(controls))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def _validate_equation(self, controls: GraphControls) -> List[FieldError]:
        errors = []
        if not controls.equation.strip():
            errors.append(
                FieldError(
                    field="equation",
                    message=f"An equation in x is required for {controls.type.value} charts",
                    received_value=controls.equation,
                    expected="Expression in terms of x",
                    suggestions=[f"Try one of: {', '.join(COMMON_EQUATIONS[:4])}"],
                )
            )
        return errors

    def _validate_data(self, controls: GraphControls) -> List[FieldError]:
        errors = []
        if not parse_literal(controls.data):
            errors.append(
                FieldError(
                    field="data",
                    message="Data must contain at least one number",
                    received_value=controls.data,
                    expected="Comma-separated numbers",
                    suggestions=[f"Example: {SAMPLE_DATA[0]}"],
                )
            )
        return errors

    def _validate_range(self, controls: GraphControls) -> List[FieldError]:
        errors = []
        for field, value in (
            ("xMin", controls.x_min),
            ("xMax", controls.x_max),
            ("step", controls.step),
        ):
            if not math.isfinite(value):
                errors.append(
                    FieldError(
                        field=field,
                        message=f"{field} must be a finite number",
                        received_value=value,
                        expected="Finite number",
                    )
                )
        if errors:
            return errors

        if controls.step <= 0:
            errors.append(
                FieldError(
                    field="step",
                    message="Step must be greater than zero",
                    received_value=controls.step,
                    expected="Positive number (typically 0.01 to 1)",
                    suggestions=["Use step=0.1 for smooth curves"],
                )
            )
        if controls.x_min > controls.x_max:
            errors.append(
                FieldError(
                    field="xMin",
                    message="xMin must not be greater than xMax",
                    received_value=controls.x_min,
                    expected=f"Number <= {controls.x_max}",
                    suggestions=["Swap xMin and xMax"],
                )
            )
        if not errors:
            points = count_points(controls.x_min, controls.x_max, controls.step)
            if points > self.max_points:
                if math.isinf(points):
                    produced = "more points than a float can count"
                else:
                    produced = f"{points} points"
                errors.append(
                    FieldError(
                        field="step",
                        message=f"Range produces {produced}, maximum is {self.max_points}",
                        received_value=controls.step,
                        expected=f"Step of at least {self._min_step(controls):g}",
                        suggestions=["Increase step or narrow the x range"],
                    )
                )
        return errors

    def _min_step(self, controls: GraphControls) -> float:
        # Halved operands keep the span finite for bounds near the float limit
        span = controls.x_max / 2 - controls.x_min / 2
        return span / max(self.max_points - 1, 1) * 2
