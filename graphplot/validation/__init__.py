"""Advisory validation of graph controls."""

from graphplot.validation.validator import FieldError, GraphControlsValidator, ValidationResult

__all__ = [
    "FieldError",
    "GraphControlsValidator",
    "ValidationResult",
]
