"""Custom exceptions for the graphplot series and chart pipeline.

User-facing input problems (empty data, bad equations) are returned as
data by the series builder; exceptions cover the evaluator seam,
registry lookups and configuration.
"""

from graphplot.exceptions.base import (
    GraphPlotError,
    ValidationError,
    ConfigurationError,
    RegistryError,
)
from graphplot.exceptions.expression import (
    ExpressionError,
    ExpressionSyntaxError,
    ExpressionEvaluationError,
)
from graphplot.exceptions.theme import ThemeNotFoundError

__all__ = [
    "GraphPlotError",
    "ValidationError",
    "ConfigurationError",
    "RegistryError",
    "ExpressionError",
    "ExpressionSyntaxError",
    "ExpressionEvaluationError",
    "ThemeNotFoundError",
]
