"""Series construction: literal parsing, expression sampling, building."""

from graphplot.series.builder import EMPTY_DATA_MESSAGE, SeriesBuilder, build_series
from graphplot.series.evaluator import CompiledExpression, ExpressionEvaluator
from graphplot.series.literal import parse_literal
from graphplot.series.models import ErrorKind, Sample, SeriesError, SeriesResult
from graphplot.series.sampler import (
    INVALID_EXPRESSION_MESSAGE,
    MISSING_EXPRESSION_MESSAGE,
    NO_VALID_POINTS_MESSAGE,
    sample_expression,
)

__all__ = [
    "CompiledExpression",
    "ErrorKind",
    "ExpressionEvaluator",
    "Sample",
    "SeriesBuilder",
    "SeriesError",
    "SeriesResult",
    "build_series",
    "parse_literal",
    "sample_expression",
    "EMPTY_DATA_MESSAGE",
    "INVALID_EXPRESSION_MESSAGE",
    "MISSING_EXPRESSION_MESSAGE",
    "NO_VALID_POINTS_MESSAGE",
]
