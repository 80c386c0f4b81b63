"""Series builder: picks the literal parser or the expression sampler."""

from typing import Optional

from graphplot.controls import GraphControls
from graphplot.logger import Logger, session_logger
from graphplot.series.evaluator import ExpressionEvaluator
from graphplot.series.literal import parse_literal
from graphplot.series.models import ErrorKind, Sample, SeriesResult
from graphplot.series.sampler import sample_expression

EMPTY_DATA_MESSAGE = "enter valid comma-separated numbers"


def literal_series(text: str) -> SeriesResult:
    """Wrap parsed literal values as samples labelled ``Value 1``, ``Value 2``..."""
    values = parse_literal(text)
    if not values:
        return SeriesResult.fail(ErrorKind.EMPTY_DATA, EMPTY_DATA_MESSAGE)
    return SeriesResult.ok(
        Sample(x=float(i), y=value, label=f"Value {i + 1}") for i, value in enumerate(values)
    )


class SeriesBuilder:
    """Builds a ``SeriesResult`` from ``GraphControls``."""

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        max_points: Optional[int] = None,
        logger: Optional[Logger] = None,
    ):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.max_points = max_points
        self.logger = logger or session_logger

    def build(self, controls: GraphControls) -> SeriesResult:
        """Build the series for ``controls``.

        Never raises for bad user input: every failure, including
        unexpected evaluator errors, comes back as a result with an error
        and no samples.
        """
        try:
            if controls.uses_equation:
                result = sample_expression(
                    controls.equation,
                    controls.x_min,
                    controls.x_max,
                    controls.step,
                    evaluator=self.evaluator,
                    max_points=self.max_points,
                    logger=self.logger,
                )
            else:
                result = literal_series(controls.data)
        except Exception as e:
            self.logger.error(
                "Unexpected error while building series",
                kind=controls.type.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return SeriesResult.fail(ErrorKind.UNEXPECTED, str(e) or type(e).__name__)

        if result.error is not None:
            self.logger.info(
                "Series not built",
                kind=controls.type.value,
                error_kind=result.error.kind.value,
                error_message=result.error.message,
            )
        return result


def build_series(
    controls: GraphControls, evaluator: Optional[ExpressionEvaluator] = None
) -> SeriesResult:
    """Convenience wrapper around ``SeriesBuilder(evaluator).build(controls)``."""
    return SeriesBuilder(evaluator=evaluator).build(controls)
