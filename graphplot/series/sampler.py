"""Expression sampler.

Samples an expression in ``x`` over ``[x_min, x_max]`` at a fixed step.
Validation is domain-wide (an expression that cannot be parsed yields no
series at all) while evaluation is per point (``1/x`` or ``log(x)`` only
lose the points where they are undefined).
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional

from graphplot.config import Config
from graphplot.exceptions import ExpressionError, ExpressionSyntaxError
from graphplot.logger import Logger, session_logger
from graphplot.series.evaluator import CompiledExpression, ExpressionEvaluator
from graphplot.series.models import ErrorKind, Sample, SeriesResult

MISSING_EXPRESSION_MESSAGE = "missing expression"
INVALID_EXPRESSION_MESSAGE = "invalid equation format"
NO_VALID_POINTS_MESSAGE = "no valid points generated"

PROBE_X = 1.0

# Relative slack so that x_max is still sampled after float rounding of i * step
_END_TOLERANCE = 1e-9

_LABEL_QUANTUM = Decimal("0.1")
# Wide enough for every finite float written with one decimal place
_LABEL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def normalize_expression(expression: str) -> str:
    return (expression or "").strip().lower()


def count_points(x_min: float, x_max: float, step: float) -> float:
    """Number of grid points ``x_min + i * step`` that are ``<= x_max``.

    Assumes finite bounds and ``step > 0``. Returns ``math.inf`` when the
    span itself overflows a float (``x_min=-1e308, x_max=1e308``).
    """
    if x_min > x_max:
        return 0
    span = (x_max - x_min) / step
    if not math.isfinite(span):
        return math.inf
    return int(math.floor(span + _END_TOLERANCE * max(1.0, abs(span)))) + 1


def check_range(
    x_min: float, x_max: float, step: float, max_points: int
) -> Optional[str]:
    """Return a message describing why the sampling range is unusable, or None."""
    if not all(math.isfinite(v) for v in (x_min, x_max, step)):
        return "x range and step must be finite numbers"
    if step <= 0:
        return "step must be greater than zero"
    points = count_points(x_min, x_max, step)
    if points > max_points:
        if math.isinf(points):
            return f"too many points: range overflows, maximum is {max_points}"
        return f"too many points: range produces {points}, maximum is {max_points}"
    return None


def format_label(x: float) -> str:
    """One-decimal label, rounding exact halves away from zero (0.25 -> "0.3")."""
    # Decimal(x) is the exact binary value, so 0.35 (stored as 0.34999...) gives "0.3"
    label = str(Decimal(x).quantize(_LABEL_QUANTUM, context=_LABEL_CONTEXT))
    # Avoid "-0.0" for values that round to zero from below
    return "0.0" if label == "-0.0" else label


def sample_expression(
    expression: str,
    x_min: float,
    x_max: float,
    step: float,
    evaluator: Optional[ExpressionEvaluator] = None,
    max_points: Optional[int] = None,
    logger: Optional[Logger] = None,
) -> SeriesResult:
    """Sample ``expression`` over the inclusive range ``[x_min, x_max]``.

    Args:
        expression: Expression text in ``x``; trimmed and case-folded
        x_min: First x value
        x_max: Last x value (inclusive)
        step: Distance between consecutive x values, must be positive
        evaluator: Expression evaluator (default: SymPy-backed evaluator)
        max_points: Upper bound on grid points (default: Config.get_max_points())
        logger: Logger instance

    Returns:
        SeriesResult with one sample per x where the expression is finite,
        or an error describing why no series could be produced
    """
    logger = logger or session_logger
    evaluator = evaluator or ExpressionEvaluator()
    max_points = max_points if max_points is not None else Config.get_max_points()

    expr = normalize_expression(expression)
    if not expr:
        return SeriesResult.fail(ErrorKind.MISSING_EXPRESSION, MISSING_EXPRESSION_MESSAGE)

    range_problem = check_range(x_min, x_max, step, max_points)
    if range_problem is not None:
        logger.warning(
            "Rejected sampling range", x_min=x_min, x_max=x_max, step=step, reason=range_problem
        )
        return SeriesResult.fail(ErrorKind.INVALID_RANGE, range_problem)

    try:
        compiled = evaluator.compile(expr)
    except ExpressionSyntaxError as e:
        logger.info("Expression failed validation", expression=expr, reason=e.reason)
        return SeriesResult.fail(ErrorKind.INVALID_EXPRESSION_SYNTAX, INVALID_EXPRESSION_MESSAGE)

    _probe(compiled, logger)

    samples: List[Sample] = []
    skipped = 0
    for i in range(count_points(x_min, x_max, step)):
        x = x_min + i * step
        try:
            y = compiled.evaluate(x)
        except (ExpressionError, ArithmeticError):
            skipped += 1
            continue
        if not math.isfinite(y):
            skipped += 1
            continue
        samples.append(Sample(x=x, y=y, label=format_label(x)))

    if not samples:
        logger.info("Expression produced no finite points", expression=expr, skipped=skipped)
        return SeriesResult.fail(ErrorKind.NO_VALID_POINTS, NO_VALID_POINTS_MESSAGE)

    logger.debug("Sampled expression", expression=expr, points=len(samples), skipped=skipped)
    return SeriesResult.ok(samples)


def _probe(compiled: CompiledExpression, logger: Logger) -> None:
    """Diagnostic-only evaluation at ``PROBE_X``; never rejects an expression.

    Rejection happens earlier, in ``evaluator.compile``, and only for text
    that does not parse. A value that is merely undefined at the probe
    point (``sqrt(x - 5)`` at x=1) is logged at debug level and sampling
    proceeds over the real domain, so the outcome for such expressions
    depends on the range alone.
    """
    try:
        compiled.evaluate(PROBE_X)
    except (ExpressionError, ArithmeticError) as e:
        logger.debug("Probe value undefined", expression=compiled.source, reason=str(e))
