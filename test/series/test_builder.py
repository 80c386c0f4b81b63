"""Tests for SeriesBuilder -- family dispatch, error derivation, fallback path."""

import time

import pytest

from graphplot.controls import EQUATION_KINDS, GraphKind
from graphplot.series.builder import EMPTY_DATA_MESSAGE, SeriesBuilder, build_series
from graphplot.series.models import ErrorKind, SeriesResult


class ExplodingEvaluator:
    """Evaluator whose compile step fails in a way the sampler does not model."""

    def compile(self, expression):
        raise RuntimeError("evaluator exploded")


class _ExplodingCompiled:
    source = "x"

    def evaluate(self, x):
        raise MemoryError("out of memory while evaluating")


class ExplodingAtSampleEvaluator:
    """Evaluator that compiles fine but fails unexpectedly per sample."""

    def compile(self, expression):
        return _ExplodingCompiled()


class TestBuilderLiteralFamily:
    """Kinds outside the equation family parse ``data``."""

    @pytest.mark.parametrize(
        "kind", [k.value for k in GraphKind if k not in EQUATION_KINDS]
    )
    def test_literal_kinds_use_data(self, make_controls, kind):
        result = build_series(make_controls(kind, data="3, 4"))
        assert result.is_ok
        assert result.ys == [3.0, 4.0]

    def test_sample_layout(self, make_controls):
        result = build_series(make_controls("bar", data="10, 20, 30"))
        assert result.xs == [0.0, 1.0, 2.0]
        assert result.labels == ["Value 1", "Value 2", "Value 3"]

    def test_empty_data(self, make_controls):
        result = build_series(make_controls("bar", data=""))
        assert result.error.kind == ErrorKind.EMPTY_DATA
        assert result.error_message == EMPTY_DATA_MESSAGE
        assert result.samples == ()

    def test_equation_ignored_for_literal_kinds(self, make_controls):
        result = build_series(make_controls("pie", equation="1/0*bogus(", data="1"))
        assert result.is_ok


class TestBuilderEquationFamily:
    """Equation kinds sample ``equation`` over the range."""

    @pytest.mark.parametrize("kind", sorted(k.value for k in EQUATION_KINDS))
    def test_equation_kinds_use_equation(self, make_controls, kind):
        result = build_series(make_controls(kind, data=""))
        assert result.is_ok
        assert result.ys == [4, 1, 0, 1, 4]

    def test_square(self, make_controls):
        result = build_series(make_controls("line", equation="x^2"))
        assert result.xs == [-2, -1, 0, 1, 2]
        assert result.ys == [4, 1, 0, 1, 4]
        assert result.error is None

    def test_log_partial_domain(self, make_controls):
        result = build_series(
            make_controls("scatter", equation="log(x)", x_min=-1, x_max=1, step=0.5)
        )
        assert result.xs == [0.5, 1.0]
        assert result.error is None

    def test_invalid_equation(self, make_controls):
        result = build_series(make_controls("line", equation="1/0*bogus("))
        assert result.error_message == "invalid equation format"
        assert result.samples == ()

    def test_missing_equation(self, make_controls):
        result = build_series(make_controls("area", equation="  "))
        assert result.error.kind == ErrorKind.MISSING_EXPRESSION

    def test_zero_step(self, make_controls):
        result = build_series(make_controls("line", step=0))
        assert result.error.kind == ErrorKind.INVALID_RANGE


class TestBuilderDeterminism:
    def test_identical_controls_identical_results(self, make_controls):
        controls = make_controls("line", equation="sin(x)", x_min=-3, x_max=3, step=0.25)
        first = build_series(controls)
        second = build_series(controls)
        assert first == second
        assert first.model_dump() == second.model_dump()


class TestBuilderUnexpectedFailureFallback:
    """Fallback path: failures outside the modeled ones become UNEXPECTED."""

    def test_compile_failure(self, make_controls):
        builder = SeriesBuilder(evaluator=ExplodingEvaluator())
        result = builder.build(make_controls("line"))
        assert result.error.kind == ErrorKind.UNEXPECTED
        assert result.error_message == "evaluator exploded"
        assert result.samples == ()

    def test_per_sample_failure(self, make_controls):
        builder = SeriesBuilder(evaluator=ExplodingAtSampleEvaluator())
        result = builder.build(make_controls("bubble"))
        assert result.error.kind == ErrorKind.UNEXPECTED
        assert "out of memory" in result.error_message

    @pytest.mark.parametrize(
        "equation",
        [
            "((((",
            "))",
            "x^^2",
            "sin()",
            "log(x, )",
            "x/",
            "*x",
            "1e",
            "2..3",
            "x!!",
            "'x'",
            "lambda x: x",
            "x**-",
            "sqrt(-1)",
            "tan(x)^1e10",
            "exp(exp(exp(x)))",
            "0^x",
            "x^x^x",
            "10^10^10",
            "x^x^x^x",
            "-(10^10^10)",
            "abs(10^10^10^10)",
            "\x00",
            "😀",
        ],
    )
    def test_fuzzed_equations_keep_invariant(self, make_controls, equation):
        started = time.monotonic()
        result = build_series(make_controls("line", equation=equation, x_min=-10, x_max=10))
        assert time.monotonic() - started < 10
        assert isinstance(result, SeriesResult)
        assert bool(result.samples) != (result.error is not None)


class TestBuilderRangeOverflow:
    def test_span_beyond_float_range_is_invalid_range(self, make_controls):
        result = build_series(make_controls("line", x_min=-1e308, x_max=1e308, step=1))
        assert result.error.kind == ErrorKind.INVALID_RANGE
        assert "too many points" in result.error_message
