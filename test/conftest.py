"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a deterministic chart pipeline,
the default evaluator, and helpers for building graph controls.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphplot.controls import GraphControls, GraphKind  # noqa: E402
from graphplot.pipeline import ChartPipeline  # noqa: E402
from graphplot.series.evaluator import ExpressionEvaluator  # noqa: E402
from graphplot.themes import get_theme  # noqa: E402


@pytest.fixture
def evaluator():
    """SymPy-backed expression evaluator."""
    return ExpressionEvaluator()


@pytest.fixture
def neon_theme():
    return get_theme("neon")


@pytest.fixture
def pipeline(neon_theme):
    """Fresh pipeline with its own cache so tests do not share results."""
    return ChartPipeline(theme=neon_theme, max_points=10000, cache_size=32)


@pytest.fixture
def make_controls():
    """Factory for GraphControls with test-friendly defaults."""

    def _make(kind="line", **overrides) -> GraphControls:
        values = {
            "type": GraphKind(kind),
            "equation": "x^2",
            "data": "10, 20, 30, 40, 50",
            "x_min": -2.0,
            "x_max": 2.0,
            "step": 1.0,
        }
        values.update(overrides)
        return GraphControls(**values)

    return _make
