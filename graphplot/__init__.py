"""graphplot: turn an expression in x, or a list of numbers, into chart data.

Pipeline: GraphControls -> SeriesBuilder -> chart adapter -> ChartResult.
"""

from graphplot.adapters import ChartDataSet, adapt
from graphplot.controls import EQUATION_KINDS, GraphControls, GraphKind
from graphplot.pipeline import ChartPipeline, ChartResult, compute_chart
from graphplot.series import SeriesBuilder, SeriesResult, build_series, parse_literal, sample_expression

__all__ = [
    "EQUATION_KINDS",
    "ChartDataSet",
    "ChartPipeline",
    "ChartResult",
    "GraphControls",
    "GraphKind",
    "SeriesBuilder",
    "SeriesResult",
    "adapt",
    "build_series",
    "compute_chart",
    "parse_literal",
    "sample_expression",
]
