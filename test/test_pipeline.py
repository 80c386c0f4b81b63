"""Tests for ChartPipeline -- end-to-end controls to chart result."""

import pytest

from graphplot.controls import GraphControls, GraphKind
from graphplot.pipeline import ChartPipeline, ChartResult, compute_chart, dataset_title
from graphplot.presets import DEFAULT_CONTROLS
from graphplot.series.models import ErrorKind


class TestPipelineSuccess:
    def test_line_chart(self, pipeline, make_controls):
        result = pipeline.compute(make_controls("line"))
        assert result.is_ok
        assert result.error is None
        assert result.dataset.shape == "categorical"
        assert result.dataset.data == (4, 1, 0, 1, 4)
        assert result.dataset.title == "x^2"

    def test_literal_chart_title(self, pipeline, make_controls):
        result = pipeline.compute(make_controls("bar", data="1, 2"))
        assert result.dataset.shape == "multicolor"
        assert result.dataset.title == "Values"

    @pytest.mark.parametrize("kind", list(GraphKind))
    def test_every_kind_produces_dataset(self, pipeline, make_controls, kind):
        result = pipeline.compute(make_controls(kind.value))
        assert result.dataset is not None
        assert result.dataset.kind == kind.value

    def test_default_controls(self, pipeline):
        result = pipeline.compute(DEFAULT_CONTROLS)
        assert result.is_ok
        assert len(result.dataset.data) == 201


class TestPipelineErrors:
    def test_error_replaces_dataset(self, pipeline, make_controls):
        result = pipeline.compute(make_controls("line", equation="1/0*bogus("))
        assert result.dataset is None
        assert result.error == "invalid equation format"
        assert result.error_kind == ErrorKind.INVALID_EXPRESSION_SYNTAX

    def test_empty_data(self, pipeline, make_controls):
        result = pipeline.compute(make_controls("doughnut", data=""))
        assert result.error == "enter valid comma-separated numbers"

    def test_result_requires_one_outcome(self, make_controls):
        with pytest.raises(ValueError):
            ChartResult(controls=make_controls())


class TestPipelineCaching:
    def test_identical_controls_hit_cache(self, pipeline, make_controls):
        first = pipeline.compute(make_controls("scatter"))
        second = pipeline.compute(make_controls("scatter"))
        assert first is second
        assert pipeline.cache_info().hits == 1

    def test_clear_cache(self, pipeline, make_controls):
        pipeline.compute(make_controls("line"))
        pipeline.clear_cache()
        assert pipeline.cache_info().currsize == 0

    def test_cached_result_cannot_be_mutated(self, pipeline, make_controls):
        controls = make_controls("bar", data="1, 2")
        first = pipeline.compute(controls)
        with pytest.raises(AttributeError):
            first.dataset.data.append(999.0)
        assert pipeline.compute(controls).dataset.data == (1.0, 2.0)

    def test_fresh_pipelines_agree(self, neon_theme, make_controls):
        controls = make_controls("bubble", equation="sin(x)", x_min=-3, x_max=3, step=0.5)
        a = ChartPipeline(theme=neon_theme, cache_size=4).compute(controls)
        b = ChartPipeline(theme=neon_theme, cache_size=4).compute(controls)
        assert a == b

    def test_compute_chart_shared_pipeline(self, make_controls):
        result = compute_chart(make_controls("pie", data="1, 2, 3"), theme_name="dark")
        assert result.dataset.background_colors[0] == "#5DADE2"


class TestDatasetTitle:
    def test_blank_equation_title(self):
        assert dataset_title(GraphControls(type="line", equation="  ")) == "Values"

    def test_literal_kind_title(self):
        assert dataset_title(GraphControls(type="radar", equation="x")) == "Values"
