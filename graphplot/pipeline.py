"""Chart pipeline: GraphControls in, chart dataset or error message out."""

import functools
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from graphplot.adapters import DEFAULT_TITLE, ChartDataSet, adapt
from graphplot.config import Config
from graphplot.controls import GraphControls
from graphplot.logger import Logger, session_logger
from graphplot.series.builder import SeriesBuilder
from graphplot.series.evaluator import ExpressionEvaluator
from graphplot.series.models import ErrorKind
from graphplot.themes import Theme, get_theme


class ChartResult(BaseModel):
    """What a rendering layer consumes: a dataset, or a message to show instead."""

    model_config = ConfigDict(frozen=True)

    controls: GraphControls
    dataset: Optional[ChartDataSet] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ChartResult":
        if (self.dataset is None) == (self.error is None):
            raise ValueError("A chart result must carry either a dataset or an error")
        return self

    @property
    def is_ok(self) -> bool:
        return self.error is None


def dataset_title(controls: GraphControls) -> str:
    if controls.uses_equation:
        return controls.equation.strip() or DEFAULT_TITLE
    return DEFAULT_TITLE


class ChartPipeline:
    """Pure, memoized mapping from GraphControls to ChartResult.

    Results depend only on the controls and on the theme and evaluator
    fixed at construction, so they are cached per controls value.
    """

    def __init__(
        self,
        theme: Optional[Theme] = None,
        evaluator: Optional[ExpressionEvaluator] = None,
        max_points: Optional[int] = None,
        cache_size: Optional[int] = None,
        logger: Optional[Logger] = None,
    ):
        self.theme = theme or get_theme()
        self.logger = logger or session_logger
        self.builder = SeriesBuilder(
            evaluator=evaluator, max_points=max_points, logger=self.logger
        )
        size = cache_size if cache_size is not None else Config.get_cache_size()
        self._cached_compute = functools.lru_cache(maxsize=size)(self._compute)

    def compute(self, controls: GraphControls) -> ChartResult:
        """Compute the chart result for ``controls`` (cached)."""
        return self._cached_compute(controls)

    def cache_info(self):
        return self._cached_compute.cache_info()

    def clear_cache(self) -> None:
        self._cached_compute.cache_clear()

    def _compute(self, controls: GraphControls) -> ChartResult:
        series = self.builder.build(controls)
        if series.error is not None:
            return ChartResult(
                controls=controls,
                error=series.error.message,
                error_kind=series.error.kind,
            )

        dataset = adapt(
            series.samples,
            controls.type,
            theme=self.theme,
            title=dataset_title(controls),
            logger=self.logger,
        )
        self.logger.debug(
            "Chart computed",
            kind=controls.type.value,
            shape=dataset.shape,
            points=len(series.samples),
            theme=self.theme.name,
        )
        return ChartResult(controls=controls, dataset=dataset)


@functools.lru_cache(maxsize=None)
def get_pipeline(theme_name: Optional[str] = None) -> ChartPipeline:
    """Shared pipeline per theme name.

    Raises:
        ThemeNotFoundError: If theme_name is not a registered theme
    """
    return ChartPipeline(theme=get_theme(theme_name))


def compute_chart(controls: GraphControls, theme_name: Optional[str] = None) -> ChartResult:
    """Compute a chart with the shared pipeline for ``theme_name``."""
    return get_pipeline(theme_name).compute(controls)
