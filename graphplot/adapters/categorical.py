"""Categorical single-series adapters (line, area, step, radar)."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from graphplot.series.models import Sample
    from graphplot.themes.base import Theme

from graphplot.adapters.base import ChartAdapter
from graphplot.adapters.models import CategoricalDataSet, RadarDataSet
from graphplot.controls import GraphKind


class CategoricalAdapter(ChartAdapter):
    """One value per label in generation order.

    ``area`` and ``step`` only change fill and interpolation hints.
    """

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> CategoricalDataSet:
        is_area = kind == GraphKind.AREA.value
        is_step = kind == GraphKind.STEP.value
        return CategoricalDataSet(
            kind=kind,
            title=title,
            labels=[s.label for s in samples],
            data=[s.y for s in samples],
            border_color=theme.get_default_color(),
            background_color=theme.get_fill_color() if is_area else "transparent",
            fill=is_area,
            tension=0.0 if is_step else 0.4,
            stepped=is_step,
        )

    def get_description(self) -> str:
        return (
            "Categorical series for line, area and step charts: one value per "
            "label in order, with fill and interpolation hints per kind"
        )


class RadarAdapter(ChartAdapter):
    """Categorical values drawn as a closed polygon."""

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> RadarDataSet:
        return RadarDataSet(
            kind=kind,
            title=title,
            labels=[s.label for s in samples],
            data=[s.y for s in samples],
            border_color=theme.get_default_color(),
            background_color=theme.get_fill_color(),
        )

    def get_description(self) -> str:
        return "Radar chart: one value per label, joined into a closed polygon"
