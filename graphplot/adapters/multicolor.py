"""Multi-colour categorical adapter (bar, histogram)."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from graphplot.series.models import Sample
    from graphplot.themes.base import Theme

from graphplot.adapters.base import ChartAdapter
from graphplot.adapters.models import MultiColorDataSet
from graphplot.controls import GraphKind


class MultiColorAdapter(ChartAdapter):
    """Bars coloured by cycling the theme palette; histograms have no gaps."""

    def get_description(self) -> str:
        return (
            "Bar and histogram charts: one value per label, each bar coloured "
            "from the theme palette, histogram bars drawn without gaps"
        )

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> MultiColorDataSet:
        gap_free = kind == GraphKind.HISTOGRAM.value
        width = 1.0 if gap_free else 0.8
        return MultiColorDataSet(
            kind=kind,
            title=title,
            labels=[s.label for s in samples],
            data=[s.y for s in samples],
            background_colors=[theme.color_at(i) for i in range(len(samples))],
            border_color=theme.get_default_color(),
            bar_percentage=width,
            category_percentage=width,
        )
