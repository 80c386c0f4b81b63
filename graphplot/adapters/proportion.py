"""Proportion-of-whole adapter (pie, doughnut, polar)."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from graphplot.series.models import Sample
    from graphplot.themes.base import Theme

from graphplot.adapters.base import ChartAdapter
from graphplot.adapters.models import ProportionDataSet
from graphplot.controls import GraphKind


class ProportionAdapter(ChartAdapter):
    """Slices coloured by cycling the theme palette; values are magnitudes."""

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> ProportionDataSet:
        return ProportionDataSet(
            kind=kind,
            title=title,
            labels=[s.label for s in samples],
            data=[s.y for s in samples],
            background_colors=[theme.color_at(i) for i in range(len(samples))],
            border_color=theme.get_border_color(),
            cutout="50%" if kind == GraphKind.DOUGHNUT.value else None,
        )

    def get_description(self) -> str:
        return (
            "Pie, doughnut and polar-area charts: each value is a slice of the "
            "whole, coloured from the theme palette"
        )
