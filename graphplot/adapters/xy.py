"""XY-paired adapters (scatter, bubble)."""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from graphplot.series.models import Sample
    from graphplot.themes.base import Theme

from graphplot.adapters.base import ChartAdapter
from graphplot.adapters.models import BubbleDataSet, BubblePoint, XYDataSet, XYPoint

MAX_BUBBLE_RADIUS = 20.0


def bubble_radius(y: float) -> float:
    """Radius grows with |y| and is capped so large values stay on screen."""
    return min(abs(y) * 2, MAX_BUBBLE_RADIUS)


class ScatterAdapter(ChartAdapter):
    """Independent (x, y) points; carries neither labels nor a title."""

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> XYDataSet:
        return XYDataSet(
            kind=kind,
            points=[XYPoint(x=s.x, y=s.y) for s in samples],
            background_color=theme.color_at(0),
            border_color=theme.get_default_color(),
        )

    def get_description(self) -> str:
        return (
            "Scatter plot of independent (x, y) points for showing relationships "
            "between x and the expression value"
        )


class BubbleAdapter(ChartAdapter):
    """(x, y) points with radius ``min(|y| * 2, 20)``."""

    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> BubbleDataSet:
        return BubbleDataSet(
            kind=kind,
            points=[BubblePoint(x=s.x, y=s.y, r=bubble_radius(s.y)) for s in samples],
            background_color=theme.color_at(0),
            border_color=theme.get_default_color(),
        )

    def get_description(self) -> str:
        return "Bubble chart: (x, y) points sized by |y|, radius capped at 20"
