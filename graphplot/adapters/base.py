"""Base class for chart data adapters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from graphplot.adapters.models import ChartDataSet
    from graphplot.series.models import Sample
    from graphplot.themes.base import Theme


class ChartAdapter(ABC):
    """Turns a series of samples into one structural dataset family."""

    @abstractmethod
    def adapt(
        self, samples: Sequence["Sample"], kind: str, theme: "Theme", title: str
    ) -> "ChartDataSet":
        """Build the dataset for ``kind`` from ``samples``."""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the adapter."""
        pass
