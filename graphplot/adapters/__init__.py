"""Chart data adapter registry.

Maps each graph kind to its shape family and provides one adapter per
family, looked up by family name.
"""

from typing import Dict, Optional, Sequence, Union

from graphplot.adapters.base import ChartAdapter
from graphplot.adapters.categorical import CategoricalAdapter, RadarAdapter
from graphplot.adapters.families import ShapeFamily, shape_family
from graphplot.adapters.models import (
    BubbleDataSet,
    BubblePoint,
    CategoricalDataSet,
    ChartDataSet,
    MultiColorDataSet,
    ProportionDataSet,
    RadarDataSet,
    XYDataSet,
    XYPoint,
)
from graphplot.adapters.multicolor import MultiColorAdapter
from graphplot.adapters.proportion import ProportionAdapter
from graphplot.adapters.xy import BubbleAdapter, ScatterAdapter, bubble_radius
from graphplot.controls import GraphKind
from graphplot.logger import Logger, session_logger
from graphplot.series.models import Sample
from graphplot.themes import Theme, get_theme

DEFAULT_TITLE = "Values"

# Registry of available adapters
_ADAPTERS: Dict[ShapeFamily, ChartAdapter] = {
    ShapeFamily.CATEGORICAL: CategoricalAdapter(),
    ShapeFamily.MULTICOLOR: MultiColorAdapter(),
    ShapeFamily.XY: ScatterAdapter(),
    ShapeFamily.BUBBLE: BubbleAdapter(),
    ShapeFamily.PROPORTION: ProportionAdapter(),
    ShapeFamily.RADAR: RadarAdapter(),
}


def get_adapter(name: Union[str, ShapeFamily]) -> ChartAdapter:
    """Get an adapter by shape family name.

    Args:
        name: Family name (categorical, multicolor, xy, bubble, proportion, radar)

    Returns:
        ChartAdapter instance

    Raises:
        ValueError: If the family name is not found
    """
    try:
        family = ShapeFamily(name.lower() if isinstance(name, str) else name)
    except ValueError:
        available = ", ".join(f.value for f in _ADAPTERS)
        raise ValueError(f"Unknown adapter '{name}'. Available adapters: {available}")
    return _ADAPTERS[family]


def list_adapters() -> list[str]:
    """Get a list of available adapter (shape family) names."""
    return [family.value for family in _ADAPTERS]


def list_adapters_with_descriptions() -> dict[str, str]:
    """Get all available adapters with their descriptions."""
    return {family.value: adapter.get_description() for family, adapter in _ADAPTERS.items()}


def resolve_family(kind: Union[str, GraphKind], logger: Optional[Logger] = None) -> ShapeFamily:
    """Shape family for ``kind``; unrecognized kinds fall back to categorical."""
    try:
        return shape_family(GraphKind(kind))
    except ValueError:
        (logger or session_logger).warning(
            "Unknown graph kind, using categorical shape", kind=str(kind)
        )
        return ShapeFamily.CATEGORICAL


def adapt(
    samples: Sequence[Sample],
    kind: Union[str, GraphKind],
    theme: Optional[Theme] = None,
    title: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> ChartDataSet:
    """Map ``samples`` to the dataset shape required by ``kind``.

    Args:
        samples: Non-empty series in generation order
        kind: Graph kind tag; unknown tags produce a categorical dataset
        theme: Colour palette (default: configured theme)
        title: Dataset title (default: "Values")
        logger: Logger instance

    Returns:
        One of the ChartDataSet shapes
    """
    family = resolve_family(kind, logger)
    kind_value = kind.value if isinstance(kind, GraphKind) else str(kind)
    return _ADAPTERS[family].adapt(
        samples, kind_value, theme or get_theme(), title or DEFAULT_TITLE
    )


__all__ = [
    "ChartAdapter",
    "CategoricalAdapter",
    "RadarAdapter",
    "MultiColorAdapter",
    "ScatterAdapter",
    "BubbleAdapter",
    "ProportionAdapter",
    "ShapeFamily",
    "ChartDataSet",
    "CategoricalDataSet",
    "MultiColorDataSet",
    "XYDataSet",
    "XYPoint",
    "BubbleDataSet",
    "BubblePoint",
    "ProportionDataSet",
    "RadarDataSet",
    "adapt",
    "bubble_radius",
    "get_adapter",
    "list_adapters",
    "list_adapters_with_descriptions",
    "resolve_family",
    "shape_family",
]
