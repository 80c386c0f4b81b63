"""Mapping from graph kind to structural shape family."""

from enum import Enum
from typing import assert_never

from graphplot.controls import GraphKind


class ShapeFamily(str, Enum):
    CATEGORICAL = "categorical"
    MULTICOLOR = "multicolor"
    XY = "xy"
    BUBBLE = "bubble"
    PROPORTION = "proportion"
    RADAR = "radar"


def shape_family(kind: GraphKind) -> ShapeFamily:
    """Return the shape family for ``kind``.

    The match is exhaustive over ``GraphKind``; a type checker flags the
    ``assert_never`` branch if a new kind is added without a mapping.
    """
    match kind:
        case GraphKind.LINE | GraphKind.AREA | GraphKind.STEP:
            return ShapeFamily.CATEGORICAL
        case GraphKind.BAR | GraphKind.HISTOGRAM:
            return ShapeFamily.MULTICOLOR
        case GraphKind.SCATTER:
            return ShapeFamily.XY
        case GraphKind.BUBBLE:
            return ShapeFamily.BUBBLE
        case GraphKind.PIE | GraphKind.DOUGHNUT | GraphKind.POLAR:
            return ShapeFamily.PROPORTION
        case GraphKind.RADAR:
            return ShapeFamily.RADAR
        case _:
            assert_never(kind)
