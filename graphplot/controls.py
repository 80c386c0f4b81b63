"""Graph controls: the immutable input to every chart computation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GraphKind(str, Enum):
    """The eleven chart kinds a caller can request."""

    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    PIE = "pie"
    DOUGHNUT = "doughnut"
    RADAR = "radar"
    AREA = "area"
    HISTOGRAM = "histogram"
    BUBBLE = "bubble"
    STEP = "step"
    POLAR = "polar"


# Kinds whose series is sampled from ``equation`` rather than parsed from ``data``
EQUATION_KINDS: frozenset[GraphKind] = frozenset(
    {GraphKind.LINE, GraphKind.AREA, GraphKind.SCATTER, GraphKind.BUBBLE, GraphKind.STEP}
)


def is_equation_kind(kind: GraphKind) -> bool:
    return kind in EQUATION_KINDS


class GraphControls(BaseModel):
    """User controls for one chart.

    ``x_min``/``x_max``/``step`` only matter for equation kinds; ``data``
    only matters for the others. Both are kept so switching kinds keeps
    the user's text.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: GraphKind = GraphKind.LINE
    equation: str = "sin(x)"
    data: str = "10, 20, 30, 40, 50"
    x_min: float = Field(default=-10.0, alias="xMin")
    x_max: float = Field(default=10.0, alias="xMax")
    step: float = 0.1

    @property
    def uses_equation(self) -> bool:
        return is_equation_kind(self.type)
