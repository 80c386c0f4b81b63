"""Chart dataset shapes produced by the adapters.

Each model is one structural family; ``ChartDataSet`` is the union,
discriminated by ``shape``. Field names follow chart.js vocabulary so a
front end can pass them through with little renaming.
"""

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class _DataSetBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str


class CategoricalDataSet(_DataSetBase):
    """One value per label, ordered (line, area, step)."""

    shape: Literal["categorical"] = "categorical"
    title: str
    labels: Tuple[str, ...]
    data: Tuple[float, ...]
    border_color: str
    background_color: str
    fill: bool = False
    tension: float = 0.4
    stepped: bool = False


class MultiColorDataSet(_DataSetBase):
    """One value per label, each bar coloured independently (bar, histogram)."""

    shape: Literal["multicolor"] = "multicolor"
    title: str
    labels: Tuple[str, ...]
    data: Tuple[float, ...]
    background_colors: Tuple[str, ...]
    border_color: str
    bar_percentage: float = 0.8
    category_percentage: float = 0.8


class XYPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class BubblePoint(XYPoint):
    r: float


class XYDataSet(_DataSetBase):
    """Independent (x, y) pairs (scatter)."""

    shape: Literal["xy"] = "xy"
    points: Tuple[XYPoint, ...]
    background_color: str
    border_color: str


class BubbleDataSet(_DataSetBase):
    """(x, y) pairs with a radius derived from |y| (bubble)."""

    shape: Literal["bubble"] = "bubble"
    points: Tuple[BubblePoint, ...]
    background_color: str
    border_color: str


class ProportionDataSet(_DataSetBase):
    """Slices of a whole (pie, doughnut, polar)."""

    shape: Literal["proportion"] = "proportion"
    title: str
    labels: Tuple[str, ...]
    data: Tuple[float, ...]
    background_colors: Tuple[str, ...]
    border_color: str
    cutout: Optional[str] = None


class RadarDataSet(_DataSetBase):
    """One value per label drawn as a closed polygon (radar)."""

    shape: Literal["radar"] = "radar"
    title: str
    labels: Tuple[str, ...]
    data: Tuple[float, ...]
    border_color: str
    background_color: str
    closed: Literal[True] = True


ChartDataSet = Annotated[
    Union[
        CategoricalDataSet,
        MultiColorDataSet,
        XYDataSet,
        BubbleDataSet,
        ProportionDataSet,
        RadarDataSet,
    ],
    Field(discriminator="shape"),
]
