"""Base class for palette themes."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class Theme(ABC):
    """Colour palette that chart adapters draw from.

    ``get_colors`` is cycled for multi-colour charts (bar, pie, ...);
    ``get_default_color`` is the accent for single-series charts.
    """

    name: str = ""
    default_color: str = ""
    fill_color: str = ""
    border_color: str = ""
    colors: List[str] = []

    def get_default_color(self) -> str:
        return self.default_color

    def get_fill_color(self) -> str:
        """Translucent accent used under area charts and inside radar polygons."""
        return self.fill_color

    def get_border_color(self) -> str:
        """Separator between slices of proportion charts."""
        return self.border_color

    def get_colors(self) -> List[str]:
        return list(self.colors)

    def color_at(self, index: int) -> str:
        """Palette colour for the ``index``-th sample, cycling over the palette."""
        return self.colors[index % len(self.colors)]

    def get_config(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "default_color": self.default_color,
            "fill_color": self.fill_color,
            "border_color": self.border_color,
            "colors": self.get_colors(),
        }

    @abstractmethod
    def get_description(self) -> str:
        """Get a human-readable description of the theme."""
        pass
