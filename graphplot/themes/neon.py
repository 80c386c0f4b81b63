"""Neon theme: cyan accent on a dark canvas."""

from graphplot.themes.base import Theme


class NeonTheme(Theme):
    """Cyan accent with a six-colour translucent palette."""

    def __init__(self):
        self.name = "neon"
        self.default_color = "#0ff"
        self.fill_color = "rgba(0, 255, 255, 0.1)"
        self.border_color = "#1a1b26"
        self.colors = [
            "rgba(0, 255, 255, 0.8)",
            "rgba(255, 99, 132, 0.8)",
            "rgba(255, 206, 86, 0.8)",
            "rgba(75, 192, 192, 0.8)",
            "rgba(153, 102, 255, 0.8)",
            "rgba(255, 159, 64, 0.8)",
        ]

    def get_description(self) -> str:
        return (
            "Neon theme with a cyan accent and six translucent colours, "
            "designed for dark dashboards"
        )
