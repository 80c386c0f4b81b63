"""Light theme with saturated colors on white."""

from graphplot.themes.base import Theme


class LightTheme(Theme):
    """Light theme using the classic tab10 palette."""

    def __init__(self):
        self.name = "light"
        self.default_color = "#1f77b4"
        self.fill_color = "rgba(31, 119, 180, 0.1)"
        self.border_color = "#FFFFFF"
        self.colors = [
            "#1f77b4",  # blue
            "#ff7f0e",  # orange
            "#2ca02c",  # green
            "#d62728",  # red
            "#9467bd",  # purple
            "#8c564b",  # brown
            "#e377c2",  # pink
            "#7f7f7f",  # gray
        ]

    def get_description(self) -> str:
        return "Clean light theme with saturated colors, suited to print and bright screens"
