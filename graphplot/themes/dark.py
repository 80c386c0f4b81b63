"""Dark theme with muted colors for reduced eye strain."""

from graphplot.themes.base import Theme


class DarkTheme(Theme):
    """Dark theme with muted colors for reduced eye strain."""

    def __init__(self):
        self.name = "dark"
        self.default_color = "#5DADE2"
        self.fill_color = "rgba(93, 173, 226, 0.15)"
        self.border_color = "#1E1E1E"
        self.colors = [
            "#5DADE2",  # light blue
            "#F39C12",  # orange
            "#58D68D",  # green
            "#EC7063",  # red
            "#BB8FCE",  # purple
            "#E59866",  # brown
            "#F1948A",  # pink
            "#AEB6BF",  # gray
        ]

    def get_description(self) -> str:
        return (
            "Dark theme with muted colors designed to reduce eye strain, "
            "perfect for extended viewing sessions and low-light environments"
        )
