"""Theme registry.

Provides colour palettes (neon, dark, light) and a registry for looking
them up by name.
"""

from typing import Dict, Optional

from graphplot.config import Config
from graphplot.exceptions import ThemeNotFoundError
from graphplot.themes.base import Theme
from graphplot.themes.dark import DarkTheme
from graphplot.themes.light import LightTheme
from graphplot.themes.neon import NeonTheme

# Registry of available themes
_THEMES: Dict[str, Theme] = {
    "neon": NeonTheme(),
    "dark": DarkTheme(),
    "light": LightTheme(),
}


def get_theme(name: Optional[str] = None) -> Theme:
    """Get a theme by name.

    Args:
        name: Theme name (neon, dark, light); defaults to GRAPHPLOT_THEME

    Returns:
        Theme instance

    Raises:
        ThemeNotFoundError: If theme name is not found
    """
    theme_name = name.lower().strip() if name else Config.get_theme()
    theme = _THEMES.get(theme_name)
    if theme is None:
        raise ThemeNotFoundError(theme_name, list_themes())
    return theme


def list_themes() -> list[str]:
    """Get a list of available theme names."""
    return list(_THEMES.keys())


def list_themes_with_descriptions() -> Dict[str, str]:
    """Get a dictionary of theme names to their descriptions."""
    return {name: theme.get_description() for name, theme in _THEMES.items()}


__all__ = [
    "Theme",
    "NeonTheme",
    "DarkTheme",
    "LightTheme",
    "get_theme",
    "list_themes",
    "list_themes_with_descriptions",
]
