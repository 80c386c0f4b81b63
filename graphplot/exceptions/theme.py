"""Theme not found exception."""
from typing import List, Optional

from graphplot.exceptions.base import RegistryError


class ThemeNotFoundError(RegistryError):
    """Raised when a palette theme cannot be found."""

    def __init__(self, theme_name: str, available_themes: Optional[List[str]] = None):
        """
        Args:
            theme_name: Name of the theme that was not found
            available_themes: List of registered theme names
        """
        available_text = ""
        if available_themes:
            available_text = f" Available themes: {', '.join(available_themes)}."

        super().__init__(
            code="THEME_NOT_FOUND",
            message=f"Unknown theme '{theme_name}'.{available_text}",
            details={"theme": theme_name, "available": available_themes or []},
        )
        self.theme_name = theme_name
