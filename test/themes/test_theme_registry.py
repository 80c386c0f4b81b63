"""Tests for the theme registry -- palettes and lookup."""

import pytest

from graphplot.exceptions import RegistryError, ThemeNotFoundError
from graphplot.themes import get_theme, list_themes, list_themes_with_descriptions


class TestThemeRegistry:
    """Theme registry discovery tests."""

    def test_list_themes_returns_expected(self):
        assert list_themes() == ["neon", "dark", "light"]

    def test_get_theme_case_insensitive(self):
        assert get_theme("DARK") is get_theme("dark")

    def test_default_theme_from_config(self, monkeypatch):
        monkeypatch.setenv("GRAPHPLOT_THEME", "light")
        assert get_theme().name == "light"

    def test_default_theme_is_neon(self, monkeypatch):
        monkeypatch.delenv("GRAPHPLOT_THEME", raising=False)
        assert get_theme().name == "neon"

    def test_get_theme_invalid_raises(self):
        with pytest.raises(ThemeNotFoundError, match="Unknown theme 'solarized'") as exc_info:
            get_theme("solarized")
        assert isinstance(exc_info.value, RegistryError)
        assert exc_info.value.code == "THEME_NOT_FOUND"
        assert "neon" in exc_info.value.details["available"]

    def test_list_themes_with_descriptions(self):
        descs = list_themes_with_descriptions()
        assert set(descs) == set(list_themes())
        assert all(descs.values())


class TestThemePalettes:
    @pytest.mark.parametrize("name", ["neon", "dark", "light"])
    def test_palette_not_empty(self, name):
        theme = get_theme(name)
        assert len(theme.get_colors()) >= 6
        assert theme.get_default_color()
        assert theme.get_fill_color()

    def test_color_at_cycles(self):
        theme = get_theme("neon")
        colors = theme.get_colors()
        assert theme.color_at(len(colors)) == colors[0]
        assert theme.color_at(len(colors) * 3 + 2) == colors[2]

    def test_get_colors_returns_copy(self):
        theme = get_theme("dark")
        theme.get_colors().append("#000000")
        assert "#000000" not in theme.get_colors()

    def test_neon_config(self):
        config = get_theme("neon").get_config()
        assert config["name"] == "neon"
        assert config["default_color"] == "#0ff"
        assert len(config["colors"]) == 6
