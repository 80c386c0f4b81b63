"""Tests for the adapter registry -- family discovery."""

import pytest

from graphplot.adapters import (
    get_adapter,
    list_adapters,
    list_adapters_with_descriptions,
)
from graphplot.adapters.families import ShapeFamily


class TestAdapterRegistry:
    """Adapter registry discovery tests."""

    def test_list_adapters_returns_expected_families(self):
        adapters = list_adapters()
        for family in ("categorical", "multicolor", "xy", "bubble", "proportion", "radar"):
            assert family in adapters

    def test_list_adapters_count(self):
        assert len(list_adapters()) == len(ShapeFamily)

    def test_get_adapter_by_name(self):
        adapter = get_adapter("xy")
        assert hasattr(adapter, "adapt")

    def test_get_adapter_case_insensitive(self):
        assert get_adapter("BUBBLE") is get_adapter(ShapeFamily.BUBBLE)

    def test_get_adapter_invalid_raises(self):
        with pytest.raises(ValueError, match="Unknown adapter"):
            get_adapter("heatmap")

    def test_list_adapters_with_descriptions(self):
        descs = list_adapters_with_descriptions()
        assert len(descs) == len(ShapeFamily)
        for name, description in descs.items():
            assert isinstance(name, str)
            assert len(description) > 0
