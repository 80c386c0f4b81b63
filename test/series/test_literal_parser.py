"""Tests for the literal series parser -- comma-separated numbers."""

from graphplot.series.literal import parse_literal


class TestParseLiteralWellFormed:
    """Well-formed numeric text."""

    def test_integers_in_order(self):
        assert parse_literal("10, 20, 30, 40, 50") == [10, 20, 30, 40, 50]

    def test_decimals_and_negatives(self):
        assert parse_literal("-1.5,2.25, 0") == [-1.5, 2.25, 0.0]

    def test_scientific_notation(self):
        assert parse_literal("1e3, 2.5E-1") == [1000.0, 0.25]

    def test_surrounding_whitespace(self):
        assert parse_literal("   7   ,\t8\n") == [7.0, 8.0]


class TestParseLiteralDropsBadTokens:
    """Unparseable tokens are dropped, never fatal."""

    def test_mixed_tokens(self):
        assert parse_literal("a, 5, , 7.5") == [5, 7.5]

    def test_empty_string(self):
        assert parse_literal("") == []

    def test_only_separators(self):
        assert parse_literal(" , ,, ") == []

    def test_no_numbers(self):
        assert parse_literal("foo, bar") == []

    def test_non_finite_tokens_dropped(self):
        assert parse_literal("nan, inf, -inf, 3") == [3.0]

    def test_none_treated_as_empty(self):
        assert parse_literal(None) == []

    def test_trailing_garbage_rejects_token(self):
        assert parse_literal("12abc, 4") == [4.0]
