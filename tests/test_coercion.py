"""Unit tests for cell coercion helpers."""

from decimal import Decimal

import pytest

from listing_converter.converter.coercion import (
    Unparsable,
    clean_text,
    parse_decimal,
    parse_int,
    parse_strict_int,
)


class TestCleanText:
    """Tests for clean_text."""

    def test_strips_and_blanks_to_none(self) -> None:
        """Surrounding whitespace is removed; blank becomes None."""
        assert clean_text("  Widget ") == "Widget"
        assert clean_text("   ") is None
        assert clean_text(None) is None

    def test_integral_numbers_lose_decimal_point(self) -> None:
        """Excel numeric cells such as 50000123.0 read as "50000123"."""
        assert clean_text(50000123.0) == "50000123"
        assert clean_text(Decimal("12.00")) == "12"
        assert clean_text(12.5) == "12.5"


class TestParseDecimal:
    """Tests for parse_decimal."""

    def test_thousands_separators(self) -> None:
        """"10,000" parses to 10000."""
        assert parse_decimal("10,000") == Decimal("10000")

    def test_numeric_cells(self) -> None:
        """int and float cells are accepted exactly."""
        assert parse_decimal(15000) == Decimal("15000")
        assert parse_decimal(9.9) == Decimal("9.9")

    def test_blank_is_none(self) -> None:
        """Blank and missing cells are absent, not errors."""
        assert parse_decimal("") is None
        assert parse_decimal(None) is None

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "NaN", True])
    def test_malformed_raises(self, value) -> None:
        """Malformed cells raise Unparsable."""
        with pytest.raises(Unparsable):
            parse_decimal(value)


class TestParseInt:
    """Tests for parse_int and parse_strict_int."""

    def test_truncates_toward_zero(self) -> None:
        """Fractional stock is truncated, not rounded."""
        assert parse_int("5.9") == 5
        assert parse_int("-1.5") == -1
        assert parse_int("1,200") == 1200

    def test_strict_rejects_fractions(self) -> None:
        """parse_strict_int accepts whole numbers only."""
        assert parse_strict_int("3,000") == 3000
        assert parse_strict_int(2500.0) == 2500
        with pytest.raises(Unparsable):
            parse_strict_int("12.5")
        with pytest.raises(Unparsable):
            parse_strict_int("free")

    def test_strict_blank_is_none(self) -> None:
        """Blank fee cell is absent."""
        assert parse_strict_int(" ") is None
