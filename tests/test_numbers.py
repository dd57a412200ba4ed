"""
Number Formatting Tests - Locale-aware Parse and Render

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dolarbot.shared.numbers (parse_decimal, format_decimal)
"""
from decimal import Decimal

import pytest

from dolarbot.shared.numbers import format_decimal, parse_decimal


class TestParseDecimal:
    @pytest.mark.parametrize("text,expected", [
        ("100.50", Decimal("100.50")),
        ("  98.25 ", Decimal("98.25")),
        ("1,234.5", Decimal("1234.5")),
        ("$ 100.50", Decimal("100.50")),
        ("-3.1", Decimal("-3.1")),
        ("3.1-", Decimal("-3.1")),
        ("(12.30)", Decimal("-12.30")),
        ("1500", Decimal("1500")),
    ])
    def test_en_us(self, text, expected):
        assert parse_decimal(text, "en-US") == expected

    def test_es_ar_separators(self):
        assert parse_decimal("1.234,56", "es-AR") == Decimal("1234.56")

    @pytest.mark.parametrize("text", [
        None, "", "   ", "abc", "1.2.3", "NaN", "Infinity", "-",
        "1_000.50", "1 00.50", "-3.1-", "+3.1-", "--3.1", "(-3.1)", "(3.1)-",
    ])
    def test_invalid(self, text):
        assert parse_decimal(text, "en-US") is None

    def test_unknown_culture(self):
        with pytest.raises(KeyError):
            parse_decimal("1", "xx-XX")


class TestFormatDecimal:
    def test_two_places(self):
        assert format_decimal(Decimal("130.650"), "en-US") == "130.65"
        assert format_decimal(Decimal("130"), "en-US") == "130.00"

    def test_rounds_half_away_from_zero(self):
        assert format_decimal(Decimal("100.125"), "en-US") == "100.13"
        assert format_decimal(Decimal("-100.125"), "en-US") == "-100.13"

    def test_no_group_separator(self):
        assert format_decimal(Decimal("1234567.891"), "en-US") == "1234567.89"

    def test_es_ar_decimal_comma(self):
        assert format_decimal(Decimal("130.65"), "es-AR") == "130,65"
