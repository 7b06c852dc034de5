"""Tests for numeric text parsing."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from indexcast.core.numeric import coerce_float, coerce_integer, parse_float, parse_integer


class TestParseInteger:
    """Test parse_integer function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("+8", 8),
            ("-0", 0),
            ("  19\n", 19),
            ("3.9", 3),
            ("1e3", 1),
            ("99 bottles", 99),
            ("-", 0),
            ("n/a", 0),
        ],
    )
    def test_parse(self, text, expected):
        """Test full, prefix and zero fallback parsing."""
        assert parse_integer(text) == expected


class TestParseFloat:
    """Test parse_float function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("4.25", 4.25),
            (".5", 0.5),
            ("2.5e-1", 0.25),
            ("-inf", float("-inf")),
            ("7.5 percent", 7.5),
            ("1.2.3", 1.2),
            ("n/a", 0.0),
        ],
    )
    def test_parse(self, text, expected):
        """Test full, prefix and zero fallback parsing."""
        assert parse_float(text) == expected


class TestCoerceInteger:
    """Test coerce_integer function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (7, 7),
            (False, 0),
            (-2.5, -2),
            (Fraction(7, 2), 3),
            (Decimal("-4.9"), -4),
            ("12", 12),
        ],
    )
    def test_coerce(self, value, expected):
        """Test numbers and numeric text are truncated toward zero."""
        assert coerce_integer(value) == expected

    def test_decimal_nan(self):
        """Test non-finite Decimals have no integer form."""
        assert coerce_integer(Decimal("NaN")) is None

    def test_arbitrary_object_uses_text(self):
        """Test objects without __int__ are parsed from str()."""

        class Quantity:
            def __str__(self):
                return "5 units"

        assert coerce_integer(Quantity()) == 5


class TestCoerceFloat:
    """Test coerce_float function."""

    def test_fraction(self):
        """Test rationals are converted."""
        assert coerce_float(Fraction(1, 4)) == 0.25

    def test_arbitrary_object_uses_text(self):
        """Test objects without __float__ are parsed from str()."""
        assert coerce_float(object()) == 0.0
