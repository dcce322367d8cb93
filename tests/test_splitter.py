"""Tests for DecimalSplitter and request validation."""

import pytest
from decimal import Decimal

from numspell.errors import InvalidInputError, MagnitudeOverflowError
from numspell.models import SplitNumber
from numspell.spelling import DecimalSplitter, EnglishSpeller
from numspell.validation import SpellRequestValidator


class TestDecimalSplitter:
    """Tests for splitting numbers into whole and fraction."""

    @pytest.fixture
    def splitter(self):
        return DecimalSplitter()

    def test_split_float(self, splitter):
        """Test a plain decimal."""
        split = splitter.split(42.75)
        assert split == SplitNumber(whole=42, fraction=75, precision=2)

    def test_split_int(self, splitter):
        """Test that integers pass through unchanged."""
        split = splitter.split(10 ** 40)
        assert split.whole == 10 ** 40
        assert split.fraction == 0

    def test_split_negative(self, splitter):
        """Test that the sign is carried separately."""
        split = splitter.split(Decimal("-3.5"))
        assert split.negative is True
        assert split.whole == 3
        assert split.fraction == 50

    def test_rounds_half_up(self, splitter):
        """Test half-up rounding on the shortest float repr."""
        assert splitter.split(2.675).fraction == 68
        assert splitter.split(0.125).fraction == 13

    def test_rounding_carries_into_whole(self, splitter):
        """Test that 1.999 becomes 2 with no fraction."""
        split = splitter.split(1.999)
        assert split.whole == 2
        assert split.has_fraction is False

    def test_negative_rounding_to_zero(self, splitter):
        """Test that -0.001 is plain zero."""
        split = splitter.split(-0.001)
        assert split.is_zero is True
        assert split.negative is False

    def test_precision_zero(self):
        """Test rounding to whole units."""
        split = DecimalSplitter(precision=0).split(2.5)
        assert split.whole == 3
        assert split.fraction == 0

    def test_numeric_strings(self, splitter):
        """Test parsing of numeric strings."""
        assert splitter.split(" 1_000.5 ").whole == 1000
        assert splitter.split("1e3").whole == 1000

    @pytest.mark.parametrize("value", [
        True,
        None,
        "abc",
        "1,5",
        float("nan"),
        float("inf"),
        Decimal("-Infinity"),
        [1, 2],
    ])
    def test_invalid_input(self, splitter, value):
        """Test that non-numbers are rejected."""
        with pytest.raises(InvalidInputError):
            splitter.split(value)

    def test_negative_precision(self):
        """Test that precision cannot be negative."""
        with pytest.raises(ValueError):
            DecimalSplitter(precision=-1)

    @pytest.mark.parametrize("value,expected", [
        (42.5, "5"),
        (3.05, "05"),
        (42.75, "75"),
        (42, ""),
    ])
    def test_fraction_digits(self, splitter, value, expected):
        """Test fraction digits without trailing zeros."""
        assert DecimalSplitter.fraction_digits(splitter.split(value)) == expected


class TestSpellRequestValidator:
    """Tests for two-stage validation."""

    def test_valid_number(self):
        """Test that a valid number is split."""
        split = SpellRequestValidator().validate(12.5, EnglishSpeller(), 2)
        assert split.whole == 12
        assert split.fraction == 50

    def test_invalid_input(self):
        """Test stage 1 rejection."""
        with pytest.raises(InvalidInputError):
            SpellRequestValidator().validate("twelve", EnglishSpeller(), 2)

    def test_overflow(self):
        """Test stage 2 rejection."""
        with pytest.raises(MagnitudeOverflowError):
            SpellRequestValidator().validate(10 ** 36, EnglishSpeller(), 2)

    def test_overflow_after_rounding(self):
        """Test that a carry into a new group is checked."""
        value = Decimal("999999999999999999999999999999999999.999")
        with pytest.raises(MagnitudeOverflowError):
            SpellRequestValidator().validate(value, EnglishSpeller(), 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
