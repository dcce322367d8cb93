"""
Tests for numspell data models

Test strategy:
1. Field validation and normalization (options, split numbers)
2. Lexicon table checks (scale order, irregular range)
3. Event construction and log conversion
"""

import pytest
from uuid import uuid4

from pydantic import ValidationError

from numspell.errors import MagnitudeOverflowError
from numspell.lexicons import ENGLISH, FRENCH
from numspell.models import (
    CurrencyNames,
    Group,
    Lexicon,
    ScaleName,
    SpelledPhrase,
    SpellEvent,
    SpellEventBuilder,
    SpellEventType,
    SpellOptions,
    SpellSeverity,
    SplitNumber,
)


def _lexicon_with(**changes) -> Lexicon:
    return Lexicon(**{**ENGLISH.model_dump(), **changes})


class TestSpellOptions:
    """Tests for SpellOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = SpellOptions()
        assert options.capitalize is True
        assert options.currency is False
        assert options.currency_code is None
        assert options.precision is None
        assert options.strict_language is None
        assert options.drop_zero_whole is False

    def test_currency_code_is_upper_cased(self):
        """Test that currency codes are normalized."""
        options = SpellOptions(currency_code=" usd ")
        assert options.currency_code == "USD"

    def test_currency_code_must_be_three_letters(self):
        """Test that malformed currency codes are rejected."""
        with pytest.raises(ValidationError, match="3 letters"):
            SpellOptions(currency_code="US1")
        with pytest.raises(ValidationError):
            SpellOptions(currency_code="DOLLAR")

    def test_precision_bounds(self):
        """Test precision must be between 0 and 12."""
        assert SpellOptions(precision=0).precision == 0
        with pytest.raises(ValidationError):
            SpellOptions(precision=13)
        with pytest.raises(ValidationError):
            SpellOptions(precision=-1)

    def test_options_are_frozen(self):
        """Test that options cannot be mutated."""
        options = SpellOptions()
        with pytest.raises(ValidationError):
            options.capitalize = False


class TestSplitNumber:
    """Tests for SplitNumber."""

    def test_properties(self):
        """Test has_fraction and is_zero."""
        split = SplitNumber(whole=42, fraction=75)
        assert split.has_fraction is True
        assert split.is_zero is False
        assert SplitNumber(whole=0).is_zero is True

    def test_fraction_must_fit_precision(self):
        """Test that the fraction is below 10^precision."""
        with pytest.raises(ValidationError, match="does not fit"):
            SplitNumber(whole=1, fraction=100, precision=2)

    def test_zero_cannot_be_negative(self):
        """Test that negative zero is rejected."""
        with pytest.raises(ValidationError, match="Zero cannot be negative"):
            SplitNumber(negative=True, whole=0, fraction=0)

    def test_whole_cannot_be_negative(self):
        """Test that the sign is carried separately."""
        with pytest.raises(ValidationError):
            SplitNumber(whole=-1)


class TestGroupAndPhrase:
    """Tests for Group and SpelledPhrase."""

    def test_group_magnitude(self):
        """Test a group's contribution to its integer."""
        assert Group(value=5, exponent=2).magnitude == 5_000_000
        assert Group(value=999, exponent=0).magnitude == 999

    def test_group_value_bounds(self):
        """Test group values are 0-999."""
        with pytest.raises(ValidationError):
            Group(value=1000, exponent=0)

    def test_spelled_phrase_str(self):
        """Test that a phrase converts to its text."""
        assert str(SpelledPhrase(text="forty-two")) == "forty-two"


class TestCurrencyNames:
    """Tests for CurrencyNames."""

    def test_singular_used_for_one(self):
        """Test singular forms for a count of one."""
        names = CurrencyNames(main="dollars", sub="cents", main_singular="dollar", sub_singular="cent")
        assert names.main_for(1) == "dollar"
        assert names.sub_for(1) == "cent"
        assert names.main_for(2) == "dollars"
        assert names.main_for(0) == "dollars"

    def test_plural_used_without_singular(self):
        """Test invariable names."""
        names = CurrencyNames(main="yen", sub="sen")
        assert names.main_for(1) == "yen"
        assert names.sub_for(1) == "sen"


class TestLexiconModels:
    """Tests for lexicon models."""

    def test_scale_name_form(self):
        """Test plural selection for scale names."""
        scale = ScaleName(exponent=2, singular="million", plural="millions")
        assert scale.form(1) == "million"
        assert scale.form(3) == "millions"
        assert ScaleName(exponent=1, singular="mille").form(5) == "mille"

    def test_scale_exponent_must_be_positive(self):
        """Test that exponent 0 has no scale name."""
        with pytest.raises(ValidationError):
            ScaleName(exponent=0, singular="one")

    def test_scales_must_increase(self):
        """Test that scale exponents are strictly increasing."""
        with pytest.raises(ValidationError, match="strictly increasing"):
            _lexicon_with(scales=(
                ScaleName(exponent=2, singular="million"),
                ScaleName(exponent=1, singular="thousand"),
            ))

    def test_irregular_range(self):
        """Test that irregular entries are within 1-999."""
        with pytest.raises(ValidationError, match="outside 1-999"):
            _lexicon_with(irregular={1000: "grand"})

    def test_hundreds_table_length(self):
        """Test that an explicit hundreds table has 10 entries."""
        with pytest.raises(ValidationError, match="10 entries"):
            _lexicon_with(hundreds=("", "hundred"))

    def test_scale_for(self):
        """Test scale lookup and overflow."""
        assert ENGLISH.scale_for(1).singular == "thousand"
        assert ENGLISH.max_exponent == 11
        with pytest.raises(MagnitudeOverflowError) as exc_info:
            ENGLISH.scale_for(12)
        assert exc_info.value.max_exponent == 11

    def test_tens_word_and_combining_units(self):
        """Test table helpers."""
        assert ENGLISH.tens_word(42) == "forty"
        assert FRENCH.tens_word(99) == "quatre-vingt-dix"
        assert ENGLISH.unit_in_compound(1) == "one"


class TestSpellEvents:
    """Tests for spell event models."""

    def test_event_creation(self):
        """Test SpellEvent creation."""
        event = SpellEvent(
            event_type=SpellEventType.SPELL_COMPLETED,
            description="Spelled number in en",
        )
        assert event.severity == SpellSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        request_id = uuid4()
        event = SpellEventBuilder.completed(
            request_id=request_id,
            language="fr",
            value=42,
            currency=False,
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "spell_completed"
        assert log_dict["severity"] == "debug"
        assert log_dict["request_id"] == str(request_id)
        assert log_dict["details"] == {"value": "42", "currency": False}

    def test_builder_language_fallback(self):
        """Test SpellEventBuilder.language_fallback."""
        event = SpellEventBuilder.language_fallback(
            request_id=uuid4(),
            requested="xx",
            fallback="en",
        )
        assert event.event_type == SpellEventType.LANGUAGE_FALLBACK
        assert event.severity == SpellSeverity.WARNING
        assert event.language == "en"
        assert event.details["requested_language"] == "xx"

    def test_builder_rejected(self):
        """Test SpellEventBuilder.rejected."""
        event = SpellEventBuilder.rejected(
            request_id=uuid4(),
            event_type=SpellEventType.INVALID_INPUT,
            language="en",
            value="x" * 200,
            error=ValueError("bad number"),
        )
        assert event.severity == SpellSeverity.ERROR
        assert event.error_message == "bad number"
        assert len(event.details["value"]) == 80
        assert event.details["value"].endswith("...")

    def test_builder_rejected_huge_int(self):
        """Test that an int too long to print is summarized by size."""
        event = SpellEventBuilder.rejected(
            request_id=uuid4(),
            event_type=SpellEventType.MAGNITUDE_OVERFLOW,
            language="en",
            value=-(2 ** 20000),
            error=OverflowError("too big"),
        )
        assert event.details["value"] == "<-int of 20001 bits>"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
