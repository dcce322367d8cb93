"""
Spelling Data Models

These models carry a number through the spelling pipeline:
options in, split number, magnitude groups, spelled phrases out.

All of them are transient: created and consumed inside one spell call.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# OPTIONS
# =============================================================================

class SpellOptions(BaseModel):
    """
    Caller options for a spell call.

    Anything left as None is taken from settings at call time.
    Unknown fields are rejected so a misspelled option never goes unnoticed.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    capitalize: bool = Field(
        default=True,
        description="Upper-case the first character of the result"
    )
    currency: bool = Field(
        default=False,
        description="Append currency unit names"
    )
    currency_code: Optional[str] = Field(
        default=None,
        description="ISO 4217 code used to look up unit names"
    )
    precision: Optional[int] = Field(
        default=None,
        ge=0,
        le=12,
        description="Fractional digits kept; defaults to the currency's or 2"
    )
    strict_language: Optional[bool] = Field(
        default=None,
        description="Raise on unknown language instead of falling back"
    )
    drop_zero_whole: bool = Field(
        default=False,
        description="In currency mode, omit a zero main amount when there is a fraction"
    )

    @field_validator("currency_code")
    @classmethod
    def normalize_currency_code(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"Currency code must be 3 letters, got {v!r}")
        return v


# =============================================================================
# PIPELINE VALUES
# =============================================================================

class SplitNumber(BaseModel):
    """
    A number split into sign, whole part and fractional digits.

    fraction is an integer count of 10^-precision units: 42.75 at
    precision 2 is whole=42, fraction=75.
    """
    model_config = ConfigDict(frozen=True)

    negative: bool = False
    whole: int = Field(..., ge=0)
    fraction: int = Field(default=0, ge=0)
    precision: int = Field(default=2, ge=0)

    @model_validator(mode="after")
    def validate_fraction(self) -> "SplitNumber":
        if self.fraction >= 10 ** self.precision:
            raise ValueError(
                f"Fraction {self.fraction} does not fit in {self.precision} digits"
            )
        if self.negative and self.is_zero:
            raise ValueError("Zero cannot be negative")
        return self

    @property
    def has_fraction(self) -> bool:
        return self.fraction > 0

    @property
    def is_zero(self) -> bool:
        return self.whole == 0 and self.fraction == 0


class Group(BaseModel):
    """One 0-999 chunk of an integer at a power-of-1000 position."""
    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, le=999)
    exponent: int = Field(..., ge=0)

    @property
    def magnitude(self) -> int:
        """Contribution of this group to the integer it came from."""
        return self.value * 1000 ** self.exponent


class SpelledPhrase(BaseModel):
    """Spelled words for one number, flagged when the number was zero."""
    model_config = ConfigDict(frozen=True)

    text: str
    is_zero: bool = False

    def __str__(self) -> str:
        return self.text


# =============================================================================
# CURRENCY
# =============================================================================

class CurrencyNames(BaseModel):
    """Unit names for a currency in one language."""
    model_config = ConfigDict(frozen=True)

    main: str = Field(..., description="Main unit, plural form (dollars)")
    sub: str = Field(..., description="Sub unit, plural form (cents)")
    main_singular: Optional[str] = None
    sub_singular: Optional[str] = None

    def main_for(self, count: int) -> str:
        if count == 1 and self.main_singular:
            return self.main_singular
        return self.main

    def sub_for(self, count: int) -> str:
        if count == 1 and self.sub_singular:
            return self.sub_singular
        return self.sub


class CurrencyInfo(BaseModel):
    """Currency metadata (symbol and minor-unit digits)."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=3)
    name: str
    symbol: str
    decimal_places: int = Field(..., ge=0, le=12)
