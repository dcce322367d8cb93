"""
Lexicon Models

A lexicon is the immutable word table for one language: digit words,
tens words, scale names and the grammar parameters that say how they
are glued together.

DESIGN DECISION: Irregular forms (French 70-99, Spanish "cien") are
listed explicitly in the table instead of being derived arithmetically.
The tables stay auditable and the spelling code stays language-neutral.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from numspell.errors import MagnitudeOverflowError


class ScaleName(BaseModel):
    """Name of one power-of-1000 magnitude ("thousand", "million", ...)."""
    model_config = ConfigDict(frozen=True)

    exponent: int = Field(
        ...,
        ge=1,
        description="Power of 1000 this name stands for"
    )
    singular: str = Field(..., min_length=1)
    plural: Optional[str] = Field(
        default=None,
        description="Form used for counts above one; None if invariable"
    )

    def form(self, count: int) -> str:
        if count > 1 and self.plural:
            return self.plural
        return self.singular


class LexiconGrammar(BaseModel):
    """
    How the words of a lexicon combine.

    Joiners are inserted verbatim, so a joiner that needs spaces
    carries them (" y ", " and ").
    """
    model_config = ConfigDict(frozen=True)

    # Standalone words
    zero_word: str
    negative_word: str
    point_word: str
    currency_connector: str

    # Tens and units
    tens_joiner: str = Field(
        default="-",
        description="Inserted between tens word and unit word"
    )
    units_first: bool = Field(
        default=False,
        description="Unit word precedes tens word (German einundzwanzig)"
    )

    # Hundreds
    hundred_word: str = "hundred"
    hundred_joiner: str = " "
    hundred_plural: Optional[str] = Field(
        default=None,
        description="Hundred word for exact multiples above one (French cents)"
    )
    bare_hundred: bool = Field(
        default=False,
        description="One hundred is the hundred word alone (French cent)"
    )
    hundred_conjunction: Optional[str] = Field(
        default=None,
        description="Word between hundreds and a non-zero remainder"
    )
    remainder_joiner: str = " "

    # Groups
    scale_joiner: str = " "
    group_separator: str = " "
    final_group_conjunction: Optional[str] = Field(
        default=None,
        description="Word before a trailing group below 100 (one thousand and five)"
    )
    bare_scale_exponents: frozenset[int] = Field(
        default_factory=frozenset,
        description="Exponents whose scale name stands alone for a count of one"
    )


class Lexicon(BaseModel):
    """Immutable word and grammar table for one language."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=2)
    name: str

    units: tuple[str, ...] = Field(
        ...,
        min_length=20,
        max_length=20,
        description="Words for 0-19"
    )
    tens: tuple[str, ...] = Field(
        ...,
        min_length=8,
        max_length=8,
        description="Words for 20, 30, ... 90"
    )
    hundreds: Optional[tuple[str, ...]] = Field(
        default=None,
        description="Explicit words for 0, 100, 200, ... 900 when not compositional"
    )
    irregular: dict[int, str] = Field(
        default_factory=dict,
        description="Explicit words for values 1-999 that bypass composition"
    )
    combining_units: dict[int, str] = Field(
        default_factory=dict,
        description="Unit forms used inside compounds (German ein)"
    )
    scales: tuple[ScaleName, ...]
    grammar: LexiconGrammar

    @field_validator("hundreds")
    @classmethod
    def validate_hundreds(cls, v: Optional[tuple[str, ...]]) -> Optional[tuple[str, ...]]:
        if v is not None and len(v) != 10:
            raise ValueError("Hundreds table needs exactly 10 entries (0-9)")
        return v

    @field_validator("irregular")
    @classmethod
    def validate_irregular(cls, v: dict[int, str]) -> dict[int, str]:
        for value in v:
            if not 1 <= value <= 999:
                raise ValueError(f"Irregular entry {value} is outside 1-999")
        return v

    @model_validator(mode="after")
    def validate_scales(self) -> "Lexicon":
        """Scale exponents must be strictly increasing."""
        if not self.scales:
            raise ValueError("Lexicon needs at least one scale name")
        previous = 0
        for scale in self.scales:
            if scale.exponent <= previous:
                raise ValueError(
                    f"Scale exponents must be strictly increasing "
                    f"({scale.singular} has {scale.exponent} after {previous})"
                )
            previous = scale.exponent
        return self

    @property
    def max_exponent(self) -> int:
        return self.scales[-1].exponent

    def scale_for(self, exponent: int) -> ScaleName:
        """
        Get the scale name for a power-of-1000 exponent.

        Raises:
            MagnitudeOverflowError: If the lexicon has no name for it
        """
        for scale in self.scales:
            if scale.exponent == exponent:
                return scale
        raise MagnitudeOverflowError(
            exponent=exponent,
            max_exponent=self.max_exponent,
            message=(
                f"No scale name for 1000^{exponent} in {self.name} "
                f"(largest is 1000^{self.max_exponent})"
            ),
        )

    def tens_word(self, value: int) -> str:
        """Word for the tens part of a value between 20 and 99."""
        return self.tens[value // 10 - 2]

    def unit_in_compound(self, digit: int) -> str:
        return self.combining_units.get(digit, self.units[digit])
