"""
Two-Stage Spell Request Validation

STAGE 1 - INPUT VALIDATION:
- Type checking (numbers and numeric strings only, no bools)
- Parse check for strings
- Finite check (no NaN, no infinities)
- Split into sign, whole and fraction at the requested precision

STAGE 2 - MAGNITUDE VALIDATION:
- Whole part within the speller's scale table
- Fractional part within the speller's scale table

WHY TWO STAGES:
Overflow must be detected before anything is rendered, and it can only
be checked once the input is known to be a number and has been
rounded (rounding can carry into a new group: 999.999 becomes 1000).

IMPORTANT: Validation never clamps or truncates. Anything out of
range is raised to the caller.
"""

from typing import Any

from numspell.models.spelling import SplitNumber
from numspell.spelling.spellers import Speller
from numspell.spelling.splitter import DecimalSplitter


class SpellRequestValidator:
    """Validates and splits spell input for a given speller."""

    def _validate_input(self, value: Any, precision: int) -> SplitNumber:
        """
        Stage 1: input validation.

        Raises:
            InvalidInputError: If value is not a finite number
        """
        return DecimalSplitter(precision).split(value)

    def _validate_magnitude(self, split: SplitNumber, speller: Speller) -> None:
        """
        Stage 2: magnitude validation.

        Raises:
            MagnitudeOverflowError: If either part needs a scale the
                speller's lexicon does not have
        """
        speller.check_magnitude(split.whole)
        if split.has_fraction:
            speller.check_magnitude(split.fraction)

    def validate(self, value: Any, speller: Speller, precision: int) -> SplitNumber:
        """
        Run both stages.

        Args:
            value: The caller's number
            speller: Speller that will render the result
            precision: Fractional digits to keep

        Returns:
            The split number, safe to render with this speller
        """
        split = self._validate_input(value, precision)
        self._validate_magnitude(split, speller)
        return split
