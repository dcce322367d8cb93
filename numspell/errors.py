"""
Spelling Errors

All failures of a spell call surface as one of these exceptions.
Each also subclasses the closest builtin so callers that only know
about ValueError / OverflowError / LookupError still catch them.
"""

from typing import Any


class SpellingError(Exception):
    """Base exception for spelling operations."""
    pass


class InvalidInputError(SpellingError, ValueError):
    """Value is not a number we can spell (non-numeric, NaN, infinite)."""

    def __init__(self, value: Any, message: str):
        self.value = value
        super().__init__(message)


class MagnitudeOverflowError(SpellingError, OverflowError):
    """Number needs a scale beyond the last entry of the lexicon."""

    def __init__(self, exponent: int, max_exponent: int, message: str):
        self.exponent = exponent
        self.max_exponent = max_exponent
        super().__init__(message)


class UnknownLanguageError(SpellingError, LookupError):
    """No speller is registered for the language (strict mode only)."""

    def __init__(self, language: str, message: str):
        self.language = language
        super().__init__(message)
