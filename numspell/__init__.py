"""
numspell - Numbers to Words

Spells integers and decimals as words in English, French, Spanish and
German, optionally with currency unit names.

DESIGN PRINCIPLES:
1. One pipeline for every language; lexicons hold the words
2. Fail early, fail visibly (no clamping, no partial output)
3. Language-specific grammar lives in composer hooks, not branches
4. Every call is auditable (structured events)
"""

from numspell.errors import (
    InvalidInputError,
    MagnitudeOverflowError,
    SpellingError,
    UnknownLanguageError,
)
from numspell.models.spelling import SpellOptions
from numspell.orchestrator import SpellingEngine, get_engine, spell
from numspell.spelling.spellers import supported_languages
from numspell.words import number_to_words, to_words

__version__ = "1.0.0"
__author__ = "numspell Team"

__all__ = [
    "InvalidInputError",
    "MagnitudeOverflowError",
    "SpellOptions",
    "SpellingEngine",
    "SpellingError",
    "UnknownLanguageError",
    "get_engine",
    "number_to_words",
    "spell",
    "supported_languages",
    "to_words",
]
