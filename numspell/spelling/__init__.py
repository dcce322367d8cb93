"""Spelling pipeline package."""

from numspell.spelling.composer import (
    FrenchComposer,
    GermanComposer,
    MagnitudeComposer,
    SpanishComposer,
)
from numspell.spelling.decomposer import NumberDecomposer
from numspell.spelling.group_speller import GroupSpeller
from numspell.spelling.splitter import DEFAULT_PRECISION, DecimalSplitter
from numspell.spelling.spellers import (
    SPELLERS,
    EnglishSpeller,
    FrenchSpeller,
    GermanSpeller,
    LedgerEnglishSpeller,
    SpanishSpeller,
    Speller,
    get_speller,
    normalize_language,
    register_speller,
    supported_languages,
)

__all__ = [
    # Composers
    "FrenchComposer",
    "GermanComposer",
    "MagnitudeComposer",
    "SpanishComposer",
    # Pipeline stages
    "DEFAULT_PRECISION",
    "DecimalSplitter",
    "GroupSpeller",
    "NumberDecomposer",
    # Spellers
    "SPELLERS",
    "EnglishSpeller",
    "FrenchSpeller",
    "GermanSpeller",
    "LedgerEnglishSpeller",
    "SpanishSpeller",
    "Speller",
    "get_speller",
    "normalize_language",
    "register_speller",
    "supported_languages",
]
