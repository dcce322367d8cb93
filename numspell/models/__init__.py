"""
Data Models Package

Pydantic models used by the spelling pipeline. Lexicons and options are
frozen; nothing here is mutated after construction.
"""

from numspell.models.lexicon import (
    Lexicon,
    LexiconGrammar,
    ScaleName,
)
from numspell.models.spelling import (
    CurrencyInfo,
    CurrencyNames,
    Group,
    SpelledPhrase,
    SpellOptions,
    SplitNumber,
)
from numspell.models.events import (
    SpellEvent,
    SpellEventBuilder,
    SpellEventType,
    SpellSeverity,
)

__all__ = [
    # Lexicon models
    "Lexicon",
    "LexiconGrammar",
    "ScaleName",
    # Pipeline models
    "CurrencyInfo",
    "CurrencyNames",
    "Group",
    "SpelledPhrase",
    "SpellOptions",
    "SplitNumber",
    # Event models
    "SpellEvent",
    "SpellEventBuilder",
    "SpellEventType",
    "SpellSeverity",
]
