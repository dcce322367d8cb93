"""
Language Spellers

A Speller bundles a lexicon with the decomposer, group speller and
composer that render it. Each supported language is one subclass,
registered by language code; the engine looks spellers up in that
registry instead of branching on the code.

Adding a language means writing its lexicon, a composer subclass if
its words change with position, and a registered Speller subclass.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional

from numspell.lexicons import ENGLISH, FRENCH, GERMAN, LEDGER_ENGLISH, SPANISH
from numspell.models.lexicon import Lexicon, LexiconGrammar
from numspell.models.spelling import SpelledPhrase
from numspell.spelling.composer import (
    FrenchComposer,
    GermanComposer,
    MagnitudeComposer,
    SpanishComposer,
)
from numspell.spelling.decomposer import NumberDecomposer
from numspell.spelling.group_speller import GroupSpeller


class Speller(ABC):
    """
    Spells non-negative integers in one language.

    Subclasses provide the lexicon and, where needed, a composer class.
    """

    composer_class: type[MagnitudeComposer] = MagnitudeComposer

    def __init__(self):
        self._decomposer = NumberDecomposer(self.lexicon)
        self._composer = self.composer_class(self.lexicon, GroupSpeller(self.lexicon))

    @property
    @abstractmethod
    def lexicon(self) -> Lexicon:
        """The word table this speller renders with."""

    @property
    def code(self) -> str:
        return self.lexicon.code

    @property
    def grammar(self) -> LexiconGrammar:
        return self.lexicon.grammar

    def check_magnitude(self, n: int) -> None:
        """Raise MagnitudeOverflowError if n is beyond the scale table."""
        self._decomposer.check_magnitude(n)

    def spell_integer(self, n: int) -> SpelledPhrase:
        """
        Spell a non-negative integer.

        Raises:
            ValueError: If n is negative (the sign is handled by the engine)
            MagnitudeOverflowError: If n is beyond the scale table
        """
        if n < 0:
            raise ValueError(f"Spellers take non-negative integers, got {n}")
        if n == 0:
            return SpelledPhrase(text=self.grammar.zero_word, is_zero=True)
        return SpelledPhrase(text=self._composer.compose(self._decomposer.decompose(n)))

    def spell_fraction_digits(self, digits: str) -> str:
        """
        Spell the digits after the decimal point.

        Leading zeros are each spelled as the zero word, the rest as
        one number: "05" is "zero five", "75" is "seventy-five".
        """
        significant = digits.lstrip("0")
        words = [self.grammar.zero_word] * (len(digits) - len(significant))
        if significant:
            words.append(self.spell_integer(int(significant)).text)
        return " ".join(words)


class EnglishSpeller(Speller):
    lexicon = ENGLISH


class LedgerEnglishSpeller(Speller):
    """Title-case English for cheques and invoices; not language-selectable."""
    lexicon = LEDGER_ENGLISH


class FrenchSpeller(Speller):
    lexicon = FRENCH
    composer_class = FrenchComposer


class SpanishSpeller(Speller):
    lexicon = SPANISH
    composer_class = SpanishComposer


class GermanSpeller(Speller):
    lexicon = GERMAN
    composer_class = GermanComposer


# =============================================================================
# REGISTRY
# =============================================================================

SPELLERS: dict[str, type[Speller]] = {}


@lru_cache(maxsize=None)
def _cached_speller(code: str) -> Speller:
    return SPELLERS[code]()


def register_speller(speller_class: type[Speller]) -> type[Speller]:
    """Register a speller under its lexicon's code."""
    SPELLERS[speller_class.lexicon.code] = speller_class
    _cached_speller.cache_clear()
    return speller_class


register_speller(EnglishSpeller)
register_speller(FrenchSpeller)
register_speller(SpanishSpeller)
register_speller(GermanSpeller)


def normalize_language(language: str) -> str:
    """
    Reduce a language tag to its primary subtag.

    "en-US", "EN_gb" and " en " all become "en".
    """
    return language.strip().lower().replace("_", "-").split("-")[0]


def get_speller(language: str) -> Optional[Speller]:
    """Get the speller for a language tag, or None if unsupported."""
    code = normalize_language(language)
    if code not in SPELLERS:
        return None
    return _cached_speller(code)


def supported_languages() -> list[str]:
    return sorted(SPELLERS)
