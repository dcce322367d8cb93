"""
Lexicon Tables

Process-wide, frozen word tables, one per language style.
"""

from numspell.lexicons.english import ENGLISH, LEDGER_ENGLISH
from numspell.lexicons.french import FRENCH
from numspell.lexicons.german import GERMAN
from numspell.lexicons.spanish import SPANISH

__all__ = [
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "LEDGER_ENGLISH",
    "SPANISH",
]
