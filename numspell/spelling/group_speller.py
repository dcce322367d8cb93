"""
Group Speller

Renders one group (1-999) using nothing but the lexicon tables and
grammar flags. Context-dependent changes (apocope before a scale word,
plural agreement) belong to the language composers, not here.
"""

from numspell.models.lexicon import Lexicon


class GroupSpeller:
    """Spells values from 1 to 999 for one lexicon."""

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon
        self._grammar = lexicon.grammar

    def spell(self, value: int) -> str:
        """
        Spell a group value.

        Raises:
            ValueError: If value is outside 1-999
        """
        if not 1 <= value <= 999:
            raise ValueError(f"Group value must be between 1 and 999, got {value}")

        if value in self._lexicon.irregular:
            return self._lexicon.irregular[value]
        if value < 100:
            return self._below_hundred(value)

        hundreds, remainder = divmod(value, 100)
        head = self._hundreds_word(hundreds, remainder)
        if remainder == 0:
            return head

        parts = [head]
        if self._grammar.hundred_conjunction:
            parts.append(self._grammar.hundred_conjunction)
        parts.append(self._below_hundred(remainder))
        return self._grammar.remainder_joiner.join(parts)

    def _below_hundred(self, value: int) -> str:
        if value in self._lexicon.irregular:
            return self._lexicon.irregular[value]
        if value < 20:
            return self._lexicon.units[value]

        tens_word = self._lexicon.tens_word(value)
        unit = value % 10
        if unit == 0:
            return tens_word

        unit_word = self._lexicon.unit_in_compound(unit)
        if self._grammar.units_first:
            return f"{unit_word}{self._grammar.tens_joiner}{tens_word}"
        return f"{tens_word}{self._grammar.tens_joiner}{unit_word}"

    def _hundreds_word(self, hundreds: int, remainder: int) -> str:
        if self._lexicon.hundreds is not None:
            return self._lexicon.hundreds[hundreds]

        hundred_word = self._grammar.hundred_word
        if hundreds > 1 and remainder == 0 and self._grammar.hundred_plural:
            hundred_word = self._grammar.hundred_plural

        if hundreds == 1 and self._grammar.bare_hundred:
            return hundred_word

        digit_word = self._lexicon.unit_in_compound(hundreds)
        return f"{digit_word}{self._grammar.hundred_joiner}{hundred_word}"
