"""
Magnitude Composers

Join spelled groups with their scale names into one phrase.

The base composer is driven by grammar flags alone, which is enough for
English. Languages whose group words change with their position
(French plural agreement, German compounding, Spanish apocope and long
scale) subclass it and override the hooks:

- inflect(): adjust a group's words for its position
- scale_word(): choose the scale name form
- scale_joiner() / separator(): glue between words and groups
"""

from collections.abc import Sequence
from typing import Optional

from numspell.models.lexicon import Lexicon, ScaleName
from numspell.models.spelling import Group
from numspell.spelling.group_speller import GroupSpeller


class MagnitudeComposer:
    """Composes decomposed groups into a phrase."""

    def __init__(
        self,
        lexicon: Lexicon,
        group_speller: Optional[GroupSpeller] = None,
    ):
        self._lexicon = lexicon
        self._grammar = lexicon.grammar
        self._group_speller = group_speller or GroupSpeller(lexicon)

    def compose(self, groups: Sequence[Group]) -> str:
        """
        Compose groups (most significant first, no zero groups).

        Raises:
            ValueError: If groups is empty
        """
        if not groups:
            raise ValueError("Cannot compose an empty group list")

        rendered = [self.render_group(group, groups) for group in groups]

        text = rendered[0]
        for index in range(1, len(groups)):
            separator = self.separator(groups[index - 1], groups[index])
            if self._takes_final_conjunction(index, groups):
                conjunction = self._grammar.final_group_conjunction
                separator = f"{separator}{conjunction}{separator}"
            text += separator + rendered[index]
        return text

    def render_group(self, group: Group, groups: Sequence[Group]) -> str:
        if group.exponent == 0:
            return self.inflect(self._group_speller.spell(group.value), group, groups)

        scale = self._lexicon.scale_for(group.exponent)
        scale_word = self.scale_word(scale, group, groups)
        if group.value == 1 and group.exponent in self._grammar.bare_scale_exponents:
            return scale_word

        words = self.inflect(self._group_speller.spell(group.value), group, groups)
        return f"{words}{self.scale_joiner(group)}{scale_word}"

    # Hooks

    def inflect(self, words: str, group: Group, groups: Sequence[Group]) -> str:
        return words

    def scale_word(self, scale: ScaleName, group: Group, groups: Sequence[Group]) -> str:
        return scale.form(group.value)

    def scale_joiner(self, group: Group) -> str:
        return self._grammar.scale_joiner

    def separator(self, previous: Group, following: Group) -> str:
        return self._grammar.group_separator

    def _takes_final_conjunction(self, index: int, groups: Sequence[Group]) -> bool:
        group = groups[index]
        return (
            self._grammar.final_group_conjunction is not None
            and index == len(groups) - 1
            and group.exponent == 0
            and group.value < 100
        )


class FrenchComposer(MagnitudeComposer):
    """
    "cents" and "vingts" drop their plural s before "mille":
    deux cents, but deux cent mille; quatre-vingts, but quatre-vingt mille.
    """

    def inflect(self, words: str, group: Group, groups: Sequence[Group]) -> str:
        if group.exponent == 1 and words.endswith(("cents", "vingts")):
            return words[:-1]
        return words


class GermanComposer(MagnitudeComposer):
    """
    Everything below a million is one compound word
    (zweitausenddreihundert); from a million up the scale names are
    nouns written apart and take the feminine "eine" (eine Million,
    einhunderteine Millionen).
    """

    def inflect(self, words: str, group: Group, groups: Sequence[Group]) -> str:
        if not words.endswith("eins"):
            return words
        if group.exponent >= 2:
            return words[:-1] + "e"
        if group.exponent == 1:
            return words[:-1]
        return words

    def scale_joiner(self, group: Group) -> str:
        if group.exponent == 1:
            return ""
        return " "

    def separator(self, previous: Group, following: Group) -> str:
        if previous.exponent == 1:
            return ""
        return " "


class SpanishComposer(MagnitudeComposer):
    """
    "uno" shortens to "un" before any scale word (un millón, veinte y un
    mil). Long scale: an odd exponent from 3 up is "mil" of the -llón one
    step below, so 10^9 is "mil millones" and 2_500_000_000 is
    "dos mil quinientos millones".
    """

    def inflect(self, words: str, group: Group, groups: Sequence[Group]) -> str:
        if group.exponent >= 1 and words.endswith("uno"):
            return words[:-1]
        return words

    def scale_word(self, scale: ScaleName, group: Group, groups: Sequence[Group]) -> str:
        exponents = {g.exponent for g in groups}

        if group.exponent >= 3 and group.exponent % 2 == 1:
            if group.exponent - 1 in exponents:
                # the next group carries the -llón name
                return scale.singular
            llon = self._lexicon.scale_for(group.exponent - 1)
            return f"{scale.singular} {llon.form(2)}"

        if group.exponent >= 2 and group.exponent + 1 in exponents:
            return scale.form(2)
        return scale.form(group.value)
