"""
Number Decomposer

Splits a positive integer into power-of-1000 groups, most significant
first. The largest exponent is checked against the lexicon before the
groups are handed out, so an oversized number never reaches rendering.
"""

from collections.abc import Iterable

from numspell.errors import MagnitudeOverflowError
from numspell.models.lexicon import Lexicon
from numspell.models.spelling import Group


class NumberDecomposer:
    """Breaks integers into (value, exponent) groups for one lexicon."""

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon

    def highest_exponent(self, n: int) -> int:
        """Exponent of the most significant group of n (0 for n < 1000)."""
        exponent = 0
        n //= 1000
        while n:
            exponent += 1
            n //= 1000
        return exponent

    def check_magnitude(self, n: int) -> None:
        """
        Raise if n needs a scale the lexicon does not have.

        Raises:
            MagnitudeOverflowError: If n >= 1000^(max_exponent + 1)
        """
        exponent = self.highest_exponent(n)
        if exponent > self._lexicon.max_exponent:
            raise MagnitudeOverflowError(
                exponent=exponent,
                max_exponent=self._lexicon.max_exponent,
                message=(
                    f"Number needs a scale name for 1000^{exponent}; "
                    f"{self._lexicon.name} spells at most "
                    f"1000^{self._lexicon.max_exponent + 1} - 1"
                ),
            )

    def decompose(self, n: int) -> list[Group]:
        """
        Decompose a positive integer.

        Zero groups are left out: 1_000_005 gives [(1, 2), (5, 0)].

        Raises:
            ValueError: If n is not positive (zero is spelled upstream)
            MagnitudeOverflowError: If n is beyond the scale table
        """
        if n <= 0:
            raise ValueError(f"Only positive integers can be decomposed, got {n}")

        self.check_magnitude(n)

        groups = []
        exponent = 0
        while n:
            n, value = divmod(n, 1000)
            if value:
                groups.append(Group(value=value, exponent=exponent))
            exponent += 1

        groups.reverse()
        return groups

    @staticmethod
    def recompose(groups: Iterable[Group]) -> int:
        """Rebuild the integer a list of groups came from."""
        return sum(group.magnitude for group in groups)
