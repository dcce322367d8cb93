"""
Decimal Splitter

Turns caller input into a SplitNumber: sign, whole part, and the
fractional part as an integer count of 10^-precision units.

DESIGN DECISION: Everything goes through Decimal. Floats are converted
from their shortest repr (2.675 stays 2.675, not 2.67499999...), and
rounding is half-up at the requested precision. Rounding can carry
into the whole part: 1.999 at precision 2 is 2 with no fraction.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from numspell.errors import InvalidInputError
from numspell.models.spelling import SplitNumber


DEFAULT_PRECISION = 2


class DecimalSplitter:
    """Splits numbers into whole and fractional parts at a fixed precision."""

    def __init__(self, precision: int = DEFAULT_PRECISION):
        if precision < 0:
            raise ValueError(f"Precision cannot be negative, got {precision}")
        self._precision = precision

    @property
    def precision(self) -> int:
        return self._precision

    @staticmethod
    def to_decimal(value: Any) -> Decimal:
        """
        Coerce input to a finite Decimal.

        Accepts int, Decimal, float and plain numeric strings ("42.75").

        Raises:
            InvalidInputError: For bools, non-numeric types, unparseable
                strings, NaN and infinities
        """
        if isinstance(value, bool):
            raise InvalidInputError(value, f"{value!r} is a boolean, not a number")

        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, int):
            number = Decimal(value)
        elif isinstance(value, float):
            number = Decimal(repr(value))
        elif isinstance(value, str):
            try:
                number = Decimal(value.strip().replace("_", ""))
            except InvalidOperation:
                raise InvalidInputError(value, f"Could not parse number: {value!r}") from None
        else:
            raise InvalidInputError(
                value,
                f"{value!r} is not a number (got {type(value).__name__})",
            )

        if not number.is_finite():
            raise InvalidInputError(value, f"{value!r} is not a finite number")
        return number

    def split(self, value: Any) -> SplitNumber:
        """
        Split a number.

        Raises:
            InvalidInputError: If value is not a finite number
        """
        if isinstance(value, int) and not isinstance(value, bool):
            return SplitNumber(
                negative=value < 0,
                whole=abs(value),
                fraction=0,
                precision=self._precision,
            )

        number = self.to_decimal(value)
        negative = number.is_signed()
        magnitude = abs(number)

        # Size the context to the input so huge values quantize exactly
        digits = max(magnitude.adjusted() + 1, 1)
        with localcontext() as context:
            context.prec = digits + self._precision + 2
            rounded = magnitude.quantize(
                Decimal(1).scaleb(-self._precision),
                rounding=ROUND_HALF_UP,
            )
            whole = int(rounded)
            fraction = int((rounded - whole).scaleb(self._precision))

        return SplitNumber(
            negative=negative and (whole > 0 or fraction > 0),
            whole=whole,
            fraction=fraction,
            precision=self._precision,
        )

    @staticmethod
    def fraction_digits(split: SplitNumber) -> str:
        """
        Fraction as a digit string with trailing zeros removed.

        42.50 at precision 2 gives "5"; 3.05 gives "05"; no fraction gives "".
        """
        if not split.has_fraction:
            return ""
        return f"{split.fraction:0{split.precision}d}".rstrip("0")
