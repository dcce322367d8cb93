"""
Ledger Words

Amount-in-words for cheques, receipts and invoices: title-case English,
no conjunctions inside the number, and an "And" between the main and
sub units.

    to_words(1.5)                      -> "One Kwacha And Fifty Ngwee"
    to_words(100.01, "Dollar", "Cent") -> "One Hundred Dollar And One Cent"
    number_to_words(123)               -> "One Hundred Twenty Three"

Unit names are used exactly as given; no plural forms are derived.
"""

from typing import Any

from numspell.models.spelling import CurrencyNames, SpellOptions
from numspell.orchestrator import get_engine
from numspell.spelling.spellers import LedgerEnglishSpeller


DEFAULT_MAIN_CURRENCY = "Kwacha"
DEFAULT_SUB_CURRENCY = "Ngwee"

_LEDGER_SPELLER = LedgerEnglishSpeller()

_AMOUNT_OPTIONS = SpellOptions(
    capitalize=False,
    currency=True,
    precision=2,
    drop_zero_whole=True,
)

_NUMBER_OPTIONS = SpellOptions(capitalize=False)


def to_words(
    amount: Any,
    main_currency: str = DEFAULT_MAIN_CURRENCY,
    sub_currency: str = DEFAULT_SUB_CURRENCY,
) -> str:
    """
    Spell a monetary amount in ledger style.

    Amounts are rounded half-up to two decimals. A zero main part is
    dropped when there is a sub part ("Fifty Ngwee"), and zero itself is
    "zero Kwacha".

    Raises:
        InvalidInputError: If amount is not a finite number
        MagnitudeOverflowError: If amount is beyond the scale table
    """
    names = CurrencyNames(main=main_currency, sub=sub_currency)
    return get_engine().spell_with(_LEDGER_SPELLER, amount, _AMOUNT_OPTIONS, names=names)


def number_to_words(number: Any) -> str:
    """Spell a number in ledger style, without currency units."""
    return get_engine().spell_with(_LEDGER_SPELLER, number, _NUMBER_OPTIONS)
