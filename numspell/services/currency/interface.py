"""
Abstract Currency Interfaces

DESIGN DECISION: The engine only talks to these interfaces, so the
static tables shipped here can be swapped for a CLDR-backed source
without touching the spelling code.
"""

from abc import ABC, abstractmethod
from typing import Optional

from numspell.models.spelling import CurrencyInfo, CurrencyNames


# Returned for any currency/language pair without an entry
GENERIC_CURRENCY_NAMES = CurrencyNames(main="units", sub="subunits")


class CurrencyNameResolverInterface(ABC):
    """Maps a currency code and language to unit names."""

    @abstractmethod
    def resolve(self, currency_code: Optional[str], language: str) -> CurrencyNames:
        """
        Get unit names for a currency in a language.

        Args:
            currency_code: ISO 4217 code; None means no specific currency
            language: Language tag ("en", "fr-FR", ...)

        Returns:
            The names, or GENERIC_CURRENCY_NAMES when unknown.
            Must never raise.
        """
        pass


class CurrencyMetadataInterface(ABC):
    """Currency metadata lookup (symbol, minor-unit digits)."""

    @abstractmethod
    def lookup(self, currency_code: str) -> Optional[CurrencyInfo]:
        """
        Get metadata for a currency.

        Returns:
            The currency info, or None if the code is unknown
        """
        pass
