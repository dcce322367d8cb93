"""Currency name and metadata services."""

from numspell.services.currency.interface import (
    GENERIC_CURRENCY_NAMES,
    CurrencyMetadataInterface,
    CurrencyNameResolverInterface,
)
from numspell.services.currency.static_tables import (
    CURRENCIES,
    CURRENCY_NAMES,
    StaticCurrencyMetadata,
    StaticCurrencyNameResolver,
)

__all__ = [
    # Interfaces
    "CurrencyMetadataInterface",
    "CurrencyNameResolverInterface",
    "GENERIC_CURRENCY_NAMES",
    # Static implementation
    "CURRENCIES",
    "CURRENCY_NAMES",
    "StaticCurrencyMetadata",
    "StaticCurrencyNameResolver",
]
