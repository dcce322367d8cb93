"""Services package."""

from numspell.services.currency import (
    CURRENCIES,
    CURRENCY_NAMES,
    GENERIC_CURRENCY_NAMES,
    CurrencyMetadataInterface,
    CurrencyNameResolverInterface,
    StaticCurrencyMetadata,
    StaticCurrencyNameResolver,
)

__all__ = [
    # Currency services
    "CURRENCIES",
    "CURRENCY_NAMES",
    "CurrencyMetadataInterface",
    "CurrencyNameResolverInterface",
    "GENERIC_CURRENCY_NAMES",
    "StaticCurrencyMetadata",
    "StaticCurrencyNameResolver",
]
