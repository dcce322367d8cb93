"""
Static Currency Tables

In-process implementations of the currency interfaces, backed by
dictionaries. Covers the currencies the spelling engine is tested
with; anything else resolves to generic names.
"""

from typing import Optional

from numspell.models.spelling import CurrencyInfo, CurrencyNames
from numspell.services.currency.interface import (
    GENERIC_CURRENCY_NAMES,
    CurrencyMetadataInterface,
    CurrencyNameResolverInterface,
)
from numspell.spelling.spellers import normalize_language


# Keyed by (currency code, language code)
CURRENCY_NAMES: dict[tuple[str, str], CurrencyNames] = {
    ("USD", "en"): CurrencyNames(main="dollars", sub="cents", main_singular="dollar", sub_singular="cent"),
    ("USD", "fr"): CurrencyNames(main="dollars", sub="cents", main_singular="dollar", sub_singular="cent"),
    ("USD", "es"): CurrencyNames(main="dólares", sub="centavos", main_singular="dólar", sub_singular="centavo"),
    ("USD", "de"): CurrencyNames(main="Dollar", sub="Cent"),
    ("EUR", "en"): CurrencyNames(main="euros", sub="cents", main_singular="euro", sub_singular="cent"),
    ("EUR", "fr"): CurrencyNames(main="euros", sub="centimes", main_singular="euro", sub_singular="centime"),
    ("EUR", "es"): CurrencyNames(main="euros", sub="céntimos", main_singular="euro", sub_singular="céntimo"),
    ("EUR", "de"): CurrencyNames(main="Euro", sub="Cent"),
    ("GBP", "en"): CurrencyNames(main="pounds", sub="pence", main_singular="pound", sub_singular="penny"),
    ("GBP", "fr"): CurrencyNames(main="livres", sub="pence", main_singular="livre", sub_singular="penny"),
    ("GBP", "es"): CurrencyNames(main="libras", sub="peniques", main_singular="libra", sub_singular="penique"),
    ("GBP", "de"): CurrencyNames(main="Pfund", sub="Pence", sub_singular="Penny"),
    ("JPY", "en"): CurrencyNames(main="yen", sub="sen"),
    ("JPY", "fr"): CurrencyNames(main="yens", sub="sen", main_singular="yen"),
    ("JPY", "es"): CurrencyNames(main="yenes", sub="sen", main_singular="yen"),
    ("JPY", "de"): CurrencyNames(main="Yen", sub="Sen"),
    ("ZMW", "en"): CurrencyNames(main="kwacha", sub="ngwee"),
    ("ZMW", "fr"): CurrencyNames(main="kwachas", sub="ngwees", main_singular="kwacha", sub_singular="ngwee"),
    ("ZMW", "es"): CurrencyNames(main="kwachas", sub="ngwees", main_singular="kwacha", sub_singular="ngwee"),
    ("ZMW", "de"): CurrencyNames(main="Kwacha", sub="Ngwee"),
    ("INR", "en"): CurrencyNames(main="rupees", sub="paise", main_singular="rupee", sub_singular="paisa"),
    ("INR", "fr"): CurrencyNames(main="roupies", sub="paisas", main_singular="roupie", sub_singular="paisa"),
    ("INR", "es"): CurrencyNames(main="rupias", sub="paisas", main_singular="rupia", sub_singular="paisa"),
    ("INR", "de"): CurrencyNames(main="Rupien", sub="Paise", main_singular="Rupie", sub_singular="Paisa"),
}

CURRENCIES: dict[str, CurrencyInfo] = {
    info.code: info
    for info in (
        CurrencyInfo(code="USD", name="US Dollar", symbol="$", decimal_places=2),
        CurrencyInfo(code="EUR", name="Euro", symbol="€", decimal_places=2),
        CurrencyInfo(code="GBP", name="British Pound", symbol="£", decimal_places=2),
        CurrencyInfo(code="JPY", name="Japanese Yen", symbol="¥", decimal_places=0),
        CurrencyInfo(code="ZMW", name="Zambian Kwacha", symbol="K", decimal_places=2),
        CurrencyInfo(code="CNY", name="Chinese Yuan", symbol="¥", decimal_places=2),
        CurrencyInfo(code="INR", name="Indian Rupee", symbol="₹", decimal_places=2),
        CurrencyInfo(code="BTC", name="Bitcoin", symbol="₿", decimal_places=8),
    )
}


class StaticCurrencyNameResolver(CurrencyNameResolverInterface):
    """Resolves unit names from an in-memory table."""

    def __init__(self, names: Optional[dict[tuple[str, str], CurrencyNames]] = None):
        self._names = CURRENCY_NAMES if names is None else names

    def resolve(self, currency_code: Optional[str], language: str) -> CurrencyNames:
        if not currency_code or not language:
            return GENERIC_CURRENCY_NAMES
        key = (currency_code.strip().upper(), normalize_language(language))
        return self._names.get(key, GENERIC_CURRENCY_NAMES)


class StaticCurrencyMetadata(CurrencyMetadataInterface):
    """Looks up currency metadata from an in-memory table."""

    def __init__(self, currencies: Optional[dict[str, CurrencyInfo]] = None):
        self._currencies = CURRENCIES if currencies is None else currencies

    def lookup(self, currency_code: str) -> Optional[CurrencyInfo]:
        if not currency_code:
            return None
        return self._currencies.get(currency_code.strip().upper())
