"""
Spelling Orchestrator

Ties the pipeline together behind one operation:

    spell(number, language, options) -> str

Flow:
1. Resolve language -> Speller (fallback or strict error)
2. Pick precision (caller, currency, settings)
3. Validate -> SplitNumber (InvalidInput / Overflow raised here)
4. Spell whole part, and fraction if any
5. Join with currency names or the point word
6. Prefix the negation word, capitalize

DESIGN DECISION: Every error is raised before rendering starts, so a
failed call never produces partial output. Each call is logged as one
structured event, tagged with a request ID.
"""

from functools import lru_cache
from typing import Any, Optional
from uuid import UUID

from pydantic import ValidationError

from numspell.audit import SpellingAuditLogger, create_request_id
from numspell.config import SpellingSettings, get_settings
from numspell.errors import (
    InvalidInputError,
    MagnitudeOverflowError,
    UnknownLanguageError,
)
from numspell.models.events import SpellEventType
from numspell.models.spelling import (
    CurrencyNames,
    SpelledPhrase,
    SpellOptions,
    SplitNumber,
)
from numspell.services.currency import (
    CurrencyMetadataInterface,
    CurrencyNameResolverInterface,
    StaticCurrencyMetadata,
    StaticCurrencyNameResolver,
)
from numspell.spelling.spellers import Speller, get_speller
from numspell.spelling.splitter import DecimalSplitter
from numspell.validation import SpellRequestValidator


FALLBACK_LANGUAGE = "en"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return text[:1].upper() + text[1:]


class SpellingEngine:
    """
    Spells numbers as words in a supported language.

    All collaborators are injectable; the defaults are the static
    currency tables and settings from the environment.
    """

    def __init__(
        self,
        name_resolver: Optional[CurrencyNameResolverInterface] = None,
        currency_metadata: Optional[CurrencyMetadataInterface] = None,
        validator: Optional[SpellRequestValidator] = None,
        audit_logger: Optional[SpellingAuditLogger] = None,
        settings: Optional[SpellingSettings] = None,
    ):
        self._settings = settings or get_settings()
        self._name_resolver = name_resolver or StaticCurrencyNameResolver()
        self._currency_metadata = currency_metadata or StaticCurrencyMetadata()
        self._validator = validator or SpellRequestValidator()
        self._audit_logger = audit_logger or SpellingAuditLogger(
            enabled=self._settings.log_events
        )

    def resolve_speller(
        self,
        language: Optional[str],
        strict: bool = False,
        request_id: Optional[UUID] = None,
    ) -> Speller:
        """
        Get the speller for a language.

        Unknown languages fall back to the default language (logged as a
        warning) unless strict is set.

        Raises:
            UnknownLanguageError: In strict mode, for an unsupported language
        """
        requested = language or self._settings.default_language
        speller = get_speller(requested)
        if speller is not None:
            return speller

        if strict:
            raise UnknownLanguageError(
                language=requested,
                message=f"No speller registered for language {requested!r}",
            )

        fallback = get_speller(self._settings.default_language) or get_speller(FALLBACK_LANGUAGE)
        self._audit_logger.log_language_fallback(
            request_id=request_id or create_request_id(),
            requested=requested,
            fallback=fallback.code,
        )
        return fallback

    def spell(
        self,
        number: Any,
        language: Optional[str] = None,
        options: Optional[SpellOptions] = None,
        **option_fields: Any,
    ) -> str:
        """
        Spell a number in a language.

        Args:
            number: int, Decimal, float or numeric string
            language: Language tag ("en", "fr-FR", ...); settings default if None
            options: Spell options; keyword fields override or replace it

        Returns:
            The spelled number

        Raises:
            InvalidInputError: If number is not a finite number, or an
                option is unknown or invalid
            MagnitudeOverflowError: If number is beyond the scale table
            UnknownLanguageError: In strict mode, for an unsupported language
        """
        request_id = create_request_id()
        try:
            options = self._merge_options(options, option_fields)
        except InvalidInputError as e:
            self._audit_logger.log_rejected(
                request_id=request_id,
                event_type=SpellEventType.INVALID_INPUT,
                language=language,
                value=number,
                error=e,
            )
            raise

        strict = options.strict_language
        if strict is None:
            strict = self._settings.strict_language

        try:
            speller = self.resolve_speller(language, strict=strict, request_id=request_id)
        except UnknownLanguageError as e:
            self._audit_logger.log_rejected(
                request_id=request_id,
                event_type=SpellEventType.UNKNOWN_LANGUAGE,
                language=language,
                value=number,
                error=e,
            )
            raise

        return self.spell_with(speller, number, options, request_id=request_id)

    def spell_with(
        self,
        speller: Speller,
        number: Any,
        options: Optional[SpellOptions] = None,
        names: Optional[CurrencyNames] = None,
        request_id: Optional[UUID] = None,
    ) -> str:
        """
        Spell a number with a given speller.

        names overrides the currency name lookup in currency mode.
        """
        options = options or SpellOptions()
        request_id = request_id or create_request_id()
        currency_code = options.currency_code or self._settings.default_currency_code

        try:
            split = self._validator.validate(
                number,
                speller,
                self._precision_for(options, currency_code),
            )
        except InvalidInputError as e:
            self._audit_logger.log_rejected(
                request_id=request_id,
                event_type=SpellEventType.INVALID_INPUT,
                language=speller.code,
                value=number,
                error=e,
            )
            raise
        except MagnitudeOverflowError as e:
            self._audit_logger.log_rejected(
                request_id=request_id,
                event_type=SpellEventType.MAGNITUDE_OVERFLOW,
                language=speller.code,
                value=number,
                error=e,
            )
            raise

        whole = speller.spell_integer(split.whole)
        if options.currency:
            names = names or self._name_resolver.resolve(currency_code, speller.code)
            text = self._join_currency(speller, split, whole, names, options)
        elif split.has_fraction:
            fraction = speller.spell_fraction_digits(DecimalSplitter.fraction_digits(split))
            text = f"{whole.text} {speller.grammar.point_word} {fraction}"
        else:
            text = whole.text

        if split.negative:
            text = f"{speller.grammar.negative_word} {text}"
        if options.capitalize:
            text = capitalize_first(text)

        self._audit_logger.log_completed(
            request_id=request_id,
            language=speller.code,
            value=number,
            currency=options.currency,
        )
        return text

    def _join_currency(
        self,
        speller: Speller,
        split: SplitNumber,
        whole: SpelledPhrase,
        names: CurrencyNames,
        options: SpellOptions,
    ) -> str:
        main_clause = f"{whole.text} {names.main_for(split.whole)}"
        if not split.has_fraction:
            return main_clause

        fraction = speller.spell_integer(split.fraction)
        sub_clause = f"{fraction.text} {names.sub_for(split.fraction)}"
        if whole.is_zero and options.drop_zero_whole:
            return sub_clause
        return f"{main_clause} {speller.grammar.currency_connector} {sub_clause}"

    def _precision_for(self, options: SpellOptions, currency_code: Optional[str]) -> int:
        if options.precision is not None:
            return options.precision
        if options.currency and currency_code:
            info = self._currency_metadata.lookup(currency_code)
            if info is not None:
                return info.decimal_places
        return self._settings.default_precision

    @staticmethod
    def _merge_options(
        options: Optional[SpellOptions],
        option_fields: dict[str, Any],
    ) -> SpellOptions:
        """
        Combine an options object with keyword overrides.

        Raises:
            InvalidInputError: For unknown option names or invalid values
        """
        if options is not None and not option_fields:
            return options
        base = options.model_dump() if options is not None else {}
        try:
            return SpellOptions(**{**base, **option_fields})
        except ValidationError as e:
            raise InvalidInputError(
                value=option_fields,
                message=f"Invalid spell options: {e}",
            ) from e


@lru_cache()
def get_engine() -> SpellingEngine:
    """
    Get the shared default engine (cached).

    Call get_engine.cache_clear() after get_settings.cache_clear() to
    pick up new settings.
    """
    return SpellingEngine()


def spell(
    number: Any,
    language: Optional[str] = None,
    options: Optional[SpellOptions] = None,
    **option_fields: Any,
) -> str:
    """
    Spell a number using the shared default engine.

    Examples:
        spell(42, "en")                      -> "Forty-two"
        spell(42, "fr")                      -> "Quarante-deux"
        spell(42.75, "en", currency=True, currency_code="USD")
            -> "Forty-two dollars and seventy-five cents"
    """
    return get_engine().spell(number, language, options, **option_fields)
