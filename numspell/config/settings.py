"""
Configuration Management for numspell

Uses pydantic-settings for type-safe configuration from environment
variables (prefix NUMSPELL_) and an optional .env file.

DESIGN DECISION: Settings only supply defaults. Anything a caller passes
in SpellOptions wins over them.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpellingSettings(BaseSettings):
    """
    Spelling engine defaults.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="NUMSPELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    default_language: str = Field(
        default="en",
        description="Language used when none is given, and for fallback"
    )
    strict_language: bool = Field(
        default=False,
        description="Raise UnknownLanguageError instead of falling back"
    )
    default_precision: int = Field(
        default=2,
        ge=0,
        le=12,
        description="Fractional digits kept when neither caller nor currency says"
    )
    default_currency_code: Optional[str] = Field(
        default=None,
        description="Currency used in currency mode when the caller gives none"
    )
    log_events: bool = Field(
        default=True,
        description="Emit a structured event for every spell call"
    )

    @field_validator("default_language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Default language cannot be empty")
        return v

    @field_validator("default_currency_code")
    @classmethod
    def normalize_currency_code(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip().upper()


@lru_cache()
def get_settings() -> SpellingSettings:
    """
    Get spelling settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return SpellingSettings()
