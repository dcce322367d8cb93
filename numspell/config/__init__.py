"""Configuration package."""

from numspell.config.settings import SpellingSettings, get_settings

__all__ = [
    "SpellingSettings",
    "get_settings",
]
