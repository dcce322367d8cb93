"""Spell request validation package."""

from numspell.validation.validator import SpellRequestValidator

__all__ = ["SpellRequestValidator"]
