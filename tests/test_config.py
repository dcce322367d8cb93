"""Tests for settings loading."""

import pytest

from pydantic import ValidationError

from numspell.config import SpellingSettings, get_settings


class TestSpellingSettings:
    """Tests for SpellingSettings."""

    def test_defaults(self):
        """Test default settings."""
        settings = SpellingSettings(_env_file=None)
        assert settings.default_language == "en"
        assert settings.strict_language is False
        assert settings.default_precision == 2
        assert settings.default_currency_code is None
        assert settings.log_events is True

    def test_from_environment(self, monkeypatch):
        """Test the NUMSPELL_ environment prefix."""
        monkeypatch.setenv("NUMSPELL_DEFAULT_LANGUAGE", " FR ")
        monkeypatch.setenv("NUMSPELL_STRICT_LANGUAGE", "true")
        monkeypatch.setenv("NUMSPELL_DEFAULT_CURRENCY_CODE", "eur")
        settings = SpellingSettings(_env_file=None)
        assert settings.default_language == "fr"
        assert settings.strict_language is True
        assert settings.default_currency_code == "EUR"

    def test_blank_currency_is_none(self, monkeypatch):
        """Test that an empty currency setting means none."""
        monkeypatch.setenv("NUMSPELL_DEFAULT_CURRENCY_CODE", " ")
        assert SpellingSettings(_env_file=None).default_currency_code is None

    def test_empty_language_rejected(self):
        """Test that the default language cannot be blank."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            SpellingSettings(_env_file=None, default_language="  ")

    def test_precision_bounds(self):
        """Test default precision bounds."""
        with pytest.raises(ValidationError):
            SpellingSettings(_env_file=None, default_precision=20)

    def test_env_file(self, tmp_path):
        """Test loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("NUMSPELL_DEFAULT_PRECISION=4\n")
        assert SpellingSettings(_env_file=env_file).default_precision == 4

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one instance until cleared."""
        assert get_settings() is get_settings()
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
