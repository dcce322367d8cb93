"""Shared fixtures for numspell tests."""

import pytest

from numspell.audit import SpellingAuditLogger
from numspell.config import SpellingSettings, get_settings
from numspell.models.events import SpellEvent
from numspell.orchestrator import SpellingEngine, get_engine


SETTINGS_ENV_VARS = (
    "NUMSPELL_DEFAULT_LANGUAGE",
    "NUMSPELL_STRICT_LANGUAGE",
    "NUMSPELL_DEFAULT_PRECISION",
    "NUMSPELL_DEFAULT_CURRENCY_CODE",
    "NUMSPELL_LOG_EVENTS",
)


class RecordingAuditLogger(SpellingAuditLogger):
    """Audit logger that keeps events in memory instead of logging them."""

    def __init__(self):
        super().__init__(enabled=True)
        self.events: list[SpellEvent] = []

    def log(self, event: SpellEvent) -> bool:
        self.events.append(event)
        return True

    def event_types(self) -> list[str]:
        return [event.event_type.value for event in self.events]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def audit_log():
    return RecordingAuditLogger()


@pytest.fixture
def make_engine(audit_log):
    """Build an engine with explicit settings and a recording audit logger."""

    def _make(**settings_fields) -> SpellingEngine:
        settings = SpellingSettings(_env_file=None, **settings_fields)
        return SpellingEngine(settings=settings, audit_logger=audit_log)

    return _make
