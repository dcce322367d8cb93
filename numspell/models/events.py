"""
Spelling Event Models

Every spell call produces one event: completed, rejected, or fell back
to another language. Events are emitted to the structured log by
numspell.audit; nothing is persisted.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class SpellEventType(str, Enum):
    """Types of events a spell call can produce."""
    SPELL_COMPLETED = "spell_completed"
    LANGUAGE_FALLBACK = "language_fallback"
    INVALID_INPUT = "invalid_input"
    MAGNITUDE_OVERFLOW = "magnitude_overflow"
    UNKNOWN_LANGUAGE = "unknown_language"


class SpellSeverity(str, Enum):
    """Severity level for spell events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SpellEvent(BaseModel):
    """A single spelling event."""

    event_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: SpellEventType
    severity: SpellSeverity = SpellSeverity.INFO

    # Correlates the events of one call (a fallback and its completion)
    request_id: Optional[UUID] = None

    language: Optional[str] = Field(
        default=None,
        description="Language code the event relates to"
    )
    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "request_id": str(self.request_id) if self.request_id else None,
            "language": self.language,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


def _describe_value(value: Any) -> str:
    # Huge ints cannot be converted to str past the interpreter's digit limit
    if isinstance(value, int) and value.bit_length() > 256:
        sign = "-" if value < 0 else ""
        return f"<{sign}int of {value.bit_length()} bits>"
    text = repr(value)
    if len(text) > 80:
        return text[:77] + "..."
    return text


class SpellEventBuilder:
    """
    Builds spell events for the common outcomes.

    Usage:
        event = SpellEventBuilder.completed(request_id, "fr", 42, currency=False)
    """

    @staticmethod
    def completed(
        request_id: UUID,
        language: str,
        value: Any,
        currency: bool,
    ) -> SpellEvent:
        return SpellEvent(
            event_type=SpellEventType.SPELL_COMPLETED,
            severity=SpellSeverity.DEBUG,
            request_id=request_id,
            language=language,
            description=f"Spelled number in {language}",
            details={
                "value": _describe_value(value),
                "currency": currency,
            },
        )

    @staticmethod
    def language_fallback(
        request_id: UUID,
        requested: str,
        fallback: str,
    ) -> SpellEvent:
        return SpellEvent(
            event_type=SpellEventType.LANGUAGE_FALLBACK,
            severity=SpellSeverity.WARNING,
            request_id=request_id,
            language=fallback,
            description=f"No speller for {requested!r}, using {fallback!r}",
            details={
                "requested_language": requested,
                "fallback_language": fallback,
            },
        )

    @staticmethod
    def rejected(
        request_id: UUID,
        event_type: SpellEventType,
        language: Optional[str],
        value: Any,
        error: Exception,
    ) -> SpellEvent:
        return SpellEvent(
            event_type=event_type,
            severity=SpellSeverity.ERROR,
            request_id=request_id,
            language=language,
            description=f"Spell call rejected: {event_type.value}",
            details={"value": _describe_value(value)},
            error_message=str(error),
        )
