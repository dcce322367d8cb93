"""
Spelling Audit Logger

Every spell call is recorded as a structured event: completed calls at
debug level, language fallbacks as warnings, rejected input as errors.

The logger:
- Is synchronous (spelling never blocks or awaits)
- Never lets a logging failure break a spell call
- Tags related events with a request ID
"""

from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from numspell.models.events import (
    SpellEvent,
    SpellEventBuilder,
    SpellEventType,
    SpellSeverity,
)


# Configure structlog for local logging, unless the host application
# already did
if not structlog.is_configured():
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class SpellingAuditLogger:
    """Emits spell events to the structured log."""

    def __init__(self, enabled: bool = True):
        self._enabled = enabled
        self._logger = structlog.get_logger("numspell")

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log(self, event: SpellEvent) -> bool:
        """
        Log a spell event at its severity.

        Returns False if logging is disabled or the log call failed.
        """
        if not self._enabled:
            return False

        log_dict = event.to_log_dict()
        try:
            if event.severity == SpellSeverity.ERROR:
                self._logger.error("spell_event", **log_dict)
            elif event.severity == SpellSeverity.WARNING:
                self._logger.warning("spell_event", **log_dict)
            elif event.severity == SpellSeverity.DEBUG:
                self._logger.debug("spell_event", **log_dict)
            else:
                self._logger.info("spell_event", **log_dict)
        except Exception:
            # A broken log handler must not fail the spell call
            return False
        return True

    def log_completed(
        self,
        request_id: UUID,
        language: str,
        value: Any,
        currency: bool,
    ) -> None:
        self.log(SpellEventBuilder.completed(
            request_id=request_id,
            language=language,
            value=value,
            currency=currency,
        ))

    def log_language_fallback(
        self,
        request_id: UUID,
        requested: str,
        fallback: str,
    ) -> None:
        self.log(SpellEventBuilder.language_fallback(
            request_id=request_id,
            requested=requested,
            fallback=fallback,
        ))

    def log_rejected(
        self,
        request_id: UUID,
        event_type: SpellEventType,
        language: Optional[str],
        value: Any,
        error: Exception,
    ) -> None:
        self.log(SpellEventBuilder.rejected(
            request_id=request_id,
            event_type=event_type,
            language=language,
            value=value,
            error=error,
        ))


def create_request_id() -> UUID:
    """Create an ID that ties together the events of one spell call."""
    return uuid4()
