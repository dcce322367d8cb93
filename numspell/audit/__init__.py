"""Spelling audit logging package."""

from numspell.audit.logger import SpellingAuditLogger, create_request_id

__all__ = ["SpellingAuditLogger", "create_request_id"]
