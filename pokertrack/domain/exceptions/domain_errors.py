"""
PokerTrack – Domain Exceptions
================================
Business-rule errors raised on the session write path.

The analytics engine never raises these: every aggregation is a total
function over the session shape and falls back to zero defaults.

HIERARCHY:
    DomainError (base)
    ├── InvalidSessionError
    ├── SessionNotFoundError
    └── ValidationError
"""

from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }


class InvalidSessionError(DomainError):
    """A session record cannot be built (unknown kind, missing date)."""

    def __init__(self, message: str, session_id: Optional[str] = None):
        super().__init__(message, code="INVALID_SESSION")
        self.session_id = session_id


class SessionNotFoundError(DomainError):
    """The store holds no session with the requested id."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}", code="SESSION_NOT_FOUND")
        self.session_id = session_id


class ValidationError(DomainError):
    """General validation failure of domain data."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.value = value
