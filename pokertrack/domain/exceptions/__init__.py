"""Domain exceptions."""
from pokertrack.domain.exceptions.domain_errors import (
    DomainError,
    InvalidSessionError,
    SessionNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "InvalidSessionError",
    "SessionNotFoundError",
    "ValidationError",
]
