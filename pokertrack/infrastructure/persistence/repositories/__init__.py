"""Repository implementations."""

from pokertrack.infrastructure.persistence.repositories.in_memory_session_repository import (
    InMemorySessionRepository,
)
from pokertrack.infrastructure.persistence.repositories.session_repository_impl import (
    SessionRepositoryImpl,
)

__all__ = [
    "InMemorySessionRepository",
    "SessionRepositoryImpl",
]
