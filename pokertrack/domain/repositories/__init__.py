"""Repository interfaces."""
from pokertrack.domain.repositories.session_repository import ISessionRepository

__all__ = ["ISessionRepository"]
