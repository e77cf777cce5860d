"""Application ports."""
from pokertrack.application.ports.session_cache import ISessionCache

__all__ = ["ISessionCache"]
