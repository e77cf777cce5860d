"""Session snapshot cache."""
from pokertrack.infrastructure.cache.session_cache import TTLSessionCache

__all__ = ["TTLSessionCache"]
