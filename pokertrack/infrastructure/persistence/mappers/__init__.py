"""ORM ↔ domain mappers."""
from pokertrack.infrastructure.persistence.mappers.session_mapper import SessionMapper

__all__ = ["SessionMapper"]
