"""
Infrastructure Models Package.

SQLAlchemy ORM models. They describe the database layout,
NOT the domain entities.
"""

from pokertrack.infrastructure.persistence.models.session import SessionModel

__all__ = ["SessionModel"]
