"""
PokerTrack – Domain Layer
===========================
Pure core of the system. ZERO external dependencies.

This package contains:
- entities/: Session variants (cash, tournament)
- value_objects/: FilterCriteria and the statistics records
- services/: the session analytics engine
- repositories/: abstract interfaces (ABCs)
- exceptions/: domain exceptions

DEPENDENCY RULE:
This package must NOT import from:
- infrastructure/
- presentation/
- application/
- external frameworks (SQLAlchemy, FastAPI, etc.)
"""

from pokertrack.domain.entities.session import (
    CashSession,
    Session,
    SessionKind,
    TournamentSession,
)
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria
from pokertrack.domain.services.session_analytics import SessionAnalytics

__all__ = [
    "CashSession",
    "Session",
    "SessionKind",
    "TournamentSession",
    "FilterCriteria",
    "SessionAnalytics",
]
