"""Domain entities."""
from pokertrack.domain.entities.session import (
    CashSession,
    Session,
    SessionKind,
    TournamentSession,
    session_from_dict,
)

__all__ = [
    "CashSession",
    "Session",
    "SessionKind",
    "TournamentSession",
    "session_from_dict",
]
