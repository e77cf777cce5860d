"""
PokerTrack – Domain Service: Session Filter
=============================================
Narrows a session collection with AND-combined predicates.

  date >= from_date, date <= to_date   (string comparison, YYYY-MM-DD)
  kind == criteria.kind
  stakes == criteria.stakes            (tournaments never match)
  game_type == criteria.game_type

The input is never mutated; the result is always a new list, even when
no criterion is set.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pokertrack.domain.entities.session import CashSession, Session
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria


def matches(session: Session, criteria: FilterCriteria) -> bool:
    """True if the session satisfies every populated criterion."""
    if criteria.from_date is not None and session.date < criteria.from_date:
        return False
    if criteria.to_date is not None and session.date > criteria.to_date:
        return False
    if criteria.kind is not None and session.kind != criteria.kind:
        return False
    if criteria.stakes is not None:
        if not isinstance(session, CashSession) or session.stakes != criteria.stakes:
            return False
    if criteria.game_type is not None and session.game_type != criteria.game_type:
        return False
    return True


def filter_sessions(
    sessions: Sequence[Session],
    criteria: Optional[FilterCriteria] = None,
) -> List[Session]:
    if criteria is None or criteria.is_empty():
        return list(sessions)
    return [s for s in sessions if matches(s, criteria)]
