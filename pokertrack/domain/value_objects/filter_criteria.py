"""
PokerTrack – Filter Criteria (Value Object)
=============================================
Optional constraints used to narrow a session collection.

A field left as None means "no constraint on this dimension".
Dates are inclusive bounds compared as YYYY-MM-DD strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pokertrack.domain.entities.session import SessionKind


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    kind: Optional[SessionKind] = None
    stakes: Optional[str] = None
    game_type: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.from_date is None
            and self.to_date is None
            and self.kind is None
            and self.stakes is None
            and self.game_type is None
        )

    def to_dict(self) -> dict:
        """Populated fields only, keyed the way the query string names them."""
        raw = {
            "from": self.from_date,
            "to": self.to_date,
            "type": self.kind.value if self.kind is not None else None,
            "stakes": self.stakes,
            "gameType": self.game_type,
        }
        return {key: value for key, value in raw.items() if value is not None}
