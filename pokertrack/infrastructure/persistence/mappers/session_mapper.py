"""
PokerTrack – Session Mapper
=============================
Maps between the Session variants (domain) and SessionModel (ORM).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from pokertrack.domain.entities.session import (
    CashSession,
    Session,
    SessionKind,
    TournamentSession,
)


def _decimal(value: float) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _float(value: Optional[Decimal]) -> float:
    return float(value) if value is not None else 0.0


class SessionMapper:
    """
    Bidirectional mapper Session ↔ SessionModel.
    """

    def to_model(self, session: Session) -> Dict[str, Any]:
        """
        Convert a domain session into SessionModel column values.

        Columns belonging to the other kind are set to None so an update
        that changes the kind leaves no stale values behind.
        """
        data: Dict[str, Any] = {
            "id": session.id,
            "session_type": session.kind.value,
            "date": session.date,
            "duration_minutes": session.duration_minutes,
            "game_type": session.game_type,
            "location": session.location,
            "notes": session.notes,
            "start_time": session.start_time,
            "stakes": None,
            "profit_units": None,
            "profit_money": None,
            "hands_played": None,
            "buy_in": None,
            "cash_out": None,
        }
        if isinstance(session, CashSession):
            data.update(
                stakes=session.stakes,
                profit_units=_decimal(session.profit_units),
                profit_money=_decimal(session.profit_money),
                hands_played=session.hands_played,
            )
        else:
            data.update(
                buy_in=_decimal(session.buy_in),
                cash_out=_decimal(session.cash_out),
            )
        return data

    def to_entity(self, model: Any) -> Session:
        """
        Convert a SessionModel row into its domain variant.

        NULL numeric columns become zero.
        """
        common = dict(
            id=model.id,
            date=model.date,
            duration_minutes=model.duration_minutes or 0,
            game_type=model.game_type,
            location=model.location,
            notes=model.notes,
            start_time=model.start_time,
        )
        if model.session_type == SessionKind.CASH.value:
            return CashSession(
                **common,
                stakes=model.stakes,
                profit_units=_float(model.profit_units),
                profit_money=_float(model.profit_money),
                hands_played=model.hands_played or 0,
            )
        return TournamentSession(
            **common,
            buy_in=_float(model.buy_in),
            cash_out=_float(model.cash_out),
        )
