"""
PokerTrack – Session ORM Model
================================
Table `poker_sessions`: one row per play session.

DESIGN DECISIONS:

- One table for both kinds, discriminated by `session_type`. Cash-only
  and tournament-only columns are NULL for the other kind; the mapper
  turns a row back into the right domain variant.
- `date` stored as CHAR(10) YYYY-MM-DD: calendar day, no time zone, and
  string ordering equals chronological ordering.
- NUMERIC for money and units, converted to float at the mapper.
- `profit_money` is written once from units × unit value and then
  treated as authoritative.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    String, Integer, Numeric, Text, DateTime, Enum as SQLEnum, Index
)
from sqlalchemy.orm import Mapped, mapped_column

from pokertrack.infrastructure.persistence.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionModel(Base):
    """ORM model for poker play sessions."""

    __tablename__ = "poker_sessions"

    # ─── Primary Key ──────────────────────────────────────────────────
    id: Mapped[str] = mapped_column(
        String(32), primary_key=True,
        comment="Compact id generated by the system",
    )

    # ─── Common ───────────────────────────────────────────────────────
    session_type: Mapped[str] = mapped_column(
        SQLEnum("cash", "tournament", name="session_type_enum"),
        nullable=False,
    )
    date: Mapped[str] = mapped_column(
        String(10), nullable=False,
        comment="Calendar day YYYY-MM-DD",
    )
    duration_minutes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    game_type: Mapped[str | None] = mapped_column(String(64), default=None)
    location: Mapped[str | None] = mapped_column(String(128), default=None)
    notes: Mapped[str | None] = mapped_column(Text, default=None)
    start_time: Mapped[str | None] = mapped_column(
        String(5), default=None,
        comment="Local start time HH:MM",
    )

    # ─── Cash only ────────────────────────────────────────────────────
    stakes: Mapped[str | None] = mapped_column(String(32), default=None)
    profit_units: Mapped[Decimal | None] = mapped_column(
        Numeric(14, 2), default=None,
        comment="Profit in big blinds",
    )
    profit_money: Mapped[Decimal | None] = mapped_column(
        Numeric(14, 2), default=None,
        comment="Profit in currency, units × unit value at write time",
    )
    hands_played: Mapped[int | None] = mapped_column(Integer, default=None)

    # ─── Tournament only ──────────────────────────────────────────────
    buy_in: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), default=None)
    cash_out: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), default=None)

    # ─── Audit ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_poker_sessions_date", "date"),
        Index("ix_poker_sessions_type_date", "session_type", "date"),
    )

    def __repr__(self) -> str:
        return f"<SessionModel(id={self.id}, type={self.session_type}, date={self.date})>"
