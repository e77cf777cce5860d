"""
PokerTrack – Domain Entity: Session
=====================================
One discrete play session, the atomic record of the tracker.

DESIGN DECISIONS:

TAGGED VARIANT:
  A session is either a cash game or a tournament, never both. Instead
  of one record with loosely optional fields, each kind is its own
  frozen dataclass and ``Session`` is the union of the two. Code that
  handles sessions dispatches on the concrete class (or ``kind``), so
  cash-only fields never leak into tournament math.

IMMUTABLE SNAPSHOT:
  frozen=True. The store owns creation and mutation; the analytics
  engine only ever reads a snapshot, and an update replaces the record.

AUTHORITATIVE MONEY PROFIT:
  For cash sessions ``profit_money`` is computed once on the write path
  (``profit_units * unit_value(stakes)``) and is never recomputed during
  aggregation. Tournament profit is always ``cash_out - buy_in``.

ZERO DEFAULTS:
  Missing or non-numeric optional numbers coerce to 0 when building a
  session from a plain mapping. Only an unknown ``type`` or a missing
  ``date`` is rejected, and that happens on the adapter/write path.

WIRE SHAPE (camelCase, as stored and served):
  id, type, date, duration, gameType, location, notes, startTime,
  cash:       stakes, profitBB, profitDollars, hands
  tournament: buyIn, cashOut
"""

from __future__ import annotations

import math
import re
import uuid
from dataclasses import dataclass
from datetime import date as date_type, datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pokertrack.domain.exceptions.domain_errors import InvalidSessionError


class SessionKind(str, Enum):
    """Kind of play session."""
    CASH = "cash"
    TOURNAMENT = "tournament"


@dataclass(frozen=True, slots=True)
class CashSession:
    """Cash game session. Profit is tracked in units (big blinds) and money."""

    id: str
    date: str                       # YYYY-MM-DD
    duration_minutes: int = 0
    game_type: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    start_time: Optional[str] = None  # HH:MM local
    stakes: Optional[str] = None      # e.g. "NL50", "PLO100"
    profit_units: float = 0.0
    profit_money: float = 0.0
    hands_played: int = 0

    @property
    def kind(self) -> SessionKind:
        return SessionKind.CASH

    @property
    def money_profit(self) -> float:
        return self.profit_money

    @property
    def unit_profit(self) -> float:
        return self.profit_units

    @property
    def is_winning(self) -> bool:
        return self.profit_units > 0

    def to_dict(self) -> dict:
        """Serialisation for API / persistence."""
        return {
            "id": self.id,
            "type": self.kind.value,
            "date": self.date,
            "duration": self.duration_minutes,
            "gameType": self.game_type,
            "location": self.location,
            "notes": self.notes,
            "startTime": self.start_time,
            "stakes": self.stakes,
            "profitBB": self.profit_units,
            "profitDollars": self.profit_money,
            "hands": self.hands_played,
        }


@dataclass(frozen=True, slots=True)
class TournamentSession:
    """Tournament session. Profit is derived from buy-in and cash-out."""

    id: str
    date: str
    duration_minutes: int = 0
    game_type: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    start_time: Optional[str] = None
    buy_in: float = 0.0
    cash_out: float = 0.0

    @property
    def kind(self) -> SessionKind:
        return SessionKind.TOURNAMENT

    @property
    def money_profit(self) -> float:
        return self.cash_out - self.buy_in

    @property
    def unit_profit(self) -> float:
        # Units are meaningful for cash games only
        return 0.0

    @property
    def is_winning(self) -> bool:
        return (self.cash_out - self.buy_in) > 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.kind.value,
            "date": self.date,
            "duration": self.duration_minutes,
            "gameType": self.game_type,
            "location": self.location,
            "notes": self.notes,
            "startTime": self.start_time,
            "buyIn": self.buy_in,
            "cashOut": self.cash_out,
        }


Session = Union[CashSession, TournamentSession]


# ════════════════════════════════════════════════════════════════
#  CONSTRUCTION FROM PLAIN MAPPINGS
# ════════════════════════════════════════════════════════════════

def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among alternative key spellings."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def to_float(value: Any) -> float:
    """Coerce to float, 0.0 for missing / non-numeric / NaN."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def to_int(value: Any) -> int:
    """Coerce to int (truncating), 0 for missing / non-numeric."""
    return int(to_float(value))


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_date(value: Any) -> str:
    """date/datetime → YYYY-MM-DD; strings pass through untouched."""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date_type):
        return value.isoformat()
    return str(value)


def session_from_dict(data: Mapping[str, Any]) -> Session:
    """
    Build the right session variant from a plain mapping.

    Accepts the camelCase wire shape and snake_case field names.

    Raises:
        InvalidSessionError: unknown ``type`` or missing ``date``.
    """
    session_id = str(_pick(data, "id") or "")
    raw_kind = _pick(data, "type", "kind")
    try:
        kind = SessionKind(str(raw_kind).lower())
    except ValueError:
        raise InvalidSessionError(
            f"Unknown session type: {raw_kind!r}", session_id=session_id or None,
        ) from None

    raw_date = _pick(data, "date")
    if raw_date is None:
        raise InvalidSessionError("Session has no date", session_id=session_id or None)

    common = dict(
        id=session_id,
        date=normalize_date(raw_date),
        duration_minutes=to_int(_pick(data, "duration", "durationMinutes", "duration_minutes")),
        game_type=_optional_str(_pick(data, "gameType", "game_type")),
        location=_optional_str(_pick(data, "location")),
        notes=_optional_str(_pick(data, "notes")),
        start_time=_optional_str(_pick(data, "startTime", "start_time")),
    )

    if kind is SessionKind.CASH:
        return CashSession(
            **common,
            stakes=_optional_str(_pick(data, "stakes", "stakesLabel", "stakes_label")),
            profit_units=to_float(_pick(data, "profitBB", "profitUnits", "profit_units")),
            profit_money=to_float(_pick(data, "profitDollars", "profitMoney", "profit_money")),
            hands_played=to_int(_pick(data, "hands", "handsPlayed", "hands_played")),
        )

    return TournamentSession(
        **common,
        buy_in=to_float(_pick(data, "buyIn", "buy_in")),
        cash_out=to_float(_pick(data, "cashOut", "cash_out")),
    )


# ════════════════════════════════════════════════════════════════
#  FORMAT CHECKS
# ════════════════════════════════════════════════════════════════

# Zero-padded only: dates are compared as strings
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_CLOCK_RE = re.compile(r"\d{2}:\d{2}")


def is_iso_date(value: Any) -> bool:
    """True for a real calendar date written exactly as YYYY-MM-DD."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def is_clock_time(value: Any) -> bool:
    """True for a 24h time written exactly as HH:MM."""
    if not isinstance(value, str) or not _CLOCK_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True


def generate_session_id() -> str:
    """Compact unique id (20 hex chars of a UUID4)."""
    return uuid.uuid4().hex[:20]
