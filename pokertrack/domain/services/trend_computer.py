"""
PokerTrack - Trend Computer
=============================
Chronological rolling-window and cumulative statistics, one data point
per session.

ORDERING:
  Sessions are sorted ascending by date with a stable sort, so sessions
  sharing a date keep their relative input order. Same input, same output.

WINDOW:
  At position i (0-based) the window is the slice of the last
  min(window_size, i + 1) sessions ending at i inclusive.

    rolling bb/100       cash members only
    rolling avg money    all members (cash + tournament)
    rolling avg units    cash members only
    rolling win rate     all members

CUMULATIVE:
  Two running totals (money, units) updated once per session:
    cumulative[i] = cumulative[i-1] + session_profit[i]

The window size is not clamped here beyond "at least 1"; callers apply
their own upper bound.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pokertrack.domain.entities.session import CashSession, Session
from pokertrack.domain.services.metrics import bb_per_100, round_to, safe_div, win_rate
from pokertrack.domain.value_objects.session_stats import TrendPoint

DEFAULT_WINDOW_SIZE = 20


def resolve_window_size(window_size: Optional[int]) -> int:
    if not window_size or window_size < 1:
        return DEFAULT_WINDOW_SIZE
    return int(window_size)


def compute_trends(
    sessions: Sequence[Session],
    window_size: Optional[int] = None,
) -> List[TrendPoint]:
    """
    Rolling trend data points in chronological order.

    Args:
        sessions: Filtered session collection (not mutated).
        window_size: Rolling window length; None or < 1 means 20.

    Returns:
        One TrendPoint per session, sessionIndex starting at 1.
    """
    size = resolve_window_size(window_size)
    ordered = sorted(sessions, key=lambda s: s.date)

    cumulative_money = 0.0
    cumulative_units = 0.0
    points: List[TrendPoint] = []

    for i, session in enumerate(ordered):
        session_money = session.money_profit
        session_units = session.unit_profit

        cumulative_money += session_money
        cumulative_units += session_units

        window = ordered[max(0, i - size + 1): i + 1]
        cash_in_window = [s for s in window if isinstance(s, CashSession)]
        window_units = sum(s.profit_units for s in cash_in_window)
        window_hands = sum(s.hands_played for s in cash_in_window)
        window_money = sum(s.money_profit for s in window)

        points.append(TrendPoint(
            session_index=i + 1,
            date=session.date,
            kind=session.kind.value,
            session_profit_money=round_to(session_money, 2),
            session_profit_units=round_to(session_units, 1),
            window_size=len(window),
            rolling_bb_per_100=round_to(bb_per_100(window_units, window_hands), 2),
            rolling_avg_profit_money=round_to(safe_div(window_money, len(window)), 2),
            rolling_avg_profit_units=round_to(safe_div(window_units, len(cash_in_window)), 1),
            rolling_win_rate=round_to(win_rate(window), 1),
            cumulative_profit_money=round_to(cumulative_money, 2),
            cumulative_profit_units=round_to(cumulative_units, 1),
        ))

    return points
