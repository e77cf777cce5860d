"""
PokerTrack – Domain Service: Metric Formulas
==============================================
Small pure formulas shared by every aggregator. Each one guards its own
division by zero and returns 0.0 instead of raising or producing NaN.

══════════════════════════════════════════════════════════════════
  FORMULAS (quick reference)
══════════════════════════════════════════════════════════════════

  bb/100      = total_units / total_hands * 100
  hourly rate = total / total_minutes * 60
  ROI         = (cash_outs - buy_ins) / buy_ins * 100
  win rate    = winning_sessions / sessions * 100
  ITM %       = sessions with cash_out > 0 / sessions * 100

══════════════════════════════════════════════════════════════════
"""

from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence

from pokertrack.domain.entities.session import Session, TournamentSession


def round_to(value: float, places: int) -> float:
    """
    Round half away from zero on the decimal representation.

    Negative halves go down (-2.5 → -3), unlike JavaScript's Math.round
    which sends every half toward +∞ (-2.5 → -2). Positive values agree.
    Works at any magnitude; inf and NaN come back unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(str(value))
    quantum = Decimal(1).scaleb(-places)
    # Precision must cover every integer digit plus the kept places
    context = Context(prec=max(28, exact.adjusted() + places + 2))
    # + 0.0 folds -0.0 into 0.0
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context)) + 0.0


def round_minutes(value: float) -> int:
    return int(round_to(value, 0))


def safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def bb_per_100(total_units: float, total_hands: int) -> float:
    return safe_div(total_units, total_hands) * 100


def hourly_rate(total_profit: float, total_minutes: int) -> float:
    return safe_div(total_profit, total_minutes) * 60


def roi(total_buy_ins: float, total_cash_outs: float) -> float:
    return safe_div(total_cash_outs - total_buy_ins, total_buy_ins) * 100


def win_rate(sessions: Sequence[Session]) -> float:
    """Share of sessions with positive profit, as a percentage."""
    if not sessions:
        return 0.0
    winning = sum(1 for s in sessions if s.is_winning)
    return winning / len(sessions) * 100


def itm_percent(tournaments: Sequence[TournamentSession]) -> float:
    if not tournaments:
        return 0.0
    cashed = sum(1 for t in tournaments if t.cash_out > 0)
    return cashed / len(tournaments) * 100


def total_minutes(sessions: Iterable[Session]) -> int:
    return sum(s.duration_minutes for s in sessions)
