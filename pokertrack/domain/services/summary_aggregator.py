"""
PokerTrack - Summary Aggregator
=================================
One aggregate statistics record per session kind, plus a combined view,
over an already filtered collection.

CENTRAL PRINCIPLE:
  Sums are accumulated in a SINGLE O(n) pass. Derived ratios are computed
  afterwards with zero guards, and rounding is applied only when the
  output records are built.

CASH:
  bb/100          = units / hands * 100          (0 if no hands)
  hourly money    = money / minutes * 60         (0 if no minutes)
  hourly units    = units / minutes * 60
  win rate        = sessions with units > 0 / sessions * 100

TOURNAMENT:
  profit   = cash_outs - buy_ins
  ROI      = profit / buy_ins * 100              (0 if no buy-ins)
  ITM %    = sessions with cash_out > 0 / sessions * 100
  avg buy-in, win rate (cash_out - buy_in > 0)

COMBINED:
  profit   = cash money profit + tournament profit
  minutes  = cash minutes + tournament minutes
  hourly rate and win rate recomputed over the whole collection.
"""

from __future__ import annotations

from typing import Sequence

from pokertrack.domain.entities.session import CashSession, Session, TournamentSession
from pokertrack.domain.services.metrics import (
    bb_per_100,
    hourly_rate,
    itm_percent,
    round_to,
    roi,
    safe_div,
    win_rate,
)
from pokertrack.domain.value_objects.session_stats import (
    CashStats,
    CombinedStats,
    SummaryStats,
    TournamentStats,
)


def summarize(sessions: Sequence[Session]) -> SummaryStats:
    """
    Compute cash, tournament and combined statistics.

    Args:
        sessions: Filtered session collection (not mutated).

    Returns:
        SummaryStats. An empty input yields all-zero stats.
    """
    cash: list[CashSession] = []
    tournaments: list[TournamentSession] = []

    # ── Accumulators (single pass) ──────────────────────────────────
    total_units = 0.0
    total_money = 0.0
    total_hands = 0
    cash_minutes = 0

    total_buy_ins = 0.0
    total_cash_outs = 0.0
    tournament_minutes = 0

    for session in sessions:
        if isinstance(session, CashSession):
            cash.append(session)
            total_units += session.profit_units
            total_money += session.profit_money
            total_hands += session.hands_played
            cash_minutes += session.duration_minutes
        elif isinstance(session, TournamentSession):
            tournaments.append(session)
            total_buy_ins += session.buy_in
            total_cash_outs += session.cash_out
            tournament_minutes += session.duration_minutes

    tournament_profit = total_cash_outs - total_buy_ins
    combined_minutes = cash_minutes + tournament_minutes
    combined_money = total_money + tournament_profit

    cash_stats = CashStats(
        total_profit_units=round_to(total_units, 1),
        total_profit_money=round_to(total_money, 2),
        total_hands=total_hands,
        total_minutes=cash_minutes,
        total_hours=round_to(cash_minutes / 60, 1),
        bb_per_100=round_to(bb_per_100(total_units, total_hands), 2),
        hourly_rate_money=round_to(hourly_rate(total_money, cash_minutes), 2),
        hourly_rate_units=round_to(hourly_rate(total_units, cash_minutes), 1),
        win_rate=round_to(win_rate(cash), 1),
    )

    tournament_stats = TournamentStats(
        total_profit=round_to(tournament_profit, 2),
        total_buy_ins=round_to(total_buy_ins, 2),
        total_cash_outs=round_to(total_cash_outs, 2),
        total_minutes=tournament_minutes,
        total_hours=round_to(tournament_minutes / 60, 1),
        tournaments_played=len(tournaments),
        roi=round_to(roi(total_buy_ins, total_cash_outs), 1),
        itm_percent=round_to(itm_percent(tournaments), 1),
        avg_buy_in=round_to(safe_div(total_buy_ins, len(tournaments)), 2),
        win_rate=round_to(win_rate(tournaments), 1),
    )

    combined_stats = CombinedStats(
        total_profit_money=round_to(combined_money, 2),
        total_minutes=combined_minutes,
        total_hours=round_to(combined_minutes / 60, 1),
        hourly_rate_money=round_to(hourly_rate(combined_money, combined_minutes), 2),
        win_rate=round_to(win_rate(sessions), 1),
    )

    return SummaryStats(
        total_sessions=len(sessions),
        cash_sessions=len(cash),
        tournament_sessions=len(tournaments),
        cash=cash_stats,
        tournament=tournament_stats,
        combined=combined_stats,
    )
