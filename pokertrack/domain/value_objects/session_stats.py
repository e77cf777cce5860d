"""
PokerTrack - Session Statistics (Value Objects)
=================================================
Immutable output records produced by the analytics engine.

DESIGN PRINCIPLE:
  Pure VALUE OBJECTS: no identity, no mutation, no business logic.
  They carry numbers that were already computed and rounded by the
  aggregators. Rounding happens once, when a record is built, never on
  intermediate sums.

WIRE SHAPE:
  ``to_dict()`` returns plain JSON-ready data with camelCase keys.
  "BB" keys hold unit-denominated values, "Dollars" keys money values.

ROUNDING (half away from zero):
  money            2 places
  units            1 place
  bbPer100         2 places
  hourly money     2 places, hourly units 1 place
  winRate/roi/itm  1 place
  totalHours       1 place
  avgDuration      whole minutes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ── Summary ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CashStats:
    total_profit_units: float = 0.0
    total_profit_money: float = 0.0
    total_hands: int = 0
    total_minutes: int = 0
    total_hours: float = 0.0
    bb_per_100: float = 0.0
    hourly_rate_money: float = 0.0
    hourly_rate_units: float = 0.0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalProfitBB": self.total_profit_units,
            "totalProfitDollars": self.total_profit_money,
            "totalHands": self.total_hands,
            "totalMinutes": self.total_minutes,
            "totalHours": self.total_hours,
            "bbPer100": self.bb_per_100,
            "hourlyRateDollars": self.hourly_rate_money,
            "hourlyRateBB": self.hourly_rate_units,
            "winRate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class TournamentStats:
    total_profit: float = 0.0
    total_buy_ins: float = 0.0
    total_cash_outs: float = 0.0
    total_minutes: int = 0
    total_hours: float = 0.0
    tournaments_played: int = 0
    roi: float = 0.0
    itm_percent: float = 0.0
    avg_buy_in: float = 0.0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalProfit": self.total_profit,
            "totalBuyIns": self.total_buy_ins,
            "totalCashOuts": self.total_cash_outs,
            "totalMinutes": self.total_minutes,
            "totalHours": self.total_hours,
            "tournamentsPlayed": self.tournaments_played,
            "roi": self.roi,
            "itmPercent": self.itm_percent,
            "avgBuyIn": self.avg_buy_in,
            "winRate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class CombinedStats:
    total_profit_money: float = 0.0
    total_minutes: int = 0
    total_hours: float = 0.0
    hourly_rate_money: float = 0.0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "totalProfitDollars": self.total_profit_money,
            "totalMinutes": self.total_minutes,
            "totalHours": self.total_hours,
            "hourlyRateDollars": self.hourly_rate_money,
            "winRate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class SummaryStats:
    total_sessions: int = 0
    cash_sessions: int = 0
    tournament_sessions: int = 0
    cash: CashStats = CashStats()
    tournament: TournamentStats = TournamentStats()
    combined: CombinedStats = CombinedStats()

    def to_dict(self) -> dict:
        return {
            "totalSessions": self.total_sessions,
            "cashSessions": self.cash_sessions,
            "tournamentSessions": self.tournament_sessions,
            "cash": self.cash.to_dict(),
            "tournament": self.tournament.to_dict(),
            "combined": self.combined.to_dict(),
        }


# ── Buckets ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class BucketMetrics:
    """Metrics shared by duration and weekday buckets."""

    sessions: int = 0
    cash_sessions: int = 0
    total_profit_units: float = 0.0
    total_profit_money: float = 0.0
    avg_profit_units: float = 0.0     # over cash sessions
    avg_profit_money: float = 0.0     # over all sessions
    total_hands: int = 0
    bb_per_100: float = 0.0
    total_hours: float = 0.0
    avg_duration_minutes: int = 0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "sessions": self.sessions,
            "cashSessions": self.cash_sessions,
            "totalProfitBB": self.total_profit_units,
            "totalProfitDollars": self.total_profit_money,
            "avgProfitBB": self.avg_profit_units,
            "avgProfitDollars": self.avg_profit_money,
            "totalHands": self.total_hands,
            "bbPer100": self.bb_per_100,
            "totalHours": self.total_hours,
            "avgDurationMinutes": self.avg_duration_minutes,
            "winRate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class DurationBucket:
    range_label: str
    min_minutes: int
    max_minutes: Optional[int]        # None = unbounded
    metrics: BucketMetrics = BucketMetrics()

    def to_dict(self) -> dict:
        return {
            "range": self.range_label,
            "minMinutes": self.min_minutes,
            "maxMinutes": self.max_minutes,
            **self.metrics.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    sample_size: int
    avg_start_hour: float

    def to_dict(self) -> dict:
        return {
            "sampleSize": self.sample_size,
            "avgStartHour": self.avg_start_hour,
        }


@dataclass(frozen=True, slots=True)
class DayOfWeekBucket:
    day: str
    day_index: int                    # 0 = Sunday
    metrics: BucketMetrics = BucketMetrics()
    time_of_day: Optional[TimeOfDay] = None

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "dayIndex": self.day_index,
            **self.metrics.to_dict(),
            "timeOfDay": self.time_of_day.to_dict() if self.time_of_day else None,
        }


# ── Game type / stakes groups ──────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CashGroup:
    game_type: str
    stakes: str
    sessions: int = 0
    total_profit_units: float = 0.0
    total_profit_money: float = 0.0
    avg_profit_units: float = 0.0
    avg_profit_money: float = 0.0
    total_hands: int = 0
    bb_per_100: float = 0.0
    total_hours: float = 0.0
    avg_duration_minutes: int = 0
    hourly_rate_money: float = 0.0
    hourly_rate_units: float = 0.0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "type": "cash",
            "gameType": self.game_type,
            "stakes": self.stakes,
            "sessions": self.sessions,
            "totalProfitBB": self.total_profit_units,
            "totalProfitDollars": self.total_profit_money,
            "avgProfitBB": self.avg_profit_units,
            "avgProfitDollars": self.avg_profit_money,
            "totalHands": self.total_hands,
            "bbPer100": self.bb_per_100,
            "totalHours": self.total_hours,
            "avgDurationMinutes": self.avg_duration_minutes,
            "hourlyRateDollars": self.hourly_rate_money,
            "hourlyRateBB": self.hourly_rate_units,
            "winRate": self.win_rate,
        }


@dataclass(frozen=True, slots=True)
class TournamentGroup:
    game_type: str
    sessions: int = 0
    total_profit: float = 0.0
    total_buy_ins: float = 0.0
    total_cash_outs: float = 0.0
    avg_buy_in: float = 0.0
    roi: float = 0.0
    itm_percent: float = 0.0
    total_hours: float = 0.0
    avg_duration_minutes: int = 0
    win_rate: float = 0.0

    def to_dict(self) -> dict:
        return {
            "type": "tournament",
            "gameType": self.game_type,
            "stakes": None,
            "sessions": self.sessions,
            "totalProfit": self.total_profit,
            "totalBuyIns": self.total_buy_ins,
            "totalCashOuts": self.total_cash_outs,
            "avgBuyIn": self.avg_buy_in,
            "roi": self.roi,
            "itmPercent": self.itm_percent,
            "totalHours": self.total_hours,
            "avgDurationMinutes": self.avg_duration_minutes,
            "winRate": self.win_rate,
        }


# ── Trends ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TrendPoint:
    session_index: int                # 1-based, chronological
    date: str
    kind: str
    session_profit_money: float
    session_profit_units: float
    window_size: int
    rolling_bb_per_100: float
    rolling_avg_profit_money: float
    rolling_avg_profit_units: float
    rolling_win_rate: float
    cumulative_profit_money: float
    cumulative_profit_units: float

    def to_dict(self) -> dict:
        return {
            "sessionIndex": self.session_index,
            "date": self.date,
            "type": self.kind,
            "sessionProfitDollars": self.session_profit_money,
            "sessionProfitBB": self.session_profit_units,
            "windowSize": self.window_size,
            "rollingBBPer100": self.rolling_bb_per_100,
            "rollingAvgProfitDollars": self.rolling_avg_profit_money,
            "rollingAvgProfitBB": self.rolling_avg_profit_units,
            "rollingWinRate": self.rolling_win_rate,
            "cumulativeProfitDollars": self.cumulative_profit_money,
            "cumulativeProfitBB": self.cumulative_profit_units,
        }
