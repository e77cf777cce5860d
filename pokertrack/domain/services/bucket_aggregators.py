"""
PokerTrack - Bucket Aggregators (duration, day of week)
=========================================================
Partition a filtered collection along one dimension and compute the
summary-style metrics per partition.

DURATION BUCKETS:
  Boundaries b0 < b1 < ... < bk open the half-open ranges
      [b0, b1), [b1, b2), ..., [bk, inf)
  A session goes to the bucket with the GREATEST lower bound that does
  not exceed its duration (bisect_right over the lower bounds).

  Known quirk: a duration below every boundary matches no bucket and
  the session is dropped. Boundaries starting at 0 cover everything.

DAY OF WEEK:
  Seven buckets, Sunday first. The weekday is taken from the calendar
  date pinned to 12:00 UTC so the day never shifts across a timezone
  boundary. Buckets also report the mean starting hour of sessions that
  carry a start time.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from pokertrack.domain.entities.session import CashSession, Session
from pokertrack.domain.services.metrics import (
    bb_per_100,
    round_minutes,
    round_to,
    safe_div,
    total_minutes,
    win_rate,
)
from pokertrack.domain.value_objects.session_stats import (
    BucketMetrics,
    DayOfWeekBucket,
    DurationBucket,
    TimeOfDay,
)

logger = logging.getLogger("pokertrack.domain.buckets")

DEFAULT_DURATION_BOUNDARIES = (0, 30, 60, 120, 180, 240)

DAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


def bucket_metrics(sessions: Sequence[Session]) -> BucketMetrics:
    """Metrics for one partition. Units and hands come from cash sessions only."""
    cash = [s for s in sessions if isinstance(s, CashSession)]

    units = sum(s.profit_units for s in cash)
    money = sum(s.money_profit for s in sessions)
    hands = sum(s.hands_played for s in cash)
    minutes = total_minutes(sessions)

    return BucketMetrics(
        sessions=len(sessions),
        cash_sessions=len(cash),
        total_profit_units=round_to(units, 1),
        total_profit_money=round_to(money, 2),
        avg_profit_units=round_to(safe_div(units, len(cash)), 1),
        avg_profit_money=round_to(safe_div(money, len(sessions)), 2),
        total_hands=hands,
        bb_per_100=round_to(bb_per_100(units, hands), 2),
        total_hours=round_to(minutes / 60, 1),
        avg_duration_minutes=round_minutes(safe_div(minutes, len(sessions))),
        win_rate=round_to(win_rate(sessions), 1),
    )


# ════════════════════════════════════════════════════════════════
#  DURATION
# ════════════════════════════════════════════════════════════════

def resolve_boundaries(boundaries: Optional[Sequence[int]]) -> List[int]:
    """Sorted copy of the caller's boundaries, or the defaults if < 2 given."""
    if not boundaries or len(boundaries) < 2:
        return list(DEFAULT_DURATION_BOUNDARIES)
    return sorted(boundaries)


def find_bucket_index(lower_bounds: Sequence[int], duration: int) -> Optional[int]:
    """
    Index of the last lower bound <= duration.

    Returns None when the duration is below every bound.
    """
    index = bisect_right(lower_bounds, duration) - 1
    if index < 0:
        return None
    return index


def _range_label(low: int, high: Optional[int]) -> str:
    if high is None:
        return f"{low}min+"
    return f"{low}-{high}min"


def bucket_by_duration(
    sessions: Sequence[Session],
    boundaries: Optional[Sequence[int]] = None,
) -> List[DurationBucket]:
    """
    Bucket sessions by duration.

    Args:
        sessions: Filtered session collection (not mutated).
        boundaries: Lower bounds in minutes, any order. Fewer than two
            values (or None) selects DEFAULT_DURATION_BOUNDARIES.

    Returns:
        One DurationBucket per boundary, ascending.
    """
    bounds = resolve_boundaries(boundaries)
    members: List[List[Session]] = [[] for _ in bounds]

    for session in sessions:
        index = find_bucket_index(bounds, session.duration_minutes)
        if index is None:
            logger.debug(
                "Session below every duration boundary dropped | id=%s duration=%d min=%d",
                session.id, session.duration_minutes, bounds[0],
            )
            continue
        members[index].append(session)

    buckets = []
    for i, low in enumerate(bounds):
        high = bounds[i + 1] if i < len(bounds) - 1 else None
        buckets.append(DurationBucket(
            range_label=_range_label(low, high),
            min_minutes=low,
            max_minutes=high,
            metrics=bucket_metrics(members[i]),
        ))
    return buckets


# ════════════════════════════════════════════════════════════════
#  DAY OF WEEK
# ════════════════════════════════════════════════════════════════

def day_index(session_date: str) -> int:
    """
    Sunday-first weekday index (0..6) of a YYYY-MM-DD date.

    Raises:
        ValueError: the date cannot be parsed.
    """
    moment = datetime.strptime(session_date, "%Y-%m-%d").replace(
        hour=12, tzinfo=timezone.utc,
    )
    # datetime.weekday(): Monday = 0 ... Sunday = 6
    return (moment.weekday() + 1) % 7


def start_hour(start_time: Optional[str]) -> Optional[int]:
    """Hour component of an HH:MM start time, None if absent or malformed."""
    if not start_time:
        return None
    head = start_time.split(":", 1)[0].strip()
    try:
        return int(head)
    except ValueError:
        return None


def _time_of_day(sessions: Sequence[Session]) -> Optional[TimeOfDay]:
    hours = [h for h in (start_hour(s.start_time) for s in sessions) if h is not None]
    if not hours:
        return None
    return TimeOfDay(
        sample_size=len(hours),
        avg_start_hour=round_to(sum(hours) / len(hours), 1),
    )


def bucket_by_day_of_week(sessions: Sequence[Session]) -> List[DayOfWeekBucket]:
    """Seven weekday buckets in fixed order, Sunday first."""
    members: List[List[Session]] = [[] for _ in DAY_NAMES]

    for session in sessions:
        try:
            index = day_index(session.date)
        except (TypeError, ValueError):
            logger.warning(
                "Session with unparseable date skipped | id=%s date=%r",
                session.id, session.date,
            )
            continue
        members[index].append(session)

    return [
        DayOfWeekBucket(
            day=name,
            day_index=i,
            metrics=bucket_metrics(members[i]),
            time_of_day=_time_of_day(members[i]),
        )
        for i, name in enumerate(DAY_NAMES)
    ]
