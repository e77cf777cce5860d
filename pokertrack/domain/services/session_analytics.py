"""
PokerTrack - Session Analytics Engine
=======================================
Facade over the filter and the aggregators.

    sessions + criteria ──▸ filter ──▸ summary
                                   ├─▸ duration buckets
                                   ├─▸ day-of-week buckets
                                   ├─▸ game type groups
                                   └─▸ trends

The aggregators are independent of each other: each consumes the same
filtered snapshot and allocates its own output. Nothing here holds state,
performs I/O or mutates its input, so calls may run in any order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pokertrack.domain.entities.session import Session
from pokertrack.domain.services.bucket_aggregators import (
    bucket_by_day_of_week,
    bucket_by_duration,
)
from pokertrack.domain.services.game_type_aggregator import (
    GameTypeGroup,
    group_by_game_type,
)
from pokertrack.domain.services.session_filter import filter_sessions
from pokertrack.domain.services.summary_aggregator import summarize
from pokertrack.domain.services.trend_computer import compute_trends
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria
from pokertrack.domain.value_objects.session_stats import (
    DayOfWeekBucket,
    DurationBucket,
    SummaryStats,
    TrendPoint,
)


class SessionAnalytics:
    """
    Stateless analytics over session snapshots.

    Every method accepts optional FilterCriteria and applies it first.
    """

    def filter(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[Session]:
        return filter_sessions(sessions, criteria)

    def summary(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
    ) -> SummaryStats:
        return summarize(filter_sessions(sessions, criteria))

    def by_duration(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
        boundaries: Optional[Sequence[int]] = None,
    ) -> List[DurationBucket]:
        return bucket_by_duration(filter_sessions(sessions, criteria), boundaries)

    def by_day_of_week(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[DayOfWeekBucket]:
        return bucket_by_day_of_week(filter_sessions(sessions, criteria))

    def by_game_type(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[GameTypeGroup]:
        return group_by_game_type(filter_sessions(sessions, criteria))

    def trends(
        self,
        sessions: Sequence[Session],
        criteria: Optional[FilterCriteria] = None,
        window_size: Optional[int] = None,
    ) -> List[TrendPoint]:
        return compute_trends(filter_sessions(sessions, criteria), window_size)
