"""
Stats Use Case.

Reads the session snapshot through the cache, applies the caller's
filter and runs one analytics operation, wrapping the result in the
response envelope.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from pokertrack.application.dto.stats_dto import MetaDTO, PaginationDTO, StatsResponseDTO
from pokertrack.application.ports.session_cache import ISessionCache
from pokertrack.domain.entities.session import Session
from pokertrack.domain.services.session_analytics import SessionAnalytics
from pokertrack.domain.services.trend_computer import resolve_window_size
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria


class StatsUseCase:
    """
    Use case: compute statistics over the stored sessions.

    Every call works on one immutable snapshot from the cache, so all
    numbers in a response describe the same set of sessions.
    """

    def __init__(
        self,
        session_cache: ISessionCache,
        analytics: Optional[SessionAnalytics] = None,
    ):
        self._cache = session_cache
        self._analytics = analytics or SessionAnalytics()

    # ════════════════════════════════════════════════════════════════
    #  HELPERS
    # ════════════════════════════════════════════════════════════════

    async def _snapshot(
        self, criteria: Optional[FilterCriteria],
    ) -> Tuple[Tuple[Session, ...], List[Session]]:
        all_sessions = await self._cache.get_sessions()
        return all_sessions, self._analytics.filter(all_sessions, criteria)

    def _meta(
        self,
        all_sessions: Sequence[Session],
        filtered: Sequence[Session],
        criteria: Optional[FilterCriteria],
    ) -> MetaDTO:
        age = self._cache.age_seconds()
        return MetaDTO(
            total_sessions=len(all_sessions),
            filtered_sessions=len(filtered),
            filters=criteria.to_dict() if criteria else {},
            cache_age_seconds=int(age + 0.5) if age is not None else None,
        )

    # ════════════════════════════════════════════════════════════════
    #  SESSIONS
    # ════════════════════════════════════════════════════════════════

    async def list_sessions(
        self,
        criteria: Optional[FilterCriteria] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> StatsResponseDTO:
        """
        Filtered sessions, most recent first, one page at a time.

        Args:
            criteria: Filter (optional)
            limit: Page size
            offset: Sessions to skip

        Returns:
            Envelope with data, pagination and meta
        """
        all_sessions, filtered = await self._snapshot(criteria)
        ordered = sorted(filtered, key=lambda s: s.date, reverse=True)
        page = ordered[offset: offset + limit]

        return StatsResponseDTO(
            data=[s.to_dict() for s in page],
            pagination=PaginationDTO(total=len(filtered), limit=limit, offset=offset),
            meta=self._meta(all_sessions, filtered, criteria),
        )

    # ════════════════════════════════════════════════════════════════
    #  STATS
    # ════════════════════════════════════════════════════════════════

    async def get_summary(self, criteria: Optional[FilterCriteria] = None) -> StatsResponseDTO:
        all_sessions, filtered = await self._snapshot(criteria)
        summary = self._analytics.summary(filtered)
        return StatsResponseDTO(
            data=summary.to_dict(),
            meta=self._meta(all_sessions, filtered, criteria),
        )

    async def get_by_duration(
        self,
        criteria: Optional[FilterCriteria] = None,
        boundaries: Optional[Sequence[int]] = None,
    ) -> StatsResponseDTO:
        all_sessions, filtered = await self._snapshot(criteria)
        buckets = self._analytics.by_duration(filtered, boundaries=boundaries)
        return StatsResponseDTO(
            data={"buckets": [b.to_dict() for b in buckets]},
            meta=self._meta(all_sessions, filtered, criteria),
        )

    async def get_by_game_type(self, criteria: Optional[FilterCriteria] = None) -> StatsResponseDTO:
        all_sessions, filtered = await self._snapshot(criteria)
        groups = self._analytics.by_game_type(filtered)
        return StatsResponseDTO(
            data={"groups": [g.to_dict() for g in groups]},
            meta=self._meta(all_sessions, filtered, criteria),
        )

    async def get_by_day(self, criteria: Optional[FilterCriteria] = None) -> StatsResponseDTO:
        all_sessions, filtered = await self._snapshot(criteria)
        days = self._analytics.by_day_of_week(filtered)
        return StatsResponseDTO(
            data={"days": [d.to_dict() for d in days]},
            meta=self._meta(all_sessions, filtered, criteria),
        )

    async def get_trends(
        self,
        criteria: Optional[FilterCriteria] = None,
        window_size: Optional[int] = None,
    ) -> StatsResponseDTO:
        """None or < 1 falls back to the default window; data reports the size used."""
        all_sessions, filtered = await self._snapshot(criteria)
        size = resolve_window_size(window_size)
        points = self._analytics.trends(filtered, window_size=size)
        return StatsResponseDTO(
            data={
                "windowSize": size,
                "dataPoints": [p.to_dict() for p in points],
            },
            meta=self._meta(all_sessions, filtered, criteria),
        )
