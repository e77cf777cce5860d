"""
PokerTrack – Application DTO: Stats
=====================================
Response envelope shared by the session and stats endpoints:

    {
      "data": {...},
      "pagination": {...},        # session listing only
      "meta": {
        "totalSessions": 120,     # before filtering
        "filteredSessions": 42,
        "filters": {"from": "2024-01-01"},
        "cacheAgeSeconds": 12     # null when nothing cached
      }
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class MetaDTO:
    total_sessions: int
    filtered_sessions: int
    filters: Dict[str, Any] = field(default_factory=dict)
    cache_age_seconds: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSessions": self.total_sessions,
            "filteredSessions": self.filtered_sessions,
            "filters": dict(self.filters),
            "cacheAgeSeconds": self.cache_age_seconds,
        }


@dataclass
class PaginationDTO:
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
            "hasMore": self.has_more,
        }


@dataclass
class StatsResponseDTO:
    """Envelope returned by every read use case."""

    data: Any
    meta: MetaDTO
    pagination: Optional[PaginationDTO] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"data": self.data}
        if self.pagination is not None:
            body["pagination"] = self.pagination.to_dict()
        body["meta"] = self.meta.to_dict()
        return body
