"""
PokerTrack – Application Port: Session Cache
==============================================
Read-through snapshot of every stored session.

Use cases read sessions only through this port so that several stats
endpoints hit the store once per TTL. Writes call ``invalidate()`` so
the next read observes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from pokertrack.domain.entities.session import Session


class ISessionCache(ABC):

    @abstractmethod
    async def get_sessions(self) -> Tuple[Session, ...]:
        """
        Current snapshot, fetched from the store when missing or expired.

        Concurrent callers reading an unexpired snapshot observe the
        same tuple.
        """
        pass

    @abstractmethod
    async def invalidate(self) -> None:
        """Drop the snapshot; the next read refetches."""
        pass

    @abstractmethod
    def age_seconds(self) -> Optional[float]:
        """Age of the current snapshot, None if there is none."""
        pass
