"""
PokerTrack – TTL Session Cache
================================
In-memory snapshot of all sessions with a time-to-live.

DESIGN:
  - The snapshot is a tuple: callers cannot mutate what others read.
  - An asyncio.Lock serialises refills, so a burst of requests on an
    expired cache triggers a single store fetch.
  - invalidate() takes the same lock, so a read that starts after a
    write's invalidation always refetches.
  - Monotonic clock; wall-clock jumps do not extend or shorten the TTL.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional, Tuple

from pokertrack.application.ports.session_cache import ISessionCache
from pokertrack.domain.entities.session import Session
from pokertrack.domain.repositories.session_repository import ISessionRepository
from pokertrack.shared.logging.logger import get_logger

logger = get_logger("infrastructure.session_cache")

DEFAULT_TTL_SECONDS = 300.0


class TTLSessionCache(ISessionCache):

    def __init__(
        self,
        repository: ISessionRepository,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._repository = repository
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = asyncio.Lock()

        self._snapshot: Optional[Tuple[Session, ...]] = None
        self._stored_at: float = 0.0

        # Counters for /api/health and debugging
        self.hits = 0
        self.misses = 0

    def _is_fresh(self) -> bool:
        if self._snapshot is None:
            return False
        return (self._clock() - self._stored_at) <= self._ttl

    async def get_sessions(self) -> Tuple[Session, ...]:
        if self._is_fresh():
            self.hits += 1
            return self._snapshot

        async with self._lock:
            # Another waiter may have refilled while we queued on the lock
            if self._is_fresh():
                self.hits += 1
                return self._snapshot

            self.misses += 1
            sessions = await self._repository.find_all()
            self._snapshot = tuple(sessions)
            self._stored_at = self._clock()
            logger.debug("Session cache refilled | sessions=%d", len(self._snapshot))
            return self._snapshot

    async def invalidate(self) -> None:
        async with self._lock:
            self._snapshot = None
            self._stored_at = 0.0
        logger.debug("Session cache invalidated")

    def age_seconds(self) -> Optional[float]:
        if self._snapshot is None:
            return None
        return self._clock() - self._stored_at

    @property
    def stats(self) -> dict:
        return {
            "ttl_seconds": self._ttl,
            "cached": self._snapshot is not None,
            "hits": self.hits,
            "misses": self.misses,
        }
