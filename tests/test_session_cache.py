"""
Unit tests for the TTL session snapshot cache
"""

import asyncio

import pytest

from pokertrack.infrastructure.cache.session_cache import TTLSessionCache
from pokertrack.infrastructure.persistence.repositories.in_memory_session_repository import (
    InMemorySessionRepository,
)

from conftest import cash


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class CountingRepository(InMemorySessionRepository):
    """In-memory store that counts find_all calls and can stall them."""

    def __init__(self, sessions=None, delay=0.0):
        super().__init__(sessions)
        self.fetches = 0
        self.delay = delay

    async def find_all(self):
        self.fetches += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return await super().find_all()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository():
    return CountingRepository([cash("a", "2024-01-01"), cash("b", "2024-01-02")])


@pytest.mark.asyncio
async def test_second_read_is_served_from_cache(repository, clock):
    cache = TTLSessionCache(repository, ttl_seconds=60, clock=clock)

    first = await cache.get_sessions()
    second = await cache.get_sessions()

    assert repository.fetches == 1
    assert first is second
    assert isinstance(first, tuple)
    assert cache.hits == 1
    assert cache.misses == 1


@pytest.mark.asyncio
async def test_expired_snapshot_is_refetched(repository, clock):
    cache = TTLSessionCache(repository, ttl_seconds=60, clock=clock)
    await cache.get_sessions()

    clock.now += 60
    await cache.get_sessions()
    assert repository.fetches == 1

    clock.now += 1
    await cache.get_sessions()
    assert repository.fetches == 2


@pytest.mark.asyncio
async def test_invalidate_forces_refetch(repository, clock):
    cache = TTLSessionCache(repository, ttl_seconds=60, clock=clock)
    await cache.get_sessions()

    await repository.add(cash(date="2024-01-03"))
    await cache.invalidate()
    sessions = await cache.get_sessions()

    assert repository.fetches == 2
    assert len(sessions) == 3


@pytest.mark.asyncio
async def test_age_seconds(repository, clock):
    cache = TTLSessionCache(repository, ttl_seconds=60, clock=clock)
    assert cache.age_seconds() is None

    await cache.get_sessions()
    clock.now += 12.5

    assert cache.age_seconds() == 12.5

    await cache.invalidate()
    assert cache.age_seconds() is None


@pytest.mark.asyncio
async def test_concurrent_readers_share_one_fetch(clock):
    repository = CountingRepository([cash("a")], delay=0.01)
    cache = TTLSessionCache(repository, ttl_seconds=60, clock=clock)

    results = await asyncio.gather(*(cache.get_sessions() for _ in range(10)))

    assert repository.fetches == 1
    assert all(r is results[0] for r in results)


@pytest.mark.asyncio
async def test_stats(repository, clock):
    cache = TTLSessionCache(repository, ttl_seconds=30, clock=clock)
    await cache.get_sessions()

    assert cache.stats == {"ttl_seconds": 30, "cached": True, "hits": 0, "misses": 1}
