"""
Pytest configuration and fixtures for PokerTrack tests
"""

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pokertrack.domain.entities.session import CashSession, TournamentSession
from pokertrack.infrastructure.persistence.database import Base
from pokertrack.infrastructure.persistence.models import SessionModel  # noqa: F401
from pokertrack.infrastructure.persistence.repositories.in_memory_session_repository import (
    InMemorySessionRepository,
)


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

API_KEY = "test-api-key"


def cash(session_id="", date="2024-01-01", **kwargs) -> CashSession:
    """Cash session factory with sensible defaults."""
    return CashSession(id=session_id, date=date, **kwargs)


def tournament(session_id="", date="2024-01-01", **kwargs) -> TournamentSession:
    return TournamentSession(id=session_id, date=date, **kwargs)


@pytest.fixture
def two_cash_sessions():
    """The reference pair: +10 BB then -4 BB at NL50, 100 hands each."""
    return [
        cash("c1", "2024-01-01", stakes="NL50", profit_units=10, profit_money=5.0, hands_played=100),
        cash("c2", "2024-01-02", stakes="NL50", profit_units=-4, profit_money=-2.0, hands_played=100),
    ]


@pytest.fixture
def mixed_sessions():
    """Cash and tournament sessions over one week of January 2024."""
    return [
        cash("c1", "2024-01-01", duration_minutes=120, game_type="NLH", stakes="NL50",
             profit_units=40, profit_money=20.0, hands_played=300, start_time="19:30"),
        cash("c2", "2024-01-03", duration_minutes=45, game_type="NLH", stakes="NL50",
             profit_units=-20, profit_money=-10.0, hands_played=100, start_time="21:00"),
        cash("c3", "2024-01-05", duration_minutes=200, game_type="PLO", stakes="PLO100",
             profit_units=15, profit_money=15.0, hands_played=250),
        cash("c4", "2024-01-06", duration_minutes=0, stakes=None,
             profit_units=0, profit_money=0.0, hands_played=0),
        tournament("t1", "2024-01-02", duration_minutes=300, buy_in=50, cash_out=0),
        tournament("t2", "2024-01-06", duration_minutes=240, game_type="MTT", buy_in=50,
                   cash_out=180, start_time="14:00"),
        tournament("t3", "2024-01-07", duration_minutes=25, game_type="Sit&Go", buy_in=20,
                   cash_out=20),
    ]


@pytest.fixture
def memory_repository(mixed_sessions):
    return InMemorySessionRepository(mixed_sessions)


@pytest.fixture(scope="function")
async def test_db_engine():
    """
    Create test database engine
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def session_factory(test_db_engine) -> AsyncGenerator[async_sessionmaker, None]:
    """
    Session factory bound to the test engine
    """
    yield async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)
