"""
PokerTrack – SQLAlchemy ORM Base Configuration
================================================
Base configuration for every ORM model and the async engine manager.

Clean Architecture: this is the concrete database infrastructure.
Repositories depend on interfaces, not on this module.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pokertrack.shared.config.settings import Settings
from pokertrack.shared.logging.logger import get_logger

logger = get_logger("infrastructure.database")

# ─── Naming Convention (consistent migrations) ─────────────────────────
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all ORM models; constraint names follow NAMING_CONVENTION."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class DatabaseManager:
    """
    Async engine + session factory holder.

    USAGE:
        db = DatabaseManager(settings)
        await db.initialize()  # FastAPI startup

        async with db.session_factory() as session:
            result = await session.execute(...)

        await db.close()  # FastAPI shutdown
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        """Explicit URL from settings, else built from the MySQL fields."""
        s = self._settings
        if s.database_url:
            return s.database_url
        return (
            f"mysql+aiomysql://{s.db_user}:{s.db_password}"
            f"@{s.db_host}:{s.db_port}/{s.db_name}"
            f"?charset=utf8mb4"
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("DatabaseManager not initialised. Call initialize() first.")
        return self._session_factory

    async def initialize(self, create_schema: bool = False) -> None:
        """Create the async engine and session factory."""
        if self._engine is not None:
            return

        s = self._settings
        url = self.database_url
        engine_kwargs = {"echo": s.db_echo, "pool_pre_ping": True}
        if url.startswith("mysql"):
            engine_kwargs.update(
                pool_size=s.db_pool_size,
                max_overflow=s.db_max_overflow,
                pool_recycle=3600,
            )
        self._engine = create_async_engine(url, **engine_kwargs)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        if create_schema:
            # Register models on Base.metadata before create_all
            from pokertrack.infrastructure.persistence.models import SessionModel  # noqa: F401

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database schema ensured")

    async def close(self) -> None:
        """Dispose the engine and every pooled connection."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

