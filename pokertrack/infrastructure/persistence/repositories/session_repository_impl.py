"""
Session Repository Implementation.

Concrete session repository on SQLAlchemy async.
Implements the domain ISessionRepository interface.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pokertrack.domain.entities.session import Session, generate_session_id
from pokertrack.domain.repositories.session_repository import ISessionRepository
from pokertrack.infrastructure.persistence.models import SessionModel
from pokertrack.infrastructure.persistence.mappers.session_mapper import SessionMapper

logger = logging.getLogger("pokertrack.infrastructure.session_repository")


class SessionRepositoryImpl(ISessionRepository):
    """
    Async session repository.

    Each operation opens its own unit of work from the session factory
    and commits it, so one repository instance is safe to share across
    requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._mapper = SessionMapper()

    # ════════════════════════════════════════════════════════════════
    #  READS
    # ════════════════════════════════════════════════════════════════

    async def find_all(self) -> List[Session]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(SessionModel).order_by(desc(SessionModel.date), SessionModel.id)
            )
            models = result.scalars().all()

        logger.debug("Sessions loaded: %d", len(models))
        return [self._mapper.to_entity(m) for m in models]

    async def find_by_id(self, session_id: str) -> Optional[Session]:
        async with self._session_factory() as db:
            model = await db.get(SessionModel, session_id)
        if model is None:
            return None
        return self._mapper.to_entity(model)

    # ════════════════════════════════════════════════════════════════
    #  WRITES
    # ════════════════════════════════════════════════════════════════

    async def add(self, session: Session) -> str:
        new_id = generate_session_id()
        stored = dataclasses.replace(session, id=new_id)

        async with self._session_factory() as db:
            db.add(SessionModel(**self._mapper.to_model(stored)))
            await db.commit()

        logger.info("Session saved: id=%s type=%s date=%s", new_id, stored.kind.value, stored.date)
        return new_id

    async def update(self, session_id: str, session: Session) -> bool:
        async with self._session_factory() as db:
            model = await db.get(SessionModel, session_id)
            if model is None:
                return False

            values = self._mapper.to_model(dataclasses.replace(session, id=session_id))
            for column, value in values.items():
                setattr(model, column, value)
            await db.commit()

        logger.info("Session updated: id=%s", session_id)
        return True

    async def delete(self, session_id: str) -> bool:
        async with self._session_factory() as db:
            model = await db.get(SessionModel, session_id)
            if model is None:
                return False
            await db.delete(model)
            await db.commit()

        logger.info("Session deleted: id=%s", session_id)
        return True
