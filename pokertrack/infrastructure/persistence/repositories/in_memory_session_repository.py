"""
In-Memory Session Repository.

Dictionary-backed ISessionRepository for running without a database
(db_enabled=False) and for tests.

THREADING:
  Everything runs on one asyncio event loop. No locks needed.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List, Optional

from pokertrack.domain.entities.session import Session, generate_session_id
from pokertrack.domain.repositories.session_repository import ISessionRepository

logger = logging.getLogger("pokertrack.infrastructure.memory_repository")


class InMemorySessionRepository(ISessionRepository):

    def __init__(self, sessions: Optional[Iterable[Session]] = None) -> None:
        self._sessions: Dict[str, Session] = {}
        for session in sessions or ():
            session_id = session.id or generate_session_id()
            self._sessions[session_id] = dataclasses.replace(session, id=session_id)

    async def find_all(self) -> List[Session]:
        # Stable sort keeps insertion order among sessions of the same day
        return sorted(self._sessions.values(), key=lambda s: s.date, reverse=True)

    async def find_by_id(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    async def add(self, session: Session) -> str:
        new_id = generate_session_id()
        self._sessions[new_id] = dataclasses.replace(session, id=new_id)
        logger.debug("Session stored in memory: id=%s", new_id)
        return new_id

    async def update(self, session_id: str, session: Session) -> bool:
        if session_id not in self._sessions:
            return False
        self._sessions[session_id] = dataclasses.replace(session, id=session_id)
        return True

    async def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
