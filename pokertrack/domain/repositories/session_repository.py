"""
PokerTrack – Domain Repository Interface: Session
===================================================
Abstract contract of the session store.

Any backend (MySQL, SQLite, in-memory) implements it. The analytics
engine never talks to it directly: use cases fetch a snapshot through
the cache and hand it to the engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from pokertrack.domain.entities.session import Session


class ISessionRepository(ABC):
    """
    Abstract session repository.

    ASYNC OPERATIONS:
    Every operation is async so it never blocks the event loop.
    """

    @abstractmethod
    async def find_all(self) -> List[Session]:
        """
        All sessions of the configured player.

        Returns:
            Sessions ordered by date DESC.
        """
        pass

    @abstractmethod
    async def find_by_id(self, session_id: str) -> Optional[Session]:
        """Session with that id, or None."""
        pass

    @abstractmethod
    async def add(self, session: Session) -> str:
        """
        Persist a new session.

        The ``id`` of the given session is ignored; the store assigns one.

        Returns:
            The new session id.
        """
        pass

    @abstractmethod
    async def update(self, session_id: str, session: Session) -> bool:
        """
        Replace an existing session.

        Returns:
            True if updated, False if no such session exists.
        """
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """
        Remove a session.

        Returns:
            True if deleted, False if no such session exists.
        """
        pass
