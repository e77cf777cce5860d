"""
Session Use Case.

Write path for sessions: create, replace and delete. This is where the
money profit of a cash session is fixed, from its unit profit and the
unit value of its stakes, before the record reaches the store. Every
successful write invalidates the session cache.
"""

from __future__ import annotations

import dataclasses

from pokertrack.application.ports.session_cache import ISessionCache
from pokertrack.domain.entities.session import CashSession, Session, is_clock_time, is_iso_date
from pokertrack.domain.exceptions.domain_errors import SessionNotFoundError, ValidationError
from pokertrack.domain.repositories.session_repository import ISessionRepository
from pokertrack.domain.services.metrics import round_to
from pokertrack.domain.services.unit_converter import money_from_units
from pokertrack.shared.logging.logger import get_logger

logger = get_logger("application.session_usecase")

# Storage columns are Numeric(14, 2)
MONEY_LIMIT = 10 ** 12


def validate_session(session: Session) -> None:
    """
    Write-path checks for callers that bypass the HTTP schema.

    Raises:
        ValidationError: malformed date or start time, a negative
            count/amount, or money too large to store
    """
    if not is_iso_date(session.date):
        raise ValidationError("date must be YYYY-MM-DD", field="date", value=session.date)

    if session.start_time is not None and not is_clock_time(session.start_time):
        raise ValidationError("startTime must be HH:MM", field="startTime", value=session.start_time)

    if session.duration_minutes < 0:
        raise ValidationError("duration must be >= 0", field="duration", value=session.duration_minutes)

    if isinstance(session, CashSession):
        if session.hands_played < 0:
            raise ValidationError("hands must be >= 0", field="hands", value=session.hands_played)
        money = money_from_units(session.profit_units, session.stakes)
        if max(abs(session.profit_units), abs(money)) >= MONEY_LIMIT:
            raise ValidationError("profit is out of range", field="profitBB", value=session.profit_units)
    else:
        for name, value in (("buyIn", session.buy_in), ("cashOut", session.cash_out)):
            if value < 0:
                raise ValidationError(f"{name} must be >= 0", field=name, value=value)
            if value >= MONEY_LIMIT:
                raise ValidationError(f"{name} is out of range", field=name, value=value)


def with_money_profit(session: Session) -> Session:
    """Cash sessions get profit_money = profit_units × unit value(stakes)."""
    if isinstance(session, CashSession):
        return dataclasses.replace(
            session,
            profit_money=round_to(money_from_units(session.profit_units, session.stakes), 2),
        )
    return session


class SessionUseCase:

    def __init__(
        self,
        session_repository: ISessionRepository,
        session_cache: ISessionCache,
    ):
        self._repo = session_repository
        self._cache = session_cache

    async def create(self, session: Session) -> str:
        """
        Store a new session.

        Returns:
            The id assigned by the store
        """
        validate_session(session)
        session_id = await self._repo.add(with_money_profit(session))
        await self._cache.invalidate()
        logger.info("Session created | id=%s type=%s", session_id, session.kind.value)
        return session_id

    async def update(self, session_id: str, session: Session) -> None:
        """
        Replace a stored session.

        Raises:
            SessionNotFoundError: no session with that id
        """
        validate_session(session)
        updated = await self._repo.update(session_id, with_money_profit(session))
        if not updated:
            raise SessionNotFoundError(session_id)
        await self._cache.invalidate()
        logger.info("Session updated | id=%s", session_id)

    async def delete(self, session_id: str) -> None:
        """
        Raises:
            SessionNotFoundError: no session with that id
        """
        deleted = await self._repo.delete(session_id)
        if not deleted:
            raise SessionNotFoundError(session_id)
        await self._cache.invalidate()
        logger.info("Session deleted | id=%s", session_id)

    async def clear_cache(self) -> None:
        await self._cache.invalidate()
        logger.info("Session cache cleared on request")
