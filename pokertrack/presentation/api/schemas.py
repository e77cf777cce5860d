"""
PokerTrack – API Schemas (Pydantic)
=====================================
Request validation for the session write endpoints.

Field names follow the JSON wire shape (camelCase); the model converts
to the domain variant through ``session_from_dict``.

Numeric bounds keep every value inside the storage columns:
Integer for counts, Numeric(14, 2) for money.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pokertrack.domain.entities.session import (
    Session,
    is_clock_time,
    is_iso_date,
    session_from_dict,
)

MAX_MINUTES = 1_000_000
MAX_HANDS = 10_000_000
MAX_AMOUNT = 1_000_000_000
MAX_UNITS = 100_000_000


class SessionCreate(BaseModel):
    """Body for POST /api/sessions and PUT /api/sessions/{id}."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Literal["cash", "tournament"]
    date: str = Field(..., description="YYYY-MM-DD")
    duration: int = Field(default=0, ge=0, le=MAX_MINUTES, description="Minutes")
    gameType: Optional[str] = Field(default=None, max_length=64)
    location: Optional[str] = Field(default=None, max_length=128)
    notes: Optional[str] = Field(default=None, max_length=2000)
    startTime: Optional[str] = Field(default=None, description="HH:MM")

    # Cash
    stakes: Optional[str] = Field(default=None, max_length=32)
    profitBB: float = Field(default=0.0, ge=-MAX_UNITS, le=MAX_UNITS)
    hands: int = Field(default=0, ge=0, le=MAX_HANDS)

    # Tournament
    buyIn: float = Field(default=0.0, ge=0, le=MAX_AMOUNT)
    cashOut: float = Field(default=0.0, ge=0, le=MAX_AMOUNT)

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        if not is_iso_date(value):
            raise ValueError("date must be YYYY-MM-DD")
        return value

    @field_validator("startTime")
    @classmethod
    def _check_start_time(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        if not is_clock_time(value):
            raise ValueError("startTime must be HH:MM")
        return value

    def to_entity(self) -> Session:
        """Domain session without id; the store assigns it."""
        return session_from_dict(self.model_dump())
