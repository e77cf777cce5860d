"""
PokerTrack – Application Layer
================================
Use cases and orchestration.

This package contains:
- use_cases/: stats reads and the session write path
- ports/: interfaces towards infrastructure (session cache)
- dto/: response envelope

DEPENDENCY RULE:
This layer may import from:
- domain/ (entities, services, interfaces)
- its own ports/

It must NOT import from:
- infrastructure/ (concrete implementations)
- presentation/ (API)
"""

from pokertrack.application.use_cases.stats_usecase import StatsUseCase
from pokertrack.application.use_cases.session_usecase import SessionUseCase

__all__ = [
    "StatsUseCase",
    "SessionUseCase",
]
