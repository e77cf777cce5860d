"""Use cases."""
from pokertrack.application.use_cases.stats_usecase import StatsUseCase
from pokertrack.application.use_cases.session_usecase import SessionUseCase

__all__ = ["StatsUseCase", "SessionUseCase"]
