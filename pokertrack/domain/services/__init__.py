"""Pure domain services: the session analytics engine."""
from pokertrack.domain.services.unit_converter import unit_value, money_from_units
from pokertrack.domain.services.session_filter import filter_sessions
from pokertrack.domain.services.summary_aggregator import summarize
from pokertrack.domain.services.bucket_aggregators import (
    bucket_by_day_of_week,
    bucket_by_duration,
)
from pokertrack.domain.services.game_type_aggregator import group_by_game_type
from pokertrack.domain.services.trend_computer import compute_trends
from pokertrack.domain.services.session_analytics import SessionAnalytics

__all__ = [
    "unit_value",
    "money_from_units",
    "filter_sessions",
    "summarize",
    "bucket_by_duration",
    "bucket_by_day_of_week",
    "group_by_game_type",
    "compute_trends",
    "SessionAnalytics",
]
