"""Domain value objects."""
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria
from pokertrack.domain.value_objects.session_stats import (
    BucketMetrics,
    CashGroup,
    CashStats,
    CombinedStats,
    DayOfWeekBucket,
    DurationBucket,
    SummaryStats,
    TimeOfDay,
    TournamentGroup,
    TournamentStats,
    TrendPoint,
)

__all__ = [
    "FilterCriteria",
    "BucketMetrics",
    "CashGroup",
    "CashStats",
    "CombinedStats",
    "DayOfWeekBucket",
    "DurationBucket",
    "SummaryStats",
    "TimeOfDay",
    "TournamentGroup",
    "TournamentStats",
    "TrendPoint",
]
