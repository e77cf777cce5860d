"""
Unit tests for session filtering
"""

from pokertrack.domain.entities.session import SessionKind
from pokertrack.domain.services.session_filter import filter_sessions
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria


def ids(sessions):
    return [s.id for s in sessions]


def test_no_criteria_returns_copy(mixed_sessions):
    result = filter_sessions(mixed_sessions)

    assert result == mixed_sessions
    assert result is not mixed_sessions


def test_empty_criteria_returns_copy(mixed_sessions):
    result = filter_sessions(mixed_sessions, FilterCriteria())

    assert result == mixed_sessions
    assert result is not mixed_sessions


def test_date_range_is_inclusive(mixed_sessions):
    criteria = FilterCriteria(from_date="2024-01-02", to_date="2024-01-05")

    assert ids(filter_sessions(mixed_sessions, criteria)) == ["c2", "c3", "t1"]


def test_filter_by_kind(mixed_sessions):
    criteria = FilterCriteria(kind=SessionKind.TOURNAMENT)

    assert ids(filter_sessions(mixed_sessions, criteria)) == ["t1", "t2", "t3"]


def test_stakes_never_match_tournaments(mixed_sessions):
    criteria = FilterCriteria(stakes="NL50")

    assert ids(filter_sessions(mixed_sessions, criteria)) == ["c1", "c2"]


def test_game_type_exact_match(mixed_sessions):
    assert ids(filter_sessions(mixed_sessions, FilterCriteria(game_type="MTT"))) == ["t2"]
    assert filter_sessions(mixed_sessions, FilterCriteria(game_type="nlh")) == []


def test_criteria_combine_with_and(mixed_sessions):
    criteria = FilterCriteria(from_date="2024-01-02", kind=SessionKind.CASH, game_type="NLH")

    assert ids(filter_sessions(mixed_sessions, criteria)) == ["c2"]


def test_input_is_not_mutated(mixed_sessions):
    before = list(mixed_sessions)
    filter_sessions(mixed_sessions, FilterCriteria(kind=SessionKind.CASH))

    assert mixed_sessions == before


def test_criteria_to_dict_only_populated():
    criteria = FilterCriteria(from_date="2024-01-01", kind=SessionKind.CASH)

    assert criteria.to_dict() == {"from": "2024-01-01", "type": "cash"}
    assert not criteria.is_empty()
    assert FilterCriteria().to_dict() == {}
