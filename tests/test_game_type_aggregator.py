"""
Unit tests for game type / stakes grouping
"""

from pokertrack.domain.entities.session import SessionKind
from pokertrack.domain.services.game_type_aggregator import (
    GroupKey,
    group_by_game_type,
    group_key,
)
from pokertrack.domain.value_objects.session_stats import CashGroup, TournamentGroup

from conftest import cash, tournament


def test_group_keys():
    assert group_key(cash(game_type="NLH", stakes="NL50")) == GroupKey(SessionKind.CASH, "NLH", "NL50")
    assert group_key(cash()) == GroupKey(SessionKind.CASH, "Unknown", "Unknown")
    assert group_key(tournament()) == GroupKey(SessionKind.TOURNAMENT, "MTT", None)
    assert group_key(tournament(game_type="Sit&Go")) == GroupKey(SessionKind.TOURNAMENT, "Sit&Go", None)


def test_groups_sorted_by_count_with_stable_ties(mixed_sessions):
    groups = group_by_game_type(mixed_sessions)

    assert [(g.game_type, g.sessions) for g in groups] == [
        ("NLH", 2),
        ("MTT", 2),
        ("PLO", 1),
        ("Unknown", 1),
        ("Sit&Go", 1),
    ]


def test_cash_group_metrics(mixed_sessions):
    nlh = group_by_game_type(mixed_sessions)[0]

    assert isinstance(nlh, CashGroup)
    assert nlh.stakes == "NL50"
    assert nlh.total_profit_units == 20.0
    assert nlh.total_profit_money == 10.0
    assert nlh.avg_profit_units == 10.0
    assert nlh.avg_profit_money == 5.0
    assert nlh.total_hands == 400
    assert nlh.bb_per_100 == 5.0
    assert nlh.total_hours == 2.8
    assert nlh.avg_duration_minutes == 83
    assert nlh.hourly_rate_money == 3.64
    assert nlh.hourly_rate_units == 7.3
    assert nlh.win_rate == 50.0


def test_tournament_group_metrics(mixed_sessions):
    mtt = group_by_game_type(mixed_sessions)[1]

    assert isinstance(mtt, TournamentGroup)
    assert mtt.total_profit == 80.0
    assert mtt.total_buy_ins == 100.0
    assert mtt.total_cash_outs == 180.0
    assert mtt.avg_buy_in == 50.0
    assert mtt.roi == 80.0
    assert mtt.itm_percent == 50.0
    assert mtt.total_hours == 9.0
    assert mtt.avg_duration_minutes == 270
    assert mtt.win_rate == 50.0


def test_group_to_dict_tags_type(mixed_sessions):
    groups = [g.to_dict() for g in group_by_game_type(mixed_sessions)]

    assert groups[0]["type"] == "cash"
    assert groups[0]["stakes"] == "NL50"
    assert groups[1]["type"] == "tournament"
    assert groups[1]["stakes"] is None
    assert "roi" in groups[1]
    assert "bbPer100" in groups[0]


def test_same_game_type_different_stakes_split():
    sessions = [
        cash(game_type="NLH", stakes="NL50"),
        cash(game_type="NLH", stakes="NL100"),
        cash(game_type="NLH", stakes="NL100"),
    ]

    groups = group_by_game_type(sessions)

    assert [(g.stakes, g.sessions) for g in groups] == [("NL100", 2), ("NL50", 1)]


def test_empty_input():
    assert group_by_game_type([]) == []
