"""
Unit tests for the summary aggregator
"""

import math

import pytest

from pokertrack.domain.services.metrics import round_to
from pokertrack.domain.services.summary_aggregator import summarize

from conftest import cash


def test_reference_cash_pair(two_cash_sessions):
    stats = summarize(two_cash_sessions)

    assert stats.total_sessions == 2
    assert stats.cash_sessions == 2
    assert stats.tournament_sessions == 0
    assert stats.cash.total_profit_units == 6
    assert stats.cash.total_profit_money == 3.0
    assert stats.cash.total_hands == 200
    assert stats.cash.bb_per_100 == 3.0
    assert stats.cash.win_rate == 50.0


def test_empty_input_yields_zeros():
    stats = summarize([])
    data = stats.to_dict()

    assert data["totalSessions"] == 0
    for section in ("cash", "tournament", "combined"):
        for key, value in data[section].items():
            assert value == 0, key
            assert not math.isnan(value)


def test_mixed_summary(mixed_sessions):
    stats = summarize(mixed_sessions)

    assert stats.total_sessions == 7
    assert stats.cash_sessions == 4
    assert stats.tournament_sessions == 3

    assert stats.cash.total_profit_units == 35.0
    assert stats.cash.total_profit_money == 25.0
    assert stats.cash.total_hands == 650
    assert stats.cash.total_minutes == 365
    assert stats.cash.total_hours == 6.1
    assert stats.cash.bb_per_100 == 5.38
    assert stats.cash.hourly_rate_money == 4.11
    assert stats.cash.hourly_rate_units == 5.8
    assert stats.cash.win_rate == 50.0

    assert stats.tournament.total_profit == 80.0
    assert stats.tournament.total_buy_ins == 120.0
    assert stats.tournament.total_cash_outs == 200.0
    assert stats.tournament.tournaments_played == 3
    assert stats.tournament.roi == 66.7
    assert stats.tournament.itm_percent == 66.7
    assert stats.tournament.avg_buy_in == 40.0
    assert stats.tournament.win_rate == 33.3
    assert stats.tournament.total_hours == 9.4

    assert stats.combined.total_profit_money == 105.0
    assert stats.combined.total_minutes == 930
    assert stats.combined.total_hours == 15.5
    assert stats.combined.hourly_rate_money == 6.77
    assert stats.combined.win_rate == 42.9


def test_money_profit_is_not_recomputed():
    # Stored money profit wins even if it disagrees with units × stakes
    stats = summarize([cash(stakes="NL50", profit_units=10, profit_money=99.0)])

    assert stats.cash.total_profit_money == 99.0


def test_zero_hands_and_minutes_guard():
    stats = summarize([cash(profit_units=5, profit_money=5.0)])

    assert stats.cash.bb_per_100 == 0.0
    assert stats.cash.hourly_rate_money == 0.0
    assert stats.cash.win_rate == 100.0


def test_to_dict_shape(mixed_sessions):
    data = summarize(mixed_sessions).to_dict()

    assert set(data) == {"totalSessions", "cashSessions", "tournamentSessions",
                         "cash", "tournament", "combined"}
    assert set(data["cash"]) == {
        "totalProfitBB", "totalProfitDollars", "totalHands", "totalMinutes", "totalHours",
        "bbPer100", "hourlyRateDollars", "hourlyRateBB", "winRate",
    }
    assert set(data["tournament"]) == {
        "totalProfit", "totalBuyIns", "totalCashOuts", "totalMinutes", "totalHours",
        "tournamentsPlayed", "roi", "itmPercent", "avgBuyIn", "winRate",
    }


@pytest.mark.parametrize(
    "value, places, expected",
    [
        (2.675, 2, 2.68),
        (-2.675, 2, -2.68),
        (0.05, 1, 0.1),
        (-0.05, 1, -0.1),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (-0.001, 2, 0.0),
    ],
)
def test_round_half_away_from_zero(value, places, expected):
    assert round_to(value, places) == expected


def test_round_never_returns_negative_zero():
    assert math.copysign(1.0, round_to(-0.001, 2)) == 1.0


@pytest.mark.parametrize("value", [1e27, -1e27, 1.5e300])
def test_round_handles_huge_values(value):
    assert round_to(value, 2) == value


def test_round_passes_non_finite_through():
    assert round_to(math.inf, 2) == math.inf
    assert math.isnan(round_to(math.nan, 2))


def test_summary_with_huge_profit_does_not_raise():
    stats = summarize([cash(profit_units=1e27, profit_money=1e27, hands_played=1)])

    assert stats.cash.total_profit_units == 1e27
    assert stats.cash.bb_per_100 == 1e27 * 100
