"""
PokerTrack - Game Type / Stakes Grouping
==========================================
Groups sessions by what was played.

  cash        → (game type, stakes), each defaulting to "Unknown"
  tournament  → game type alone, defaulting to "MTT"

The key is an explicit tuple (GroupKey), never a joined string, so a
game type containing a separator cannot collide with another group.

Output is sorted by member count, descending. Python's sort is stable,
so groups with equal counts keep the order in which they were first seen.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional, Sequence, Union

from pokertrack.domain.entities.session import (
    CashSession,
    Session,
    SessionKind,
    TournamentSession,
)
from pokertrack.domain.services.metrics import (
    bb_per_100,
    hourly_rate,
    itm_percent,
    round_minutes,
    round_to,
    roi,
    safe_div,
    total_minutes,
    win_rate,
)
from pokertrack.domain.value_objects.session_stats import CashGroup, TournamentGroup

UNKNOWN_LABEL = "Unknown"
TOURNAMENT_LABEL = "MTT"

GameTypeGroup = Union[CashGroup, TournamentGroup]


class GroupKey(NamedTuple):
    kind: SessionKind
    game_type: str
    stakes: Optional[str]


def group_key(session: Session) -> GroupKey:
    if isinstance(session, CashSession):
        return GroupKey(
            SessionKind.CASH,
            session.game_type or UNKNOWN_LABEL,
            session.stakes or UNKNOWN_LABEL,
        )
    return GroupKey(SessionKind.TOURNAMENT, session.game_type or TOURNAMENT_LABEL, None)


def _cash_group(key: GroupKey, members: Sequence[CashSession]) -> CashGroup:
    n = len(members)
    units = sum(s.profit_units for s in members)
    money = sum(s.profit_money for s in members)
    hands = sum(s.hands_played for s in members)
    minutes = total_minutes(members)

    return CashGroup(
        game_type=key.game_type,
        stakes=key.stakes,
        sessions=n,
        total_profit_units=round_to(units, 1),
        total_profit_money=round_to(money, 2),
        avg_profit_units=round_to(safe_div(units, n), 1),
        avg_profit_money=round_to(safe_div(money, n), 2),
        total_hands=hands,
        bb_per_100=round_to(bb_per_100(units, hands), 2),
        total_hours=round_to(minutes / 60, 1),
        avg_duration_minutes=round_minutes(safe_div(minutes, n)),
        hourly_rate_money=round_to(hourly_rate(money, minutes), 2),
        hourly_rate_units=round_to(hourly_rate(units, minutes), 1),
        win_rate=round_to(win_rate(members), 1),
    )


def _tournament_group(key: GroupKey, members: Sequence[TournamentSession]) -> TournamentGroup:
    n = len(members)
    buy_ins = sum(t.buy_in for t in members)
    cash_outs = sum(t.cash_out for t in members)
    minutes = total_minutes(members)

    return TournamentGroup(
        game_type=key.game_type,
        sessions=n,
        total_profit=round_to(cash_outs - buy_ins, 2),
        total_buy_ins=round_to(buy_ins, 2),
        total_cash_outs=round_to(cash_outs, 2),
        avg_buy_in=round_to(safe_div(buy_ins, n), 2),
        roi=round_to(roi(buy_ins, cash_outs), 1),
        itm_percent=round_to(itm_percent(members), 1),
        total_hours=round_to(minutes / 60, 1),
        avg_duration_minutes=round_minutes(safe_div(minutes, n)),
        win_rate=round_to(win_rate(members), 1),
    )


def group_by_game_type(sessions: Sequence[Session]) -> List[GameTypeGroup]:
    # dict preserves first-insertion order
    groups: Dict[GroupKey, List[Session]] = {}
    for session in sessions:
        groups.setdefault(group_key(session), []).append(session)

    results: List[GameTypeGroup] = []
    for key, members in groups.items():
        if key.kind is SessionKind.CASH:
            results.append(_cash_group(key, members))
        else:
            results.append(_tournament_group(key, members))

    results.sort(key=lambda g: g.sessions, reverse=True)
    return results
