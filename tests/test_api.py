"""
API tests: auth, envelopes, query parsing and error mapping
"""

import pytest
from fastapi.testclient import TestClient

from pokertrack.container import create_test_container
from pokertrack.infrastructure.persistence.repositories.in_memory_session_repository import (
    InMemorySessionRepository,
)
from pokertrack.main import create_app
from pokertrack.shared.config.settings import Settings

from conftest import API_KEY


AUTH = {"Authorization": f"Bearer {API_KEY}"}


def make_client(sessions, raise_server_exceptions=True, **settings_overrides):
    options = {"api_key": API_KEY, "rate_limit_enabled": False}
    options.update(settings_overrides)
    container = create_test_container(
        settings=Settings(**options),
        session_repository=InMemorySessionRepository(sessions),
    )
    app = create_app(container=container)
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


@pytest.fixture
def client(mixed_sessions):
    return make_client(mixed_sessions)


class BrokenCache:
    async def get_sessions(self):
        raise RuntimeError("store exploded")

    async def invalidate(self):
        pass

    def age_seconds(self):
        return None


# ─── Health & auth ─────────────────────────────────────────────────────

def test_health_needs_no_auth(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert isinstance(body["uptime"], int)
    assert body["timestamp"].endswith("Z")


def test_missing_header_is_401(client):
    response = client.get("/api/stats/summary")

    assert response.status_code == 401
    assert response.json() == {"error": "Missing Authorization header"}


@pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer a b", f"bearer {API_KEY}"])
def test_malformed_header_is_401(client, header):
    response = client.get("/api/stats/summary", headers={"Authorization": header})

    assert response.status_code == 401


def test_wrong_key_is_403(client):
    response = client.get("/api/stats/summary", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid API key"}


def test_server_without_key_is_500(mixed_sessions):
    client = make_client(mixed_sessions, api_key=None)

    response = client.get("/api/stats/summary", headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Server misconfigured"}


def test_unknown_route_lists_endpoints(client):
    response = client.get("/api/nothing/here", headers=AUTH)

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Not found"
    assert "GET /api/stats/trends" in body["availableEndpoints"]


def test_unknown_route_still_requires_auth(client):
    assert client.get("/api/nothing").status_code == 401


# ─── Stats ─────────────────────────────────────────────────────────────

def test_summary_envelope(client):
    response = client.get("/api/stats/summary", headers=AUTH)

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["totalSessions"] == 7
    assert body["data"]["cash"]["totalProfitDollars"] == 25.0
    assert body["meta"]["totalSessions"] == 7
    assert body["meta"]["filters"] == {}
    assert isinstance(body["meta"]["cacheAgeSeconds"], int)


def test_query_filters(client):
    response = client.get(
        "/api/stats/summary",
        params={"from": "2024-01-02", "to": "2024-01-06", "type": "cash", "stakes": ""},
        headers=AUTH,
    )

    body = response.json()
    assert body["meta"]["filteredSessions"] == 3
    assert body["meta"]["filters"] == {"from": "2024-01-02", "to": "2024-01-06", "type": "cash"}


def test_invalid_type_filter_is_422(client):
    response = client.get("/api/stats/summary", params={"type": "sng"}, headers=AUTH)

    assert response.status_code == 422


def test_by_duration_buckets_param(client):
    body = client.get("/api/stats/by-duration", params={"buckets": "60, 0, x, -5"}, headers=AUTH).json()

    assert [b["range"] for b in body["data"]["buckets"]] == ["0-60min", "60min+"]


def test_by_duration_falls_back_to_defaults(client):
    body = client.get("/api/stats/by-duration", params={"buckets": "30,abc"}, headers=AUTH).json()

    assert len(body["data"]["buckets"]) == 6


def test_by_game_type_and_day(client):
    groups = client.get("/api/stats/by-game-type", headers=AUTH).json()["data"]["groups"]
    days = client.get("/api/stats/by-day", headers=AUTH).json()["data"]["days"]

    assert groups[0]["gameType"] == "NLH"
    assert [d["day"] for d in days][0] == "Sunday"


@pytest.mark.parametrize("window, expected", [(None, 20), (0, 20), (5, 5), (-3, 1), (1000, 200)])
def test_trend_window_is_clamped(client, window, expected):
    params = {} if window is None else {"window": window}

    body = client.get("/api/stats/trends", params=params, headers=AUTH).json()

    assert body["data"]["windowSize"] == expected
    assert len(body["data"]["dataPoints"]) == 7


# ─── Sessions ──────────────────────────────────────────────────────────

def test_list_sessions(client):
    body = client.get("/api/sessions", params={"limit": 2}, headers=AUTH).json()

    assert [s["date"] for s in body["data"]] == ["2024-01-07", "2024-01-06"]
    assert body["pagination"] == {"total": 7, "limit": 2, "offset": 0, "hasMore": True}
    assert body["meta"]["filteredSessions"] == 7


def test_list_sessions_limit_is_capped(client):
    body = client.get("/api/sessions", params={"limit": 10_000}, headers=AUTH).json()

    assert body["pagination"]["limit"] == 500
    assert body["pagination"]["hasMore"] is False


def test_create_cash_session_computes_money(client):
    response = client.post(
        "/api/sessions",
        json={"type": "cash", "date": "2024-01-10", "duration": 90, "stakes": "NL50",
              "profitBB": 30, "hands": 210, "startTime": "21:00"},
        headers=AUTH,
    )

    assert response.status_code == 201
    new_id = response.json()["data"]["id"]

    sessions = client.get("/api/sessions", params={"limit": 1}, headers=AUTH).json()["data"]
    assert sessions[0]["id"] == new_id
    assert sessions[0]["profitDollars"] == 15.0
    assert sessions[0]["startTime"] == "21:00"


def test_create_tournament_session(client):
    response = client.post(
        "/api/sessions",
        json={"type": "tournament", "date": "2024-01-11", "buyIn": 20, "cashOut": 0},
        headers=AUTH,
    )

    assert response.status_code == 201
    summary = client.get("/api/stats/summary", headers=AUTH).json()["data"]
    assert summary["tournamentSessions"] == 4


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "sng", "date": "2024-01-01"},
        {"type": "cash", "date": "01/02/2024"},
        {"type": "cash", "date": "2024-01-01", "startTime": "9pm"},
        {"type": "cash", "date": "2024-01-01", "duration": -1},
        {"type": "tournament", "date": "2024-01-01", "buyIn": -10},
        {"type": "cash"},
        {"type": "cash", "date": "2024-1-5"},
        {"type": "cash", "date": "2024-01-01", "startTime": "9:5"},
        {"type": "cash", "date": "2024-01-01", "profitBB": 1e30},
        {"type": "cash", "date": "2024-01-01", "duration": 10**9},
        {"type": "tournament", "date": "2024-01-01", "cashOut": 1e13},
    ],
)
def test_create_rejects_invalid_body(client, payload):
    response = client.post("/api/sessions", json=payload, headers=AUTH)

    assert response.status_code == 422
    assert response.json()["error"] == "Validation failed"
    assert response.json()["details"]


def test_unpadded_date_never_reaches_the_store(client):
    response = client.post(
        "/api/sessions", json={"type": "cash", "date": "2024-1-5", "profitBB": 10}, headers=AUTH
    )
    assert response.status_code == 422

    body = client.get(
        "/api/stats/summary", params={"from": "2024-01-01", "to": "2024-06-30"}, headers=AUTH
    ).json()
    assert body["meta"]["totalSessions"] == 7


def test_money_too_large_to_store_is_400(client):
    response = client.post(
        "/api/sessions",
        json={"type": "cash", "date": "2024-01-10", "stakes": "NL100000000", "profitBB": 1e7},
        headers=AUTH,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_invalid_query_param_uses_error_body(client):
    response = client.get("/api/sessions", params={"limit": "many"}, headers=AUTH)

    assert response.status_code == 422
    assert response.json()["error"] == "Validation failed"


def test_update_session(client):
    response = client.put(
        "/api/sessions/c1",
        json={"type": "cash", "date": "2024-01-01", "stakes": "NL100", "profitBB": 5},
        headers=AUTH,
    )

    assert response.status_code == 200
    body = client.get("/api/sessions", params={"to": "2024-01-01"}, headers=AUTH).json()
    assert body["data"][0]["profitDollars"] == 5.0


def test_update_missing_session_is_404(client):
    response = client.put(
        "/api/sessions/missing",
        json={"type": "cash", "date": "2024-01-01"},
        headers=AUTH,
    )

    assert response.status_code == 404
    assert response.json()["error"] == "SESSION_NOT_FOUND"


def test_delete_session(client):
    assert client.delete("/api/sessions/t1", headers=AUTH).status_code == 200
    assert client.delete("/api/sessions/t1", headers=AUTH).status_code == 404

    summary = client.get("/api/stats/summary", headers=AUTH).json()
    assert summary["meta"]["totalSessions"] == 6


def test_cache_clear(client):
    response = client.post("/api/cache/clear", headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"message": "Cache cleared"}


# ─── Errors & rate limit ───────────────────────────────────────────────

def test_unexpected_error_is_500_without_message():
    container = create_test_container(
        settings=Settings(api_key=API_KEY, rate_limit_enabled=False),
        session_cache=BrokenCache(),
    )
    client = TestClient(create_app(container=container), raise_server_exceptions=False)

    response = client.get("/api/stats/summary", headers=AUTH)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unexpected_error_message_in_debug():
    container = create_test_container(
        settings=Settings(api_key=API_KEY, rate_limit_enabled=False, debug=True),
        session_cache=BrokenCache(),
    )
    client = TestClient(create_app(container=container), raise_server_exceptions=False)

    response = client.get("/api/stats/summary", headers=AUTH)

    assert response.status_code == 500
    assert response.json()["message"] == "store exploded"


def test_rate_limit(mixed_sessions):
    client = make_client(mixed_sessions, rate_limit_enabled=True, rate_limit="2/minute")

    statuses = [client.get("/api/health").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
