"""
PokerTrack – API Routes (FastAPI)
===================================
REST endpoints over the session store and the analytics engine.

Endpoints:
  GET    /api/health              → health check (no auth)
  GET    /api/sessions            → filtered sessions, newest first, paginated
  POST   /api/sessions            → create a session
  PUT    /api/sessions/{id}       → replace a session
  DELETE /api/sessions/{id}       → delete a session
  GET    /api/stats/summary       → cash / tournament / combined totals
  GET    /api/stats/by-duration   → duration buckets (?buckets=0,30,60)
  GET    /api/stats/by-game-type  → game type / stakes groups
  GET    /api/stats/by-day        → day-of-week buckets
  GET    /api/stats/trends        → rolling + cumulative series (?window=20)
  POST   /api/cache/clear         → drop the session snapshot

Every read accepts the filters ?from=&to=&type=&stakes=&gameType=.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from pokertrack.domain.entities.session import SessionKind
from pokertrack.domain.value_objects.filter_criteria import FilterCriteria
from pokertrack.presentation.api.schemas import SessionCreate
from pokertrack.shared.logging.logger import get_logger

logger = get_logger("api.routes")

# /api/health stays outside the bearer guard
public_router = APIRouter()
router = APIRouter()

# Injected from main.py at startup
_container = None
_started_at = time.monotonic()

AVAILABLE_ENDPOINTS = [
    "GET /api/health",
    "GET /api/sessions",
    "POST /api/sessions",
    "PUT /api/sessions/:id",
    "DELETE /api/sessions/:id",
    "GET /api/stats/summary",
    "GET /api/stats/by-duration",
    "GET /api/stats/by-game-type",
    "GET /api/stats/by-day",
    "GET /api/stats/trends",
    "POST /api/cache/clear",
]


def init_routes(container) -> None:
    """Inject the dependency container from main.py."""
    global _container, _started_at
    _container = container
    _started_at = time.monotonic()


# ─── Query parsing ─────────────────────────────────────────────────────

def filter_params(
    from_: Optional[str] = Query(default=None, alias="from", description="YYYY-MM-DD, inclusive"),
    to: Optional[str] = Query(default=None, description="YYYY-MM-DD, inclusive"),
    type_: Optional[SessionKind] = Query(default=None, alias="type"),
    stakes: Optional[str] = Query(default=None, description="Exact stakes label, e.g. NL50"),
    game_type: Optional[str] = Query(default=None, alias="gameType"),
) -> FilterCriteria:
    """Common filters; empty strings count as absent."""
    return FilterCriteria(
        from_date=from_ or None,
        to_date=to or None,
        kind=type_,
        stakes=stakes or None,
        game_type=game_type or None,
    )


def parse_buckets(raw: Optional[str]) -> Optional[List[int]]:
    """
    "0,30,60" → [0, 30, 60].

    Non-integer and negative entries are dropped; fewer than two valid
    boundaries means "use the defaults" (None).
    """
    if not raw:
        return None
    boundaries = []
    for part in raw.split(","):
        part = part.strip()
        try:
            value = int(part)
        except ValueError:
            continue
        if value >= 0:
            boundaries.append(value)
    return boundaries if len(boundaries) >= 2 else None


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# ─── Health ────────────────────────────────────────────────────────────

@public_router.get("/api/health")
async def health_check() -> dict:
    """Health check for monitoring."""
    return {
        "status": "ok",
        "uptime": round(time.monotonic() - _started_at),
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


# ─── Sessions ──────────────────────────────────────────────────────────

@router.get("/api/sessions")
async def list_sessions(
    criteria: FilterCriteria = Depends(filter_params),
    limit: Optional[int] = Query(default=None, description="Page size (max 500)"),
    offset: int = Query(default=0, ge=0),
) -> dict:
    """Filtered sessions, most recent first."""
    settings = _container.settings
    page_size = clamp(limit or settings.sessions_default_limit, 1, settings.sessions_max_limit)
    result = await _container.get_stats_usecase().list_sessions(
        criteria, limit=page_size, offset=offset,
    )
    return result.to_dict()


@router.post("/api/sessions", status_code=201)
async def create_session(body: SessionCreate) -> dict:
    """Create a session; cash money profit is derived from profitBB and stakes."""
    session_id = await _container.get_session_usecase().create(body.to_entity())
    return {"data": {"id": session_id}}


@router.put("/api/sessions/{session_id}")
async def update_session(session_id: str, body: SessionCreate) -> dict:
    await _container.get_session_usecase().update(session_id, body.to_entity())
    return {"data": {"id": session_id}}


@router.delete("/api/sessions/{session_id}")
async def delete_session(session_id: str) -> dict:
    await _container.get_session_usecase().delete(session_id)
    return {"data": {"id": session_id, "deleted": True}}


# ─── Stats ─────────────────────────────────────────────────────────────

@router.get("/api/stats/summary")
async def stats_summary(criteria: FilterCriteria = Depends(filter_params)) -> dict:
    result = await _container.get_stats_usecase().get_summary(criteria)
    return result.to_dict()


@router.get("/api/stats/by-duration")
async def stats_by_duration(
    criteria: FilterCriteria = Depends(filter_params),
    buckets: Optional[str] = Query(default=None, description="Comma-separated minute boundaries"),
) -> dict:
    boundaries = parse_buckets(buckets) or list(_container.settings.default_duration_buckets)
    result = await _container.get_stats_usecase().get_by_duration(criteria, boundaries=boundaries)
    return result.to_dict()


@router.get("/api/stats/by-game-type")
async def stats_by_game_type(criteria: FilterCriteria = Depends(filter_params)) -> dict:
    result = await _container.get_stats_usecase().get_by_game_type(criteria)
    return result.to_dict()


@router.get("/api/stats/by-day")
async def stats_by_day(criteria: FilterCriteria = Depends(filter_params)) -> dict:
    result = await _container.get_stats_usecase().get_by_day(criteria)
    return result.to_dict()


@router.get("/api/stats/trends")
async def stats_trends(
    criteria: FilterCriteria = Depends(filter_params),
    window: Optional[int] = Query(default=None, description="Rolling window, 1..200"),
) -> dict:
    settings = _container.settings
    # 0 and absent both mean the default window
    window_size = clamp(window or settings.default_trend_window, 1, settings.max_trend_window)
    result = await _container.get_stats_usecase().get_trends(criteria, window_size=window_size)
    return result.to_dict()


# ─── Cache ─────────────────────────────────────────────────────────────

@router.post("/api/cache/clear")
async def clear_cache() -> dict:
    await _container.get_session_usecase().clear_cache()
    return {"message": "Cache cleared"}


# ─── Fallback (must stay last) ─────────────────────────────────────────

@router.api_route(
    "/api/{path:path}",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
async def not_found(path: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": "Not found", "availableEndpoints": AVAILABLE_ENDPOINTS},
    )
