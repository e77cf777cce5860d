"""
PokerTrack – Main Application Entry Point
===========================================
Wires the session store, the snapshot cache and the analytics engine
behind the REST API.

STARTUP:
  1. Configure logging
  2. Build the dependency container
  3. FastAPI lifespan startup:
     a. Connect the database (when db_enabled) and ensure the schema
     b. Inject the container into the routes
  4. FastAPI lifespan shutdown:
     a. Close the database connection pool

REQUEST FLOW:
  HTTP → rate limit → bearer auth → route
       → StatsUseCase → TTLSessionCache → ISessionRepository (on miss)
       → SessionAnalytics (filter → aggregator) → JSON envelope

  uvicorn pokertrack.main:app --host 0.0.0.0 --port 3001
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokertrack import __version__
from pokertrack.container import Container, init_container
from pokertrack.domain.exceptions.domain_errors import DomainError, SessionNotFoundError
from pokertrack.presentation.api.routes import init_routes, public_router, router
from pokertrack.presentation.api.security import BearerAuth
from pokertrack.shared.config.settings import Settings, settings as default_settings
from pokertrack.shared.logging.logger import get_logger, setup_logging

logger = get_logger("main")


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted.
        container: Pre-built container (tests inject fakes this way).
    """
    if container is None:
        container = init_container(settings)
    settings = container.settings

    # ─── Lifespan ───────────────────────────────────────────────────────

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info("  PokerTrack API v%s", __version__)
        logger.info("  Listening on %s:%d", settings.host, settings.port)
        logger.info("  Session cache TTL: %.0fs", settings.cache_ttl_seconds)
        logger.info("  Rate limit: %s (%s)",
                    settings.rate_limit,
                    "on" if settings.rate_limit_enabled else "off")
        logger.info("  Trend window: default %d, max %d",
                    settings.default_trend_window,
                    settings.max_trend_window)
        if not settings.api_key:
            logger.warning("  API_KEY not set: authenticated routes will answer 500")
        logger.info("=" * 60)

        if settings.db_enabled:
            await container.db_manager.initialize(create_schema=True)
            logger.info("  Database: connected (%s)", container.db_manager.database_url.split("@")[-1])
        else:
            logger.info("  Database: disabled, using in-memory session store")

        init_routes(container)

        yield

        # ── SHUTDOWN ──
        logger.info("Shutting down...")
        if settings.db_enabled:
            await container.db_manager.close()
            logger.info("  Database: connection closed")
        logger.info("✓ Shutdown complete")

    app = FastAPI(
        title="PokerTrack API",
        description="Poker session analytics: summaries, buckets, groups and trends",
        version=__version__,
        lifespan=lifespan,
    )

    # ─── Rate limiting ──────────────────────────────────────────────────
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        storage_uri="memory://",
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # ─── CORS ───────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origin.split(",")],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # ─── Error handlers ─────────────────────────────────────────────────

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("HTTP %d: %s", exc.status_code, exc.detail)
        content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "Validation failed", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SessionNotFoundError)
    async def not_found_handler(request: Request, exc: SessionNotFoundError):
        return JSONResponse(status_code=404, content=exc.to_dict())

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning("Domain error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        content = {"error": "Internal server error"}
        if settings.debug:
            content["message"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # ─── Routes ─────────────────────────────────────────────────────────
    # Also injected here so requests work without running the lifespan
    init_routes(container)
    app.include_router(public_router)
    app.include_router(router, dependencies=[Depends(BearerAuth(settings))])

    return app


setup_logging(logging.DEBUG if default_settings.debug else logging.INFO)
app = create_app(default_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokertrack.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level="debug" if default_settings.debug else "info",
    )
