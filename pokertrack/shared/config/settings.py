"""
PokerTrack – Settings (Pydantic BaseSettings)
=============================================
Centralised configuration loaded from environment variables / .env.
pydantic-settings validates everything once at startup.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    # ─── Server ─────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    debug: bool = Field(default=False)
    cors_origin: str = Field(default="*", description="Allowed CORS origin")

    # ─── Auth ───────────────────────────────────────────────────────────
    api_key: Optional[str] = Field(
        default=None, description="Bearer token required on every /api route",
    )

    # ─── Rate limiting ──────────────────────────────────────────────────
    rate_limit: str = Field(
        default="60/minute", description="Requests per client IP (slowapi syntax)",
    )
    rate_limit_enabled: bool = Field(default=True)

    # ─── Session cache ──────────────────────────────────────────────────
    cache_ttl_seconds: float = Field(
        default=300.0, description="TTL of the in-memory session snapshot",
    )

    # ─── Analytics defaults ─────────────────────────────────────────────
    default_duration_buckets: List[int] = Field(
        default=[0, 30, 60, 120, 180, 240],
        description="Minute boundaries used when the caller sends none",
    )
    default_trend_window: int = Field(default=20, description="Rolling window size")
    max_trend_window: int = Field(default=200, description="Upper clamp for ?window=")
    sessions_default_limit: int = Field(default=100)
    sessions_max_limit: int = Field(default=500)

    # ─── Database ───────────────────────────────────────────────────────
    db_enabled: bool = Field(default=False, description="Use SQL persistence")
    db_host: str = Field(default="localhost", description="MySQL host")
    db_port: int = Field(default=3306, description="MySQL port")
    db_user: str = Field(default="pokertrack", description="MySQL username")
    db_password: str = Field(default="pokertrack_secret", description="MySQL password")
    db_name: str = Field(default="pokertrack", description="MySQL database name")
    db_echo: bool = Field(default=False, description="Log SQL statements")
    db_pool_size: int = Field(default=5, description="Pooled connections")
    db_max_overflow: int = Field(default=10, description="Extra connections under load")
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides the MySQL fields (e.g. sqlite+aiosqlite)",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global singleton, import where needed
settings = Settings()
