"""
PokerTrack – API Key Authentication
=====================================
Bearer token guard for every /api route except the health check.

    Authorization: Bearer <API_KEY>

  missing header          → 401
  not "Bearer <token>"    → 401
  server has no API_KEY   → 500
  wrong token             → 403
"""

import hmac
from typing import Optional

from fastapi import Header, HTTPException

from pokertrack.shared.config.settings import Settings
from pokertrack.shared.logging.logger import get_logger

logger = get_logger("api.security")


class BearerAuth:
    """FastAPI dependency; compares the token in constant time."""

    def __init__(self, settings: Settings):
        self._settings = settings

    async def __call__(self, authorization: Optional[str] = Header(default=None)) -> None:
        if not authorization:
            raise HTTPException(status_code=401, detail={"error": "Missing Authorization header"})

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != "Bearer":
            raise HTTPException(
                status_code=401,
                detail={"error": "Invalid Authorization format. Expected: Bearer <token>"},
            )

        api_key = self._settings.api_key
        if not api_key:
            logger.error("API_KEY is not configured; rejecting authenticated request")
            raise HTTPException(status_code=500, detail={"error": "Server misconfigured"})

        if not hmac.compare_digest(parts[1].encode("utf-8"), api_key.encode("utf-8")):
            raise HTTPException(status_code=403, detail={"error": "Invalid API key"})
