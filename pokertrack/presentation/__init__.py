"""
PokerTrack – Presentation Layer
=================================
HTTP API.

This package contains:
- api/: FastAPI routes, request schemas and the bearer guard

DEPENDENCY RULE:
This layer only calls use cases from application/ (through the
container) and reads domain value objects to parse requests.
It never touches infrastructure/ directly.
"""

from pokertrack.presentation.api.routes import init_routes, public_router, router
from pokertrack.presentation.api.security import BearerAuth

__all__ = [
    "router",
    "public_router",
    "init_routes",
    "BearerAuth",
]
