"""REST API."""
from pokertrack.presentation.api.routes import init_routes, public_router, router

__all__ = ["router", "public_router", "init_routes"]
