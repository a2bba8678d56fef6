"""Route definitions for public HTTP endpoints."""

from osc_backend.api.routers.calendar import router as calendar_router
from osc_backend.api.routers.health import router as health_router
from osc_backend.api.routers.team_member import router as team_member_router

__all__ = ["calendar_router", "health_router", "team_member_router"]
