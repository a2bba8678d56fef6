"""Service layer for API-specific business logic."""

from osc_backend.api.services.calendar import (
    CalendarEventConflictError,
    CalendarEventNotFoundError,
    CalendarEventService,
)
from osc_backend.api.services.errors import (
    EmptyUpdateError,
    ResourceConflictError,
    ResourceNotFoundError,
)
from osc_backend.api.services.team_member import (
    TeamMemberConflictError,
    TeamMemberNotFoundError,
    TeamMemberService,
)

__all__ = [
    "CalendarEventConflictError",
    "CalendarEventNotFoundError",
    "CalendarEventService",
    "EmptyUpdateError",
    "ResourceConflictError",
    "ResourceNotFoundError",
    "TeamMemberConflictError",
    "TeamMemberNotFoundError",
    "TeamMemberService",
]
