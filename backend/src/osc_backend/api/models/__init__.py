"""Models used for API request and response payloads."""

from osc_backend.api.models.calendar import (
    CalendarEventCreateRequest,
    CalendarEventResponse,
    CalendarEventUpdateRequest,
)
from osc_backend.api.models.common import ErrorResponse, HealthResponse
from osc_backend.api.models.team_member import (
    TeamMemberCreateRequest,
    TeamMemberResponse,
    TeamMemberUpdateRequest,
)

__all__ = [
    "CalendarEventCreateRequest",
    "CalendarEventResponse",
    "CalendarEventUpdateRequest",
    "ErrorResponse",
    "HealthResponse",
    "TeamMemberCreateRequest",
    "TeamMemberResponse",
    "TeamMemberUpdateRequest",
]
