"""SQLAlchemy schemas backing the API resources."""

from osc_backend.database.schemas.calendar_event import CalendarEventSchema
from osc_backend.database.schemas.team_member import TeamMemberSchema

__all__ = ["CalendarEventSchema", "TeamMemberSchema"]
