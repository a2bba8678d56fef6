"""Repository helpers wrapping SQLAlchemy sessions."""

from osc_backend.database.repositories.calendar_event import CalendarEventRepository
from osc_backend.database.repositories.team_member import TeamMemberRepository

__all__ = ["CalendarEventRepository", "TeamMemberRepository"]
