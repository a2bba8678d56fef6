"""Database connectivity helpers, schemas and repositories."""

from osc_backend.database.base import BaseSchema
from osc_backend.database.dependencies import get_database, get_session
from osc_backend.database.repositories import (
    CalendarEventRepository,
    TeamMemberRepository,
)
from osc_backend.database.schemas import CalendarEventSchema, TeamMemberSchema
from osc_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "CalendarEventRepository",
    "CalendarEventSchema",
    "DatabaseService",
    "TeamMemberRepository",
    "TeamMemberSchema",
    "get_database",
    "get_session",
]
