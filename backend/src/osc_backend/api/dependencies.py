"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from osc_backend.api.services import CalendarEventService, TeamMemberService

_calendar_event_service = CalendarEventService()
_team_member_service = TeamMemberService()


def get_calendar_event_service() -> CalendarEventService:
    """Return the shared :class:`CalendarEventService` instance."""

    return _calendar_event_service


def get_team_member_service() -> TeamMemberService:
    """Return the shared :class:`TeamMemberService` instance."""

    return _team_member_service


__all__ = ["get_calendar_event_service", "get_team_member_service"]
