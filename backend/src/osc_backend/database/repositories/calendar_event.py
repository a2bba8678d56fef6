"""Repository helpers for working with calendar events."""

from collections.abc import Mapping
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from osc_backend.database.schemas import CalendarEventSchema


class CalendarEventRepository:
    """Encapsulates persistence operations for :class:`CalendarEventSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, event_id: UUID) -> CalendarEventSchema | None:
        """Return event entity by its ID."""
        return self._session.get(CalendarEventSchema, event_id)

    def find_by_title_and_date(
        self, title: str, event_date: date
    ) -> CalendarEventSchema | None:
        """Return the event occupying the ``(title, event_date)`` slot, if any."""
        stmt = select(CalendarEventSchema).where(
            CalendarEventSchema.title == title,
            CalendarEventSchema.event_date == event_date,
        )
        return self._session.scalars(stmt).first()

    def list_between(self, start: date, end: date) -> list[CalendarEventSchema]:
        """Return events dated in ``[start, end)``, earliest first."""
        stmt = (
            select(CalendarEventSchema)
            .where(
                CalendarEventSchema.event_date >= start,
                CalendarEventSchema.event_date < end,
            )
            .order_by(CalendarEventSchema.event_date, CalendarEventSchema.title)
        )
        return list(self._session.scalars(stmt))

    def add(self, event: CalendarEventSchema) -> CalendarEventSchema:
        """Add new event to database."""
        self._session.add(event)
        self._session.flush()
        self._session.refresh(event)
        return event

    def update(
        self, event: CalendarEventSchema, changes: Mapping[str, Any]
    ) -> CalendarEventSchema:
        """Apply ``changes`` to ``event`` and flush them."""
        for field, value in changes.items():
            setattr(event, field, value)
        self._session.flush()
        self._session.refresh(event)
        return event

    def delete(self, event: CalendarEventSchema) -> None:
        """Remove event from database."""
        self._session.delete(event)
        self._session.flush()
