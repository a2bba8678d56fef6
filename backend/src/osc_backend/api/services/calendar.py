"""Calendar event domain logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError

from osc_backend.api.services.errors import (
    EmptyUpdateError,
    ResourceConflictError,
    ResourceNotFoundError,
)
from osc_backend.database import CalendarEventRepository, CalendarEventSchema
from osc_backend.shared import MonthRange

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date
    from typing import Any

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class CalendarEventNotFoundError(ResourceNotFoundError):
    """Raised when no event exists for the requested ID."""


class CalendarEventConflictError(ResourceConflictError):
    """Raised when another event already uses the same title on that date."""


class CalendarEventService:
    """Creates, lists, updates and deletes calendar events."""

    def create_event(
        self,
        *,
        session: Session,
        title: str,
        event_date: date,
        event_type: str,
        description: str | None = None,
        marked: bool = False,
    ) -> CalendarEventSchema:
        repository = CalendarEventRepository(session)
        if repository.find_by_title_and_date(title, event_date) is not None:
            raise CalendarEventConflictError(title, event_date)

        event = CalendarEventSchema(
            id=uuid4(),
            title=title,
            description=description,
            event_date=event_date,
            marked=marked,
            event_type=event_type,
        )
        try:
            event = repository.add(event)
        except IntegrityError as exc:
            session.rollback()
            raise CalendarEventConflictError(title, event_date) from exc

        logger.info("Calendar event created", extra={"event_id": event.id})
        return event

    def list_events_for_month(
        self, *, session: Session, year: int, month: int
    ) -> list[CalendarEventSchema]:
        """Return events of ``month``/``year`` ordered by date."""
        window = MonthRange.for_month(year, month)
        repository = CalendarEventRepository(session)
        return repository.list_between(window.start, window.end)

    def get_event(self, *, session: Session, event_id: UUID) -> CalendarEventSchema:
        event = CalendarEventRepository(session).get_by_id(event_id)
        if event is None:
            raise CalendarEventNotFoundError(event_id)
        return event

    def update_event(
        self, *, session: Session, event_id: UUID, changes: Mapping[str, Any]
    ) -> CalendarEventSchema:
        """Apply only the supplied ``changes`` to the event."""
        if not changes:
            raise EmptyUpdateError(event_id)

        repository = CalendarEventRepository(session)
        event = repository.get_by_id(event_id)
        if event is None:
            raise CalendarEventNotFoundError(event_id)

        title = changes.get("title", event.title)
        event_date = changes.get("event_date", event.event_date)
        clash = repository.find_by_title_and_date(title, event_date)
        if clash is not None and clash.id != event.id:
            raise CalendarEventConflictError(title, event_date)

        try:
            event = repository.update(event, changes)
        except IntegrityError as exc:
            session.rollback()
            raise CalendarEventConflictError(title, event_date) from exc

        logger.info(
            "Calendar event updated: %s",
            ", ".join(sorted(changes)),
            extra={"event_id": event_id},
        )
        return event

    def delete_event(self, *, session: Session, event_id: UUID) -> None:
        repository = CalendarEventRepository(session)
        event = repository.get_by_id(event_id)
        if event is None:
            raise CalendarEventNotFoundError(event_id)
        repository.delete(event)
        logger.info("Calendar event deleted", extra={"event_id": event_id})
