"""Calendar event endpoints."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from osc_backend.api.dependencies import get_calendar_event_service
from osc_backend.api.models import (
    CalendarEventCreateRequest,
    CalendarEventResponse,
    CalendarEventUpdateRequest,
)
from osc_backend.api.services import (
    CalendarEventConflictError,
    CalendarEventNotFoundError,
    CalendarEventService,
    EmptyUpdateError,
)
from osc_backend.database import get_session
from osc_backend.shared.value_objects import MAX_MONTH, MAX_YEAR, MIN_MONTH

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/event-calendar", tags=["calendar"])


def _event_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Event not found"
    )


def _store_failure(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


@router.post(
    "",
    response_model=CalendarEventResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_event(
    payload: CalendarEventCreateRequest,
    session: Session = Depends(get_session),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> CalendarEventResponse:
    """Add a new event to the calendar."""

    try:
        event = service.create_event(
            session=session,
            title=payload.title,
            description=payload.description,
            event_date=payload.event_date,
            marked=payload.marked,
            event_type=payload.event_type,
        )
    except CalendarEventConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Event with this title already exists on the same date",
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error adding event")
        raise _store_failure("Failed to add event") from exc

    return CalendarEventResponse.model_validate(event, from_attributes=True)


@router.get("", response_model=list[CalendarEventResponse])
def list_events_for_month(
    year: int = Query(ge=1, le=MAX_YEAR),
    month: int = Query(ge=MIN_MONTH, le=MAX_MONTH),
    session: Session = Depends(get_session),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> list[CalendarEventResponse]:
    """Return the events of one month, earliest date first."""

    try:
        events = service.list_events_for_month(session=session, year=year, month=month)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching events")
        raise _store_failure("Failed to fetch events") from exc

    return [
        CalendarEventResponse.model_validate(event, from_attributes=True)
        for event in events
    ]


@router.get("/{event_id}", response_model=CalendarEventResponse)
def get_event(
    event_id: UUID,
    session: Session = Depends(get_session),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> CalendarEventResponse:
    try:
        event = service.get_event(session=session, event_id=event_id)
    except CalendarEventNotFoundError as exc:
        raise _event_not_found() from exc
    except SQLAlchemyError as exc:
        logger.exception("Error fetching event", extra={"event_id": event_id})
        raise _store_failure("Failed to fetch event") from exc

    return CalendarEventResponse.model_validate(event, from_attributes=True)


@router.patch("/{event_id}", response_model=CalendarEventResponse)
@router.post("/{event_id}", response_model=CalendarEventResponse)
def update_event(
    event_id: UUID,
    payload: CalendarEventUpdateRequest,
    session: Session = Depends(get_session),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> CalendarEventResponse:
    """Change only the fields present in the request body."""

    try:
        event = service.update_event(
            session=session, event_id=event_id, changes=payload.changes()
        )
    except EmptyUpdateError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields provided to update",
        ) from exc
    except CalendarEventNotFoundError as exc:
        raise _event_not_found() from exc
    except CalendarEventConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Event with this title already exists on the same date",
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error updating event", extra={"event_id": event_id})
        raise _store_failure("Failed to update event") from exc

    return CalendarEventResponse.model_validate(event, from_attributes=True)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_event(
    event_id: UUID,
    session: Session = Depends(get_session),
    service: CalendarEventService = Depends(get_calendar_event_service),
) -> Response:
    """Remove an event from the calendar."""

    try:
        service.delete_event(session=session, event_id=event_id)
    except CalendarEventNotFoundError as exc:
        raise _event_not_found() from exc
    except SQLAlchemyError as exc:
        logger.exception("Error deleting event", extra={"event_id": event_id})
        raise _store_failure("Failed to delete event") from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)
