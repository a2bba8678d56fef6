"""Pydantic models for calendar event endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, ClassVar
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from osc_backend.api.models.common import (
    CamelModel,
    PartialUpdateModel,
    calendar_day,
    reject_blank,
)

TITLE_MAX_LENGTH = 255
EVENT_TYPE_MAX_LENGTH = 64


class CalendarEventResponse(CamelModel):
    """Public representation of a calendar event."""

    id: UUID
    title: str
    description: str | None
    event_date: date
    marked: bool
    event_type: str
    created_at: datetime
    updated_at: datetime


class CalendarEventCreateRequest(CamelModel):
    """Payload for adding an event to the calendar."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    event_date: date
    marked: bool = False
    event_type: str = Field(min_length=1, max_length=EVENT_TYPE_MAX_LENGTH)

    @field_validator("event_date", mode="before")
    @classmethod
    def parse_event_date(cls, value: Any) -> Any:
        return calendar_day(value)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return reject_blank(value, field="title")

    @field_validator("event_type")
    @classmethod
    def validate_event_type(cls, value: str) -> str:
        return reject_blank(value, field="eventType")


class CalendarEventUpdateRequest(PartialUpdateModel):
    """Partial update for a calendar event; omitted fields stay untouched."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    event_date: date | None = None
    marked: bool | None = None
    event_type: str | None = Field(
        default=None, min_length=1, max_length=EVENT_TYPE_MAX_LENGTH
    )

    @field_validator("event_date", mode="before")
    @classmethod
    def parse_event_date(cls, value: Any) -> Any:
        return calendar_day(value)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str | None) -> str | None:
        return value if value is None else reject_blank(value, field="title")

    @field_validator("event_type")
    @classmethod
    def validate_event_type(cls, value: str | None) -> str | None:
        return value if value is None else reject_blank(value, field="eventType")

    @model_validator(mode="after")
    def validate_nulls(self) -> CalendarEventUpdateRequest:
        self._reject_nulls()
        return self
