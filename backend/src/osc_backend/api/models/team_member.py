"""Pydantic models for team member endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from osc_backend.api.models.common import CamelModel, PartialUpdateModel, reject_blank
from osc_backend.shared import TeamRole

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
NAME_MAX_LENGTH = 128
EMAIL_MAX_LENGTH = 320


class TeamMemberResponse(CamelModel):
    """Public representation of a team member."""

    id: UUID
    team_id: UUID
    name: str
    email: str
    role: TeamRole
    created_at: datetime
    updated_at: datetime


class TeamMemberCreateRequest(CamelModel):
    """Payload for adding a member to a team."""

    team_id: UUID
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=EMAIL_MAX_LENGTH)
    role: TeamRole = TeamRole.MEMBER

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return reject_blank(value, field="name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class TeamMemberUpdateRequest(PartialUpdateModel):
    """Partial update for a team member."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(
        default=None, pattern=EMAIL_PATTERN, max_length=EMAIL_MAX_LENGTH
    )
    role: TeamRole | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        return value if value is None else reject_blank(value, field="name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str | None) -> str | None:
        return value if value is None else value.lower()

    @model_validator(mode="after")
    def validate_nulls(self) -> TeamMemberUpdateRequest:
        self._reject_nulls()
        return self
