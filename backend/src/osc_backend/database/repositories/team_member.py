"""Repository helpers for working with team members."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from osc_backend.database.schemas import TeamMemberSchema


class TeamMemberRepository:
    """Encapsulates persistence operations for :class:`TeamMemberSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, member_id: UUID) -> TeamMemberSchema | None:
        """Return member entity by its ID."""
        return self._session.get(TeamMemberSchema, member_id)

    def get_by_team_and_email(
        self, team_id: UUID, email: str
    ) -> TeamMemberSchema | None:
        """Return the member of ``team_id`` registered with ``email``."""
        stmt = select(TeamMemberSchema).where(
            TeamMemberSchema.team_id == team_id,
            TeamMemberSchema.email == email,
        )
        return self._session.scalar(stmt)

    def list_by_team(self, team_id: UUID) -> list[TeamMemberSchema]:
        """Return all members of ``team_id``, oldest first."""
        stmt = (
            select(TeamMemberSchema)
            .where(TeamMemberSchema.team_id == team_id)
            .order_by(TeamMemberSchema.created_at, TeamMemberSchema.name)
        )
        return list(self._session.scalars(stmt))

    def add(self, member: TeamMemberSchema) -> TeamMemberSchema:
        """Add new member to database."""
        self._session.add(member)
        self._session.flush()
        self._session.refresh(member)
        return member

    def update(
        self, member: TeamMemberSchema, changes: Mapping[str, Any]
    ) -> TeamMemberSchema:
        """Apply ``changes`` to ``member`` and flush them."""
        for field, value in changes.items():
            setattr(member, field, value)
        self._session.flush()
        self._session.refresh(member)
        return member

    def delete(self, member: TeamMemberSchema) -> None:
        """Remove member from database."""
        self._session.delete(member)
        self._session.flush()
