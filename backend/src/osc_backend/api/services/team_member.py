"""Team membership domain logic."""

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
from osc_backend.database import TeamMemberRepository, TeamMemberSchema
from osc_backend.shared import TeamRole

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class TeamMemberNotFoundError(ResourceNotFoundError):
    """Raised when no member exists for the requested ID."""


class TeamMemberConflictError(ResourceConflictError):
    """Raised when the email is already registered on the team."""


class TeamMemberService:
    """Adds, updates, removes and lists members of a team."""

    def create_member(
        self,
        *,
        session: Session,
        team_id: UUID,
        name: str,
        email: str,
        role: TeamRole = TeamRole.MEMBER,
    ) -> TeamMemberSchema:
        repository = TeamMemberRepository(session)
        if repository.get_by_team_and_email(team_id, email) is not None:
            raise TeamMemberConflictError(team_id, email)

        member = TeamMemberSchema(
            id=uuid4(), team_id=team_id, name=name, email=email, role=role
        )
        try:
            member = repository.add(member)
        except IntegrityError as exc:
            session.rollback()
            raise TeamMemberConflictError(team_id, email) from exc

        logger.info(
            "Team member added",
            extra={"member_id": member.id, "team_id": team_id},
        )
        return member

    def remove_member(self, *, session: Session, member_id: UUID) -> None:
        repository = TeamMemberRepository(session)
        member = repository.get_by_id(member_id)
        if member is None:
            raise TeamMemberNotFoundError(member_id)
        repository.delete(member)
        logger.info(
            "Team member removed",
            extra={"member_id": member_id, "team_id": member.team_id},
        )

    def update_member(
        self, *, session: Session, member_id: UUID, changes: Mapping[str, Any]
    ) -> TeamMemberSchema:
        if not changes:
            raise EmptyUpdateError(member_id)

        repository = TeamMemberRepository(session)
        member = repository.get_by_id(member_id)
        if member is None:
            raise TeamMemberNotFoundError(member_id)

        email = changes.get("email")
        if email is not None and email != member.email:
            if repository.get_by_team_and_email(member.team_id, email) is not None:
                raise TeamMemberConflictError(member.team_id, email)

        try:
            member = repository.update(member, changes)
        except IntegrityError as exc:
            session.rollback()
            raise TeamMemberConflictError(member.team_id, email) from exc

        logger.info("Team member updated", extra={"member_id": member_id})
        return member

    def list_team_members(
        self, *, session: Session, team_id: UUID
    ) -> list[TeamMemberSchema]:
        return TeamMemberRepository(session).list_by_team(team_id)
