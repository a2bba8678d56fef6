"""Team membership endpoints."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from osc_backend.api.dependencies import get_team_member_service
from osc_backend.api.models import (
    TeamMemberCreateRequest,
    TeamMemberResponse,
    TeamMemberUpdateRequest,
)
from osc_backend.api.services import (
    EmptyUpdateError,
    TeamMemberConflictError,
    TeamMemberNotFoundError,
    TeamMemberService,
)
from osc_backend.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/team-member", tags=["team-member"])

_MEMBER_CONFLICT = "Member with this email already belongs to the team"


@router.post(
    "/create",
    response_model=TeamMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_team_member(
    payload: TeamMemberCreateRequest,
    session: Session = Depends(get_session),
    service: TeamMemberService = Depends(get_team_member_service),
) -> TeamMemberResponse:
    """Add a member to a team."""

    try:
        member = service.create_member(
            session=session,
            team_id=payload.team_id,
            name=payload.name,
            email=payload.email,
            role=payload.role,
        )
    except TeamMemberConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=_MEMBER_CONFLICT
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error adding team member", extra={"team_id": payload.team_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add team member",
        ) from exc

    return TeamMemberResponse.model_validate(member, from_attributes=True)


@router.post(
    "/remove/by-member-id/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def remove_team_member(
    member_id: UUID,
    session: Session = Depends(get_session),
    service: TeamMemberService = Depends(get_team_member_service),
) -> Response:
    """Remove a member from their team."""

    try:
        service.remove_member(session=session, member_id=member_id)
    except TeamMemberNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found"
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error removing team member", extra={"member_id": member_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove team member",
        ) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/update/by-member-id/{member_id}", response_model=TeamMemberResponse)
def update_team_member(
    member_id: UUID,
    payload: TeamMemberUpdateRequest,
    session: Session = Depends(get_session),
    service: TeamMemberService = Depends(get_team_member_service),
) -> TeamMemberResponse:
    """Change the name, email or role of a member."""

    try:
        member = service.update_member(
            session=session, member_id=member_id, changes=payload.changes()
        )
    except EmptyUpdateError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields provided to update",
        ) from exc
    except TeamMemberNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Team member not found"
        ) from exc
    except TeamMemberConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=_MEMBER_CONFLICT
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error updating team member", extra={"member_id": member_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update team member",
        ) from exc

    return TeamMemberResponse.model_validate(member, from_attributes=True)


@router.get("/by-team-id/{team_id}", response_model=list[TeamMemberResponse])
def get_team_members_by_team(
    team_id: UUID,
    session: Session = Depends(get_session),
    service: TeamMemberService = Depends(get_team_member_service),
) -> list[TeamMemberResponse]:
    try:
        members = service.list_team_members(session=session, team_id=team_id)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching team members", extra={"team_id": team_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch team members",
        ) from exc

    return [
        TeamMemberResponse.model_validate(member, from_attributes=True)
        for member in members
    ]
