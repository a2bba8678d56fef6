"""Team member database schema."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from osc_backend.database.base import BaseSchema
from osc_backend.shared import TeamRole


class TeamMemberSchema(BaseSchema):
    """SQLAlchemy model for a member belonging to a team."""

    __tablename__ = "team_members"
    __table_args__ = (
        UniqueConstraint("team_id", "email", name="uq_team_members_team_id_email"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    team_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    role: Mapped[TeamRole] = mapped_column(
        Enum(
            TeamRole,
            name="team_role",
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
        default=TeamRole.MEMBER,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
