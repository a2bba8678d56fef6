"""Create team_members table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0002_create_team_members"
down_revision = "0001_create_calendar_events"
branch_labels = None
depends_on = None

TEAM_ROLE = sa.Enum("owner", "admin", "member", name="team_role")


def upgrade() -> None:
    TEAM_ROLE.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "team_members",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("team_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("role", TEAM_ROLE, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "team_id", "email", name="uq_team_members_team_id_email"
        ),
    )

    op.create_index("ix_team_members_team_id", "team_members", ["team_id"])


def downgrade() -> None:
    op.drop_index("ix_team_members_team_id", table_name="team_members")
    op.drop_table("team_members")
    TEAM_ROLE.drop(op.get_bind(), checkfirst=True)
