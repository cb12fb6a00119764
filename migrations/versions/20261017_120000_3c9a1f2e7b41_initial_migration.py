"""initial_migration

Revision ID: 3c9a1f2e7b41
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c9a1f2e7b41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("login", sa.String(length=190), nullable=False),
        sa.Column("email", sa.String(length=190), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("api_key", sa.String(length=255), nullable=True),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("login"),
        sa.UniqueConstraint("api_key"),
    )
    op.create_table(
        "org_users",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "user_id", name="uq_org_user_org_id_user_id"),
    )
    op.create_index(op.f("ix_org_users_org_id"), "org_users", ["org_id"], unique=False)
    op.create_index(op.f("ix_org_users_user_id"), "org_users", ["user_id"], unique=False)
    op.create_table(
        "teams",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=190), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "name", name="uq_team_org_id_name"),
    )
    op.create_index(op.f("ix_teams_org_id"), "teams", ["org_id"], unique=False)
    op.create_table(
        "team_members",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("team_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("team_id", "user_id", name="uq_team_member_team_id_user_id"),
    )
    op.create_index(op.f("ix_team_members_org_id"), "team_members", ["org_id"], unique=False)
    op.create_index(op.f("ix_team_members_team_id"), "team_members", ["team_id"], unique=False)
    op.create_index(op.f("ix_team_members_user_id"), "team_members", ["user_id"], unique=False)
    op.create_table(
        "dashboards",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("is_folder", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("has_acl", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("folder_id", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("created_by", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("updated_by", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("version", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "folder_id", "slug", name="uq_dashboard_org_id_folder_id_slug"),
    )
    op.create_index(op.f("ix_dashboards_org_id"), "dashboards", ["org_id"], unique=False)
    op.create_table(
        "dashboard_acl",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("org_id", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.Column("dashboard_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=True),
        sa.Column("team_id", sa.BigInteger(), nullable=True),
        sa.Column("role", sa.String(length=50), nullable=True),
        sa.Column("permission", sa.SmallInteger(), nullable=False),
        sa.CheckConstraint(
            "(user_id IS NOT NULL)::int + (team_id IS NOT NULL)::int + (role IS NOT NULL)::int = 1",
            name="ck_dashboard_acl_single_target",
        ),
        sa.CheckConstraint("permission IN (1, 2, 4)", name="ck_dashboard_acl_permission"),
        sa.ForeignKeyConstraint(["dashboard_id"], ["dashboards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_dashboard_acl_org_id"), "dashboard_acl", ["org_id"], unique=False)
    op.create_index(op.f("ix_dashboard_acl_dashboard_id"), "dashboard_acl", ["dashboard_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("dashboard_acl")
    op.drop_table("dashboards")
    op.drop_table("team_members")
    op.drop_table("teams")
    op.drop_table("org_users")
    op.drop_table("users")
