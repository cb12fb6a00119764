from enum import IntEnum

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, WithOrg
from .decorators.types import EnumStringType
from .user import OrgRole


class PermissionType(IntEnum):
    """Permission levels, ordered so that a higher level includes every lower one."""

    view = 1
    edit = 2
    admin = 4


class DashboardAcl(Base, WithOrg, TimestampMixin):
    """Access-control entry granting a permission on one dashboard to a user, a team or an org role."""

    __tablename__ = "dashboard_acl"

    dashboard_id: Mapped[int] = mapped_column(sa.ForeignKey("dashboards.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)
    team_id: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)
    role: Mapped[OrgRole | None] = mapped_column(EnumStringType(OrgRole), nullable=True)
    permission: Mapped[int] = mapped_column(sa.SmallInteger, nullable=False)

    __table_args__ = (
        sa.CheckConstraint(
            "(user_id IS NOT NULL)::int + (team_id IS NOT NULL)::int + (role IS NOT NULL)::int = 1",
            name="ck_dashboard_acl_single_target",
        ),
        sa.CheckConstraint("permission IN (1, 2, 4)", name="ck_dashboard_acl_permission"),
    )

    def __repr__(self) -> str:
        target = f"user={self.user_id}" if self.user_id else f"team={self.team_id}" if self.team_id else f"role={self.role}"
        return f"<DashboardAcl(dashboard={self.dashboard_id}, {target}, permission={self.permission})>"
