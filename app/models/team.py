import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from .base import Base, TimestampMixin, WithOrg


class Team(Base, WithOrg, TimestampMixin):
    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(sa.String(190), nullable=False)

    __table_args__ = (UniqueConstraint("org_id", "name", name="uq_team_org_id_name"),)


class TeamMember(Base, WithOrg, TimestampMixin):
    __tablename__ = "team_members"

    team_id: Mapped[int] = mapped_column(sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (UniqueConstraint("team_id", "user_id", name="uq_team_member_team_id_user_id"),)
