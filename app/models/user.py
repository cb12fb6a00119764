from enum import Enum

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from .base import Base, TimestampMixin, WithOrg
from .decorators.types import EnumStringType


class OrgRole(Enum):
    Viewer = "Viewer"
    Editor = "Editor"
    Admin = "Admin"


class User(Base, TimestampMixin):
    """User model. org_id is the organization the user is currently signed in to."""

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(sa.String(190), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(sa.String(190), nullable=False)
    name: Mapped[str | None] = mapped_column(sa.String(255), nullable=True)
    api_key: Mapped[str | None] = mapped_column(sa.String(255), nullable=True, unique=True)
    org_id: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<User(login='{self.login}', org_id={self.org_id})>"


class OrgUser(Base, WithOrg, TimestampMixin):
    """Membership of a user in an organization together with the user's role there."""

    __tablename__ = "org_users"

    user_id: Mapped[int] = mapped_column(sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role: Mapped[OrgRole] = mapped_column(EnumStringType(OrgRole), nullable=False)

    __table_args__ = (UniqueConstraint("org_id", "user_id", name="uq_org_user_org_id_user_id"),)
