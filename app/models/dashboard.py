import re

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from .base import Base, TimestampMixin, WithOrg

_SLUG_STRIP = re.compile(r"[^\w\s-]")
_SLUG_DASHES = re.compile(r"[\s_-]+")


def slugify(title: str) -> str:
    """Derive a URL slug from a dashboard or folder title."""
    slug = _SLUG_STRIP.sub("", title.strip().lower())
    return _SLUG_DASHES.sub("-", slug).strip("-")


class Dashboard(Base, WithOrg, TimestampMixin):
    """Dashboard-like record. Folders share this table and are flagged with is_folder."""

    __tablename__ = "dashboards"

    title: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    slug: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    is_folder: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, default=False, server_default=sa.false())
    has_acl: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, default=False, server_default=sa.false())
    folder_id: Mapped[int] = mapped_column(sa.BigInteger, nullable=False, default=0, server_default="0")
    created_by: Mapped[int] = mapped_column(sa.BigInteger, nullable=False, default=0, server_default="0")
    updated_by: Mapped[int] = mapped_column(sa.BigInteger, nullable=False, default=0, server_default="0")
    version: Mapped[int] = mapped_column(sa.Integer, nullable=False, default=0, server_default="0")

    __table_args__ = (UniqueConstraint("org_id", "folder_id", "slug", name="uq_dashboard_org_id_folder_id_slug"),)

    @classmethod
    def new_folder(cls, title: str, org_id: int = 0) -> "Dashboard":
        """Build an unsaved folder record."""
        return cls(
            title=title,
            slug=slugify(title),
            org_id=org_id,
            is_folder=True,
            has_acl=False,
            folder_id=0,
            created_by=0,
            updated_by=0,
            version=0,
        )

    def __repr__(self) -> str:
        kind = "folder" if self.is_folder else "dashboard"
        return f"<Dashboard(id={self.id}, slug='{self.slug}', kind='{kind}')>"
