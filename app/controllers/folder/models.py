from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FolderView:
    """A folder as seen by one principal, with that principal's capabilities on it."""

    id: int
    title: str
    slug: str
    has_acl: bool
    can_view: bool
    can_edit: bool
    can_save: bool
    can_admin: bool
    created_by: str
    created: datetime
    updated_by: str
    updated: datetime
    version: int
