import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.controllers.folder.models import FolderView


class Folder(BaseModel):
    """A folder with the capabilities of the calling user on it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

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

    @classmethod
    def from_view(cls, view: FolderView) -> "Folder":
        return cls(
            id=view.id,
            title=view.title,
            slug=view.slug,
            has_acl=view.has_acl,
            can_view=view.can_view,
            can_edit=view.can_edit,
            can_save=view.can_save,
            can_admin=view.can_admin,
            created_by=view.created_by,
            created=view.created,
            updated_by=view.updated_by,
            updated=view.updated,
            version=view.version,
        )


class FolderResponse(BaseModel):
    """Response model for getting a single folder."""

    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    data: Folder


class DeleteFolderResponse(BaseModel):
    """Response model for deleting a folder."""

    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = Field(..., description="Title of the deleted folder")
    message: str = Field(..., description="Human readable confirmation")
