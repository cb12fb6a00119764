"""
Folders API router.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path

from app.api.middlewares.authentication import get_signed_in_user
from app.api.payloads.error import APIError
from app.api.payloads.folders import DeleteFolderResponse, Folder, FolderResponse
from app.container import ApplicationContainer
from app.controllers.folder.folder_controller import FolderController
from app.controllers.guardian.models import SignedInUser

router = APIRouter()

# Ids are BIGINT columns.
MAX_FOLDER_ID = 2**63 - 1

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"model": APIError, "description": "Missing or invalid API key"},
    403: {"model": APIError, "description": "Access denied to this folder"},
    404: {"model": APIError, "description": "Folder not found"},
    500: {"model": APIError, "description": "Error while checking folder permissions"},
}


@router.get(
    "/by-slug/{slug}",
    response_model=FolderResponse,
    responses=ERROR_RESPONSES,
    summary="Get a folder by slug",
    description="Gets a folder by slug together with the caller's capabilities on it",
)
@inject
async def get_folder_by_slug(
    slug: str = Path(..., examples=["my-folder"]),
    user: SignedInUser = Depends(get_signed_in_user),
    folder_controller: FolderController = Depends(Provide[ApplicationContainer.controllers.folder_controller]),
) -> FolderResponse:
    view = await folder_controller.get_folder_by_slug(user, user.org_id, slug)
    return FolderResponse(data=Folder.from_view(view))


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses=ERROR_RESPONSES,
    summary="Get a folder",
    description="Gets a folder by ID together with the caller's capabilities on it",
)
@inject
async def get_folder(
    folder_id: int = Path(..., ge=1, le=MAX_FOLDER_ID, examples=[1]),
    user: SignedInUser = Depends(get_signed_in_user),
    folder_controller: FolderController = Depends(Provide[ApplicationContainer.controllers.folder_controller]),
) -> FolderResponse:
    """
    Gets a folder by ID.

    Errors raised by the controller are rendered by the application error handler:
    404 for a missing id or an id that is not a folder, 403 when the caller cannot
    view the folder, 500 when view access could not be determined.
    """
    view = await folder_controller.get_folder(user, user.org_id, folder_id)
    return FolderResponse(data=Folder.from_view(view))


@router.delete(
    "/{folder_id}",
    response_model=DeleteFolderResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a folder",
    description="Deletes a folder and every dashboard in it. Requires permission to save the folder",
)
@inject
async def delete_folder(
    folder_id: int = Path(..., ge=1, le=MAX_FOLDER_ID, examples=[1]),
    user: SignedInUser = Depends(get_signed_in_user),
    folder_controller: FolderController = Depends(Provide[ApplicationContainer.controllers.folder_controller]),
) -> DeleteFolderResponse:
    title = await folder_controller.delete_folder(user, user.org_id, folder_id)
    return DeleteFolderResponse(title=title, message=f"Folder {title} deleted")
