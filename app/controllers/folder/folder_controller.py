import logging
from typing import Awaitable, Callable

from app.controllers.folder.errors import to_folder_error
from app.controllers.folder.models import FolderView
from app.controllers.guardian.dashboard_guardian import DashboardGuardian
from app.controllers.guardian.models import SignedInUser
from app.controllers.users.user_directory import UserDirectory
from app.exceptions import (
    DashboardNotFoundError,
    FolderAccessDeniedError,
    GuardianError,
    NotAFolderError,
)
from app.models.dashboard import Dashboard
from app.repos.dashboard import DashboardRepo

GuardianFactory = Callable[..., DashboardGuardian]


class FolderController:
    """Authorized reads and deletes of folders."""

    def __init__(
        self, dashboard_repo: DashboardRepo, guardian_factory: GuardianFactory, user_directory: UserDirectory
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._dashboard_repo = dashboard_repo
        self._guardian_factory = guardian_factory
        self._user_directory = user_directory

    async def get_folder(self, user: SignedInUser, org_id: int, folder_id: int) -> FolderView:
        """
        Get a folder by id along with the user's capabilities on it.

        Raises:
            FolderNotFoundError: no such id in the org, or the id is not a folder
            FolderAccessDeniedError: the user cannot view the folder
            FolderPermissionCheckError: view access could not be determined
        """
        folder = await self.fetch_folder_by_id(org_id, folder_id)
        return await self._build_view(user, org_id, folder)

    async def get_folder_by_slug(self, user: SignedInUser, org_id: int, slug: str) -> FolderView:
        """Same as get_folder, addressed by slug."""
        folder = await self.fetch_folder_by_slug(org_id, slug)
        return await self._build_view(user, org_id, folder)

    async def delete_folder(self, user: SignedInUser, org_id: int, folder_id: int) -> str:
        """Delete a folder the user can save. Returns the deleted folder's title."""
        folder = await self.fetch_folder_by_id(org_id, folder_id)
        guardian = self._new_guardian(folder, org_id, user)
        await self._require(guardian.can_save, user, folder, "delete")

        await self._dashboard_repo.delete_with_children(folder)
        self._logger.info(f"Folder deleted; org_id: {org_id}, folder_id: {folder.id}, user_id: {user.user_id}")
        return folder.title

    async def fetch_folder_by_id(self, org_id: int, folder_id: int) -> Dashboard:
        """Raises FolderNotFoundError for a missing id and for an id that is not a folder."""
        return await self._fetch_folder(self._dashboard_repo.get_by_org_and_id(org_id, folder_id))

    async def fetch_folder_by_slug(self, org_id: int, slug: str) -> Dashboard:
        """Raises FolderNotFoundError for a missing slug and for a slug that is not a folder."""
        return await self._fetch_folder(self._dashboard_repo.get_by_org_and_slug(org_id, slug))

    async def _fetch_folder(self, lookup: Awaitable[Dashboard]) -> Dashboard:
        try:
            dashboard = await lookup
            if not dashboard.is_folder:
                raise NotAFolderError(org_id=dashboard.org_id, dashboard_id=dashboard.id)
        except (DashboardNotFoundError, NotAFolderError) as e:
            raise to_folder_error(e) from e
        return dashboard

    async def _build_view(self, user: SignedInUser, org_id: int, folder: Dashboard) -> FolderView:
        guardian = self._new_guardian(folder, org_id, user)
        await self._require(guardian.can_view, user, folder, "view")

        # View access is established; the remaining capabilities are best effort.
        can_edit = await self._best_effort(guardian.can_edit, "edit")
        can_save = await self._best_effort(guardian.can_save, "save")
        can_admin = await self._best_effort(guardian.can_admin, "admin")

        return FolderView(
            id=folder.id,
            title=folder.title,
            slug=folder.slug,
            has_acl=folder.has_acl,
            can_view=True,
            can_edit=can_edit,
            can_save=can_save,
            can_admin=can_admin,
            created_by=await self._user_directory.login_for(folder.created_by),
            created=folder.created_at,
            updated_by=await self._user_directory.login_for(folder.updated_by),
            updated=folder.updated_at,
            version=folder.version,
        )

    def _new_guardian(self, folder: Dashboard, org_id: int, user: SignedInUser) -> DashboardGuardian:
        return self._guardian_factory(dashboard_id=folder.id, org_id=org_id, user=user)

    async def _require(
        self, check: Callable[[], Awaitable[bool]], user: SignedInUser, folder: Dashboard, action: str
    ) -> None:
        try:
            allowed = await check()
        except GuardianError as e:
            self._logger.warning(f"Folder permission check failed; action: {action}, folder_id: {folder.id}, error: {e}")
            raise to_folder_error(e) from e

        if not allowed:
            self._logger.info(
                f"Folder access denied; action: {action}, folder_id: {folder.id}, user_id: {user.user_id}"
            )
            raise FolderAccessDeniedError(action=action, user=user.login, dashboard_id=folder.id)

    async def _best_effort(self, check: Callable[[], Awaitable[bool]], capability: str) -> bool:
        try:
            return await check()
        except GuardianError as e:
            self._logger.warning(f"Treating capability as denied; capability: {capability}, error: {e}")
            return False
