"""
Capability resolution for dashboards and folders.

A guardian answers four independent questions (view, edit, save, admin) for one
principal on one dashboard. When the dashboard has no access control of its own
the org-role defaults apply; otherwise only explicit ACL entries count and the
principal gets the highest permission granted by any entry matching its user id,
one of its teams or its org role. Nothing matching means no access, whatever the
org role.
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.controllers.guardian.models import DEFAULT_ACL, AclItem, SignedInUser
from app.exceptions import DashboardNotFoundError, GuardianError
from app.models.dashboard_acl import PermissionType
from app.repos.dashboard import DashboardRepo
from app.repos.dashboard_acl import DashboardAclRepo
from app.repos.team import TeamRepo

logger = logging.getLogger(__name__)


class DashboardGuardian:
    """Resolves the capabilities of one principal on one dashboard. Built fresh for every request."""

    def __init__(
        self,
        dashboard_id: int,
        org_id: int,
        user: SignedInUser,
        dashboard_repo: DashboardRepo,
        acl_repo: DashboardAclRepo,
        team_repo: TeamRepo,
        viewers_can_edit: bool = False,
    ) -> None:
        self.dashboard_id = dashboard_id
        self.org_id = org_id
        self.user = user
        self._dashboard_repo = dashboard_repo
        self._acl_repo = acl_repo
        self._team_repo = team_repo
        self._viewers_can_edit = viewers_can_edit
        self._acl: Sequence[AclItem] | None = None
        self._team_ids: set[int] | None = None

    async def can_view(self) -> bool:
        return await self.has_permission(PermissionType.view)

    async def can_edit(self) -> bool:
        if self._viewers_can_edit:
            return await self.has_permission(PermissionType.view)
        return await self.has_permission(PermissionType.edit)

    async def can_save(self) -> bool:
        return await self.has_permission(PermissionType.edit)

    async def can_admin(self) -> bool:
        return await self.has_permission(PermissionType.admin)

    async def has_permission(self, permission: PermissionType) -> bool:
        """Raises GuardianError when the ACL or the user's teams cannot be loaded."""
        effective = await self.effective_permission()
        return effective is not None and effective >= permission

    async def effective_permission(self) -> PermissionType | None:
        """Highest permission granted to the user by any matching entry, None when nothing matches."""
        acl = await self._get_acl()

        granted: list[PermissionType] = []
        team_items: list[AclItem] = []
        for item in acl:
            if item.user_id is not None:
                if not self.user.is_anonymous and item.user_id == self.user.user_id:
                    granted.append(item.permission)
            elif item.role is not None:
                if item.role == self.user.org_role:
                    granted.append(item.permission)
            elif item.team_id is not None:
                team_items.append(item)

        if team_items:
            team_ids = await self._get_team_ids()
            granted.extend(item.permission for item in team_items if item.team_id in team_ids)

        return max(granted, default=None)

    async def _get_acl(self) -> Sequence[AclItem]:
        if self._acl is not None:
            return self._acl

        try:
            dashboard = await self._dashboard_repo.get_by_org_and_id(self.org_id, self.dashboard_id)
            if dashboard.has_acl:
                rows = await self._acl_repo.list_by_dashboard(self.org_id, self.dashboard_id)
                self._acl = [AclItem.from_model(row) for row in rows]
            else:
                self._acl = DEFAULT_ACL
        except (SQLAlchemyError, DashboardNotFoundError, ValueError) as e:
            # ValueError: a stored permission or role that no enum member matches.
            raise GuardianError(
                f"Failed to load ACL for dashboard {self.dashboard_id}",
                cause=e,
                org_id=self.org_id,
                dashboard_id=self.dashboard_id,
            ) from e

        return self._acl

    async def _get_team_ids(self) -> set[int]:
        if self._team_ids is not None:
            return self._team_ids
        if self.user.is_anonymous:
            self._team_ids = set()
            return self._team_ids

        try:
            self._team_ids = await self._team_repo.get_team_ids_by_user(self.org_id, self.user.user_id)
        except SQLAlchemyError as e:
            raise GuardianError(
                f"Failed to load teams for user {self.user.user_id}", cause=e, org_id=self.org_id
            ) from e

        logger.debug(f"Loaded teams for guardian; user_id: {self.user.user_id}, team_ids: {sorted(self._team_ids)}")
        return self._team_ids
