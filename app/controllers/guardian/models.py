from dataclasses import dataclass

from app.models.dashboard_acl import DashboardAcl, PermissionType
from app.models.user import OrgRole


@dataclass(frozen=True)
class SignedInUser:
    """The authenticated principal of a request."""

    org_id: int
    user_id: int
    login: str
    org_role: OrgRole
    is_anonymous: bool = False


@dataclass(frozen=True)
class AclItem:
    """One access-control entry. Exactly one of user_id, team_id and role is set."""

    permission: PermissionType
    user_id: int | None = None
    team_id: int | None = None
    role: OrgRole | None = None

    @classmethod
    def from_model(cls, acl: DashboardAcl) -> "AclItem":
        return cls(
            permission=PermissionType(acl.permission),
            user_id=acl.user_id or None,
            team_id=acl.team_id or None,
            role=acl.role,
        )


# Applies to every dashboard and folder without explicit access control.
DEFAULT_ACL: tuple[AclItem, ...] = (
    AclItem(permission=PermissionType.view, role=OrgRole.Viewer),
    AclItem(permission=PermissionType.edit, role=OrgRole.Editor),
    AclItem(permission=PermissionType.admin, role=OrgRole.Admin),
)
