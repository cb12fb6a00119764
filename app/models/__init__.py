from .base import Base
from .dashboard import Dashboard
from .dashboard_acl import DashboardAcl, PermissionType
from .team import Team, TeamMember
from .user import OrgRole, OrgUser, User

__all__ = [
    "Base",
    "Dashboard",
    "DashboardAcl",
    "OrgRole",
    "OrgUser",
    "PermissionType",
    "Team",
    "TeamMember",
    "User",
]
