from .dashboard import DashboardRepo
from .dashboard_acl import DashboardAclRepo
from .team import TeamRepo
from .user import UserRepo

__all__ = [
    "DashboardAclRepo",
    "DashboardRepo",
    "TeamRepo",
    "UserRepo",
]
