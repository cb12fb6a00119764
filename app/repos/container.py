from dependency_injector import containers, providers

from app.repos.dashboard import DashboardRepo
from app.repos.dashboard_acl import DashboardAclRepo
from app.repos.team import TeamRepo
from app.repos.user import UserRepo


class RepoContainer(containers.DeclarativeContainer):
    dashboard = providers.Singleton(DashboardRepo)
    dashboard_acl = providers.Singleton(DashboardAclRepo)
    team = providers.Singleton(TeamRepo)
    user = providers.Singleton(UserRepo)
