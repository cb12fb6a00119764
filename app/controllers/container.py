from typing import cast

from dependency_injector import containers, providers

from app.controllers.folder.folder_controller import FolderController
from app.controllers.guardian.dashboard_guardian import DashboardGuardian
from app.controllers.users.user_directory import UserDirectory
from app.repos.container import RepoContainer
from settings import settings


class ControllerContainer(containers.DeclarativeContainer):
    repos: RepoContainer = cast(RepoContainer, providers.DependenciesContainer())

    # A new guardian per call: capability decisions are never shared between requests.
    dashboard_guardian = providers.Factory(
        DashboardGuardian,
        dashboard_repo=repos.dashboard,
        acl_repo=repos.dashboard_acl,
        team_repo=repos.team,
        viewers_can_edit=settings.guardian.viewers_can_edit,
    )

    user_directory = providers.Singleton(UserDirectory, user_repo=repos.user)

    folder_controller = providers.Singleton(
        FolderController,
        dashboard_repo=repos.dashboard,
        guardian_factory=dashboard_guardian.provider,
        user_directory=user_directory,
    )
