"""
Shared fixtures: principals, folder records and in-memory repositories.

Run:  pytest tests/ -v
"""

import os

os.environ["APP_ENV"] = "test"

from datetime import UTC, datetime  # noqa: E402
from typing import Iterator  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.container import get_wire_container  # noqa: E402
from app.controllers.guardian.dashboard_guardian import DashboardGuardian  # noqa: E402
from app.controllers.guardian.models import SignedInUser  # noqa: E402
from app.create_app import create_app  # noqa: E402
from app.exceptions import DashboardNotFoundError  # noqa: E402
from app.models import Dashboard, DashboardAcl, OrgRole, PermissionType, User  # noqa: E402

ORG_ID = 1
CREATED_AT = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)


def make_dashboard(
    id: int = 1,
    title: str = "Folder",
    org_id: int = ORG_ID,
    is_folder: bool = True,
    has_acl: bool = False,
    created_by: int = 0,
    updated_by: int = 0,
    version: int = 1,
    folder_id: int = 0,
) -> Dashboard:
    dashboard = Dashboard.new_folder(title, org_id=org_id)
    dashboard.id = id
    dashboard.is_folder = is_folder
    dashboard.has_acl = has_acl
    dashboard.created_by = created_by
    dashboard.updated_by = updated_by
    dashboard.version = version
    dashboard.folder_id = folder_id
    dashboard.created_at = CREATED_AT
    dashboard.updated_at = CREATED_AT
    return dashboard


def make_acl(
    dashboard_id: int,
    permission: PermissionType | int,
    user_id: int | None = None,
    team_id: int | None = None,
    role: OrgRole | None = None,
) -> DashboardAcl:
    return DashboardAcl(
        org_id=ORG_ID,
        dashboard_id=dashboard_id,
        permission=int(permission),
        user_id=user_id,
        team_id=team_id,
        role=role,
    )


def make_user(role: OrgRole, user_id: int = 10, is_anonymous: bool = False) -> SignedInUser:
    return SignedInUser(
        org_id=ORG_ID, user_id=user_id, login=f"{role.value.lower()}-{user_id}", org_role=role, is_anonymous=is_anonymous
    )


class FakeDashboardRepo:
    def __init__(self, *dashboards: Dashboard) -> None:
        self.dashboards = {d.id: d for d in dashboards}
        self.deleted: list[int] = []
        self.error: Exception | None = None
        self.lookups = 0

    async def get_by_org_and_id(self, org_id: int, id: int) -> Dashboard:
        self.lookups += 1
        if self.error is not None:
            raise self.error
        dashboard = self.dashboards.get(id)
        if dashboard is None or dashboard.org_id != org_id:
            raise DashboardNotFoundError(org_id=org_id, dashboard_id=id)
        return dashboard

    async def get_by_org_and_slug(self, org_id: int, slug: str) -> Dashboard:
        for dashboard in self.dashboards.values():
            if dashboard.org_id == org_id and dashboard.folder_id == 0 and dashboard.slug == slug:
                return dashboard
        raise DashboardNotFoundError(org_id=org_id)

    async def delete_with_children(self, dashboard: Dashboard) -> None:
        self.deleted.append(dashboard.id)
        self.dashboards.pop(dashboard.id, None)


class FakeAclRepo:
    def __init__(self, *entries: DashboardAcl) -> None:
        self.entries = list(entries)
        self.error: Exception | None = None
        self.calls = 0

    async def list_by_dashboard(self, org_id: int, dashboard_id: int) -> list[DashboardAcl]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return [e for e in self.entries if e.org_id == org_id and e.dashboard_id == dashboard_id]


class FakeTeamRepo:
    def __init__(self, memberships: dict[int, set[int]] | None = None) -> None:
        self.memberships = memberships or {}
        self.error: Exception | None = None
        self.calls = 0

    async def get_team_ids_by_user(self, org_id: int, user_id: int) -> set[int]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return set(self.memberships.get(user_id, set()))


class FakeUserRepo:
    def __init__(self) -> None:
        self.logins: dict[int, str] = {}
        self.api_keys: dict[str, User] = {}
        self.roles: dict[tuple[int, int], OrgRole] = {}
        self.error: Exception | None = None

    def add(self, id: int, login: str, role: OrgRole | None = None, api_key: str | None = None) -> User:
        user = User(login=login, email=f"{login}@example.com", api_key=api_key, org_id=ORG_ID)
        user.id = id
        self.logins[id] = login
        if api_key is not None:
            self.api_keys[api_key] = user
        if role is not None:
            self.roles[(ORG_ID, id)] = role
        return user

    async def get_login(self, user_id: int) -> str | None:
        if self.error is not None:
            raise self.error
        return self.logins.get(user_id)

    async def get_by_api_key(self, api_key: str) -> User | None:
        return self.api_keys.get(api_key)

    async def get_org_role(self, org_id: int, user_id: int) -> OrgRole | None:
        return self.roles.get((org_id, user_id))


class Repos:
    def __init__(self) -> None:
        self.dashboard = FakeDashboardRepo()
        self.dashboard_acl = FakeAclRepo()
        self.team = FakeTeamRepo()
        self.user = FakeUserRepo()

    def guardian(self, dashboard_id: int, user: SignedInUser, viewers_can_edit: bool = False) -> DashboardGuardian:
        return DashboardGuardian(
            dashboard_id=dashboard_id,
            org_id=user.org_id,
            user=user,
            dashboard_repo=self.dashboard,  # type: ignore[arg-type]
            acl_repo=self.dashboard_acl,  # type: ignore[arg-type]
            team_repo=self.team,  # type: ignore[arg-type]
            viewers_can_edit=viewers_can_edit,
        )


@pytest.fixture
def repos() -> Repos:
    return Repos()


@pytest.fixture
def viewer() -> SignedInUser:
    return make_user(OrgRole.Viewer)


@pytest.fixture
def editor() -> SignedInUser:
    return make_user(OrgRole.Editor)


@pytest.fixture
def admin() -> SignedInUser:
    return make_user(OrgRole.Admin)


@pytest.fixture
def client(repos: Repos) -> Iterator[TestClient]:
    """HTTP client for the app with every repository replaced by its in-memory fake."""
    container = get_wire_container()
    container.repos.dashboard.override(providers.Object(repos.dashboard))
    container.repos.dashboard_acl.override(providers.Object(repos.dashboard_acl))
    container.repos.team.override(providers.Object(repos.team))
    container.repos.user.override(providers.Object(repos.user))

    with TestClient(create_app()) as test_client:
        yield test_client

    container.unwire()
