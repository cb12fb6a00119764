"""HTTP tests for the folders API through the wired application container."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.models import OrgRole, PermissionType
from tests.conftest import make_acl, make_dashboard

VIEWER_KEY = "viewer-key"
EDITOR_KEY = "editor-key"


def auth(key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {key}"}


@pytest.fixture(autouse=True)
def _users(repos) -> None:
    repos.user.add(10, "viewer", OrgRole.Viewer, api_key=VIEWER_KEY)
    repos.user.add(11, "editor", OrgRole.Editor, api_key=EDITOR_KEY)


class TestFolderWithoutAcl:
    @pytest.fixture(autouse=True)
    def _folder(self, repos) -> None:
        repos.dashboard.dashboards[1] = make_dashboard(id=1, has_acl=False, created_by=11, updated_by=0, version=3)

    def test_viewer_get(self, client):
        response = client.get("/api/folders/1", headers=auth(VIEWER_KEY))

        assert response.status_code == 200
        folder = response.json()["data"]
        assert folder["canView"] is True
        assert folder["canEdit"] is False
        assert folder["canSave"] is False
        assert folder["canAdmin"] is False

    def test_editor_get(self, client):
        response = client.get("/api/folders/1", headers=auth(EDITOR_KEY))

        assert response.status_code == 200
        folder = response.json()["data"]
        assert folder["canEdit"] is True
        assert folder["canSave"] is True
        assert folder["canAdmin"] is False

    def test_payload_fields(self, client):
        body = client.get("/api/folders/1", headers=auth(VIEWER_KEY)).json()

        assert body["request_id"]
        assert body["data"] == {
            "id": 1,
            "title": "Folder",
            "slug": "folder",
            "hasAcl": False,
            "canView": True,
            "canEdit": False,
            "canSave": False,
            "canAdmin": False,
            "createdBy": "editor",
            "created": "2026-01-02T03:04:05Z",
            "updatedBy": "Anonymous",
            "updated": "2026-01-02T03:04:05Z",
            "version": 3,
        }

    def test_get_by_slug(self, client):
        response = client.get("/api/folders/by-slug/folder", headers=auth(VIEWER_KEY))

        assert response.status_code == 200
        assert response.json()["data"]["id"] == 1

    def test_editor_delete(self, client, repos):
        response = client.delete("/api/folders/1", headers=auth(EDITOR_KEY))

        assert response.status_code == 200
        assert response.json()["title"] == "Folder"
        assert repos.dashboard.deleted == [1]

    def test_viewer_delete_is_forbidden(self, client, repos):
        response = client.delete("/api/folders/1", headers=auth(VIEWER_KEY))

        assert response.status_code == 403
        assert response.json()["error"] == {"type": "forbidden", "message": "Access denied to this folder"}
        assert repos.dashboard.deleted == []


class TestFolderWithAcl:
    @pytest.fixture(autouse=True)
    def _folder(self, repos) -> None:
        repos.dashboard.dashboards[1] = make_dashboard(id=1, has_acl=True)
        repos.dashboard_acl.entries.append(make_acl(1, PermissionType.edit, user_id=200))

    @pytest.mark.parametrize("key", [VIEWER_KEY, EDITOR_KEY])
    def test_get_is_forbidden_for_any_role(self, client, key):
        response = client.get("/api/folders/1", headers=auth(key))

        assert response.status_code == 403
        assert response.json()["error"]["type"] == "forbidden"

    @pytest.mark.parametrize("key", [VIEWER_KEY, EDITOR_KEY])
    def test_delete_is_forbidden_for_any_role(self, client, repos, key):
        response = client.delete("/api/folders/1", headers=auth(key))

        assert response.status_code == 403
        assert repos.dashboard.deleted == []

    def test_team_grant_opens_the_folder(self, client, repos):
        repos.dashboard_acl.entries.append(make_acl(1, PermissionType.edit, team_id=4))
        repos.team.memberships[10] = {4}

        response = client.get("/api/folders/1", headers=auth(VIEWER_KEY))

        assert response.status_code == 200
        folder = response.json()["data"]
        assert (folder["canEdit"], folder["canSave"], folder["canAdmin"]) == (True, True, False)

    def test_acl_failure_is_internal_error_without_details(self, client, repos):
        repos.dashboard_acl.error = SQLAlchemyError("password authentication failed for user grafana")

        response = client.get("/api/folders/1", headers=auth(VIEWER_KEY))

        assert response.status_code == 500
        assert response.json()["error"] == {
            "type": "internal_error",
            "message": "Error while checking folder permissions",
        }
        assert "password" not in response.text

    def test_malformed_acl_entry_is_internal_error(self, client, repos):
        repos.dashboard_acl.entries.append(make_acl(1, 3, user_id=10))

        response = client.get("/api/folders/1", headers=auth(VIEWER_KEY))

        assert response.status_code == 500
        assert response.json()["error"] == {
            "type": "internal_error",
            "message": "Error while checking folder permissions",
        }


class TestNotFound:
    def test_missing_and_non_folder_ids_give_identical_errors(self, client, repos):
        repos.dashboard.dashboards[2] = make_dashboard(id=2, is_folder=False)

        missing = client.get("/api/folders/1", headers=auth(VIEWER_KEY))
        not_a_folder = client.get("/api/folders/2", headers=auth(VIEWER_KEY))

        assert missing.status_code == not_a_folder.status_code == 404
        assert missing.json()["error"] == not_a_folder.json()["error"] == {
            "type": "entity_not_found",
            "message": "Folder not found",
        }


class TestFolderIdBounds:
    @pytest.mark.parametrize("folder_id", ["0", "-1", str(2**63), "ops"])
    def test_out_of_range_id_is_rejected(self, client, repos, folder_id):
        response = client.get(f"/api/folders/{folder_id}", headers=auth(VIEWER_KEY))

        assert response.status_code == 422
        assert response.json()["error"]["type"] == "invalid_data"
        assert repos.dashboard.lookups == 0

    def test_delete_out_of_range_id_is_rejected(self, client, repos):
        response = client.delete(f"/api/folders/{2**63}", headers=auth(EDITOR_KEY))

        assert response.status_code == 422
        assert repos.dashboard.deleted == []


class TestAuthentication:
    def test_missing_key(self, client):
        response = client.get("/api/folders/1")

        assert response.status_code == 401
        assert response.json()["error"]["type"] == "unauthorized_user"

    def test_unknown_key(self, client):
        assert client.get("/api/folders/1", headers=auth("nope")).status_code == 401

    def test_user_without_org_role(self, client, repos):
        repos.user.add(12, "drifter", role=None, api_key="drifter-key")

        assert client.get("/api/folders/1", headers=auth("drifter-key")).status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
