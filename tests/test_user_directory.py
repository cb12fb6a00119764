import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.controllers.users.user_directory import ANONYMOUS_LOGIN, UserDirectory
from app.models import OrgRole


async def test_known_user_resolves_to_login(repos):
    repos.user.add(7, "grace", OrgRole.Editor)
    assert await UserDirectory(repos.user).login_for(7) == "grace"


async def test_zero_id_is_anonymous_without_lookup(repos):
    repos.user.error = AssertionError("must not be called")
    assert await UserDirectory(repos.user).login_for(0) == ANONYMOUS_LOGIN


async def test_unknown_user_is_anonymous(repos):
    assert await UserDirectory(repos.user).login_for(99) == ANONYMOUS_LOGIN


async def test_lookup_failure_is_anonymous(repos):
    repos.user.error = SQLAlchemyError("down")
    assert await UserDirectory(repos.user).login_for(7) == "Anonymous"


@pytest.mark.parametrize("error", [OSError("connection refused"), TimeoutError(), RuntimeError("driver")])
async def test_any_lookup_failure_is_anonymous(repos, error):
    repos.user.error = error
    assert await UserDirectory(repos.user).login_for(7) == ANONYMOUS_LOGIN
