from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.container import ApplicationContainer
from app.controllers.guardian.models import SignedInUser
from app.exceptions import AuthError
from app.repos.user import UserRepo

# Create security scheme instance
security = HTTPBearer(auto_error=False)


@inject
async def get_signed_in_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    user_repo: UserRepo = Depends(Provide[ApplicationContainer.repos.user]),
) -> SignedInUser:
    """
    FastAPI dependency resolving the principal from the Authorization header.

    Args:
        credentials: The HTTP Bearer credentials from the Authorization header
        user_repo: The user repository for database operations

    Returns:
        The signed in user, with the role held in the user's current org

    Raises:
        AuthError: If the API key is missing, unknown, or the user has no role in its org
    """
    if credentials is None:
        raise AuthError("Missing API key.")

    user = await user_repo.get_by_api_key(credentials.credentials)
    if user is None:
        raise AuthError("Invalid API key.")

    role = await user_repo.get_org_role(user.org_id, user.id)
    if role is None:
        raise AuthError("User is not a member of its current organization.", user=user.login)

    return SignedInUser(org_id=user.org_id, user_id=user.id, login=user.login, org_role=role)
