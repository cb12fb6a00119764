from sqlalchemy import select

from app.models.user import OrgRole, OrgUser, User
from app.repos.base import BaseRepo


class UserRepo(BaseRepo[User]):
    """Repository for User model operations."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_api_key(self, api_key: str) -> User | None:
        """Get user by API key."""
        result = await self.execute(self.base_stmt.where(User.api_key == api_key))
        return result.one_or_none()

    async def get_login(self, user_id: int) -> str | None:
        """Get the login of a user, or None when the user does not exist."""
        result = await self._db.session.execute(select(User.login).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_org_role(self, org_id: int, user_id: int) -> OrgRole | None:
        """Get the role a user holds in an org."""
        result = await self._db.session.execute(
            select(OrgUser.role).where(OrgUser.org_id == org_id, OrgUser.user_id == user_id)
        )
        return result.scalar_one_or_none()
