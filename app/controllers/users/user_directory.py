import logging

from app.repos.user import UserRepo

ANONYMOUS_LOGIN = "Anonymous"


class UserDirectory:
    """Maps user ids to display logins."""

    def __init__(self, user_repo: UserRepo) -> None:
        self._logger = logging.getLogger(__name__)
        self._user_repo = user_repo

    async def login_for(self, user_id: int) -> str:
        """Login of the user, or ANONYMOUS_LOGIN for a zero, unknown or unreadable user. Never raises."""
        if user_id <= 0:
            return ANONYMOUS_LOGIN

        try:
            login = await self._user_repo.get_login(user_id)
        except Exception as e:
            self._logger.warning(f"Failed to resolve user login; user_id: {user_id}, error: {e}")
            return ANONYMOUS_LOGIN

        return login or ANONYMOUS_LOGIN
