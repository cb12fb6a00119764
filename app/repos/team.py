from sqlalchemy import select

from app.models.team import Team, TeamMember
from app.repos.base import BaseRepo


class TeamRepo(BaseRepo[Team]):
    """Repository for Team model operations."""

    def __init__(self) -> None:
        super().__init__(Team)

    async def get_team_ids_by_user(self, org_id: int, user_id: int) -> set[int]:
        """Get the ids of every team the user is a member of in the org."""
        query = select(TeamMember.team_id).where(TeamMember.org_id == org_id, TeamMember.user_id == user_id)
        result = await self._db.session.execute(query)
        return set(result.scalars().all())
