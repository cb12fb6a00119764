from app.exceptions import DashboardNotFoundError
from app.models.dashboard import Dashboard
from app.repos.base import BaseRepo


class DashboardRepo(BaseRepo[Dashboard]):
    """Repository for dashboards and folders. Every lookup is scoped to an org."""

    def __init__(self) -> None:
        super().__init__(Dashboard)

    async def get_by_org_and_id(self, org_id: int, id: int) -> Dashboard:
        """Get a dashboard by id. Raises DashboardNotFoundError on miss."""
        result = await self.execute(self.base_stmt.where(Dashboard.org_id == org_id, Dashboard.id == id))
        return self._found(result.one_or_none(), org_id=org_id, dashboard_id=id)

    async def get_by_org_and_slug(self, org_id: int, slug: str) -> Dashboard:
        """
        Get a root-level dashboard by slug. Raises DashboardNotFoundError on miss.

        Slugs are unique per parent folder only, so the lookup is restricted to the
        root, where every folder lives.
        """
        result = await self.execute(
            self.base_stmt.where(Dashboard.org_id == org_id, Dashboard.folder_id == 0, Dashboard.slug == slug)
        )
        return self._found(result.one_or_none(), org_id=org_id)

    async def delete_with_children(self, dashboard: Dashboard) -> None:
        """Delete a dashboard and, for a folder, every dashboard stored in it."""
        if dashboard.is_folder:
            children = await self.execute(
                self.base_stmt.where(Dashboard.org_id == dashboard.org_id, Dashboard.folder_id == dashboard.id)
            )
            for child in children.all():
                await self._db.session.delete(child)
        await self.delete(dashboard)

    @staticmethod
    def _found(dashboard: Dashboard | None, **context: int) -> Dashboard:
        if dashboard is None:
            raise DashboardNotFoundError(**context)
        return dashboard
