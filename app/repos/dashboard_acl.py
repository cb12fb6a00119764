from typing import Sequence

from app.models.dashboard_acl import DashboardAcl
from app.repos.base import BaseRepo


class DashboardAclRepo(BaseRepo[DashboardAcl]):
    """Repository for dashboard access-control entries."""

    def __init__(self) -> None:
        super().__init__(DashboardAcl)

    async def list_by_dashboard(self, org_id: int, dashboard_id: int) -> Sequence[DashboardAcl]:
        """Get the explicit ACL entries stored for a dashboard."""
        result = await self.execute(
            self.base_stmt.where(DashboardAcl.org_id == org_id, DashboardAcl.dashboard_id == dashboard_id).order_by(
                DashboardAcl.id
            )
        )
        return result.all()
