from supabase import Client
from rbac_dashboard.core.notifications import Notification, error
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.assignments.schemas import AssignmentOverview, AssignmentOverviewResponse
from rbac_dashboard.modules.assignments.service import AssignmentService
from rbac_dashboard.modules.dashboard.schemas import DashboardResponse, DashboardUser
from rbac_dashboard.modules.permissions.service import PermissionService
from rbac_dashboard.modules.roles.service import RoleService
from fastapi import HTTPException
from typing import Callable, List, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardService:
    """Loads every tab; a failing tab is reported and left empty instead of failing the page"""

    def __init__(self, supabase: Client, context: SessionContext):
        self.context = context
        self.permissions = PermissionService(supabase, context)
        self.roles = RoleService(supabase, context)
        self.assignments = AssignmentService(supabase, context)

    def load(self) -> DashboardResponse:
        notifications: List[Notification] = []

        def load_tab(fetch: Callable[[], T], empty: Callable[[], T]) -> T:
            try:
                return fetch()
            except HTTPException as e:
                logger.warning(f"Dashboard tab failed to load: {e.detail}")
                notifications.append(error(str(e.detail)))
                return empty()

        permissions = load_tab(self.permissions.list_permissions, list)
        roles = load_tab(self.roles.list_roles, list)
        overview = load_tab(self.assignments.get_overview, AssignmentOverview)

        return DashboardResponse(
            user=DashboardUser(user_id=self.context.user_id, email=self.context.email),
            permissions=permissions,
            roles=roles,
            assignments=AssignmentOverviewResponse.from_overview(overview),
            notifications=notifications,
        )
