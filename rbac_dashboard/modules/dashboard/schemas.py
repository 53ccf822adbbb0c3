from pydantic import BaseModel
from typing import List, Optional

from rbac_dashboard.core.notifications import Notification
from rbac_dashboard.modules.assignments.schemas import AssignmentOverviewResponse
from rbac_dashboard.modules.permissions.schemas import PermissionResponse
from rbac_dashboard.modules.roles.schemas import RoleResponse

TABS = ["permissions", "roles", "assignments"]


class DashboardUser(BaseModel):
    user_id: str
    email: Optional[str] = None


class DashboardResponse(BaseModel):
    title: str = "RBAC Management Dashboard"
    user: DashboardUser
    tabs: List[str] = TABS
    permissions: List[PermissionResponse]
    roles: List[RoleResponse]
    assignments: AssignmentOverviewResponse
    notifications: List[Notification]
