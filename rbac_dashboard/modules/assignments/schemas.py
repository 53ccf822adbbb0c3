from pydantic import BaseModel
from typing import Optional, List

from rbac_dashboard.core.notifications import Notification


class RoleSummary(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class PermissionSummary(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class RolePermissionEntry(BaseModel):
    role_id: str
    permission_id: str
    role_name: str
    permission_name: str


class RoleAssignments(BaseModel):
    role: RoleSummary
    permissions: List[RolePermissionEntry]
    permission_count: int


class AssignmentOverview(BaseModel):
    roles: List[RoleSummary] = []
    permissions: List[PermissionSummary] = []
    role_permissions: List[RolePermissionEntry] = []

    def permissions_for(self, role_id: str) -> List[RolePermissionEntry]:
        return [rp for rp in self.role_permissions if rp.role_id == role_id]

    def has_role(self, role_id: str) -> bool:
        return any(role.id == role_id for role in self.roles)

    def by_role(self) -> List[RoleAssignments]:
        grouped = []
        for role in self.roles:
            entries = self.permissions_for(role.id)
            grouped.append(RoleAssignments(role=role, permissions=entries, permission_count=len(entries)))
        return grouped


class AssignmentOverviewResponse(AssignmentOverview):
    assignments: List[RoleAssignments] = []

    @classmethod
    def from_overview(cls, overview: AssignmentOverview) -> "AssignmentOverviewResponse":
        return cls(**overview.model_dump(exclude={"assignments"}), assignments=overview.by_role())


class AssignmentCommit(BaseModel):
    role_id: str = ""
    permission_ids: List[str] = []


class AssignmentSelection(BaseModel):
    role_id: str
    permission_ids: List[str]


class AssignmentMutationResponse(BaseModel):
    overview: AssignmentOverviewResponse
    notifications: List[Notification]
