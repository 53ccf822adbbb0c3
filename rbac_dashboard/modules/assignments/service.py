from supabase import Client
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.assignments.schemas import (
    AssignmentOverview, AssignmentOverviewResponse,
    AssignmentMutationResponse, RoleSummary, PermissionSummary, RolePermissionEntry
)
from rbac_dashboard.core.errors import store_error
from rbac_dashboard.core.notifications import refresh_after_mutation
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

JUNCTION_SELECT = "role_id, permission_id, roles!inner(name), permissions!inner(name)"


class AssignmentService:
    """Role <-> permission assignments"""

    def __init__(self, supabase: Client, context: SessionContext):
        self.supabase = supabase
        self.context = context

    def get_overview(self) -> AssignmentOverview:
        """Fetch roles, permissions and the joined junction rows; any failure aborts the whole fetch"""
        try:
            roles_result = self.supabase.table("roles")\
                .select("*")\
                .order("name")\
                .execute()
            permissions_result = self.supabase.table("permissions")\
                .select("*")\
                .order("name")\
                .execute()
            role_permissions_result = self.supabase.table("role_permissions")\
                .select(JUNCTION_SELECT)\
                .execute()

            return AssignmentOverview(
                roles=[RoleSummary(**role) for role in roles_result.data or []],
                permissions=[PermissionSummary(**permission) for permission in permissions_result.data or []],
                role_permissions=[
                    RolePermissionEntry(
                        role_id=rp["role_id"],
                        permission_id=rp["permission_id"],
                        role_name=rp["roles"]["name"],
                        permission_name=rp["permissions"]["name"],
                    )
                    for rp in role_permissions_result.data or []
                ],
            )
        except Exception as e:
            logger.error(f"Error fetching assignment data: {e}")
            raise store_error(e, detail="Failed to fetch data")

    def permissions_for(self, role_id: str) -> List[RolePermissionEntry]:
        return self.get_overview().permissions_for(role_id)

    def commit_assignments(self, role_id: str, permission_ids: List[str]) -> AssignmentMutationResponse:
        """Replace the role's permissions: delete every existing row, then insert the selection.

        The two steps are separate requests. If the insert fails the role is
        left without permissions and the error says so.
        """
        role_id = (role_id or "").strip()
        permission_ids = list(dict.fromkeys(
            pid.strip() for pid in permission_ids or [] if pid and pid.strip()
        ))
        if not role_id or not permission_ids:
            raise HTTPException(status_code=400, detail="Please select a role and at least one permission")

        try:
            self.supabase.table("role_permissions")\
                .delete()\
                .eq("role_id", role_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        try:
            self.supabase.table("role_permissions").insert([
                {"role_id": role_id, "permission_id": pid}
                for pid in permission_ids
            ]).execute()
        except Exception as e:
            logger.warning(
                f"Permissions of role {role_id} were removed but inserting "
                f"{len(permission_ids)} replacements failed: {e}"
            )
            failure = store_error(e)
            raise HTTPException(
                status_code=failure.status_code,
                detail=f"{failure.detail}. The role now has no permissions; re-run the assignment."
            )

        logger.info(f"User {self.context.user_id} assigned {len(permission_ids)} permissions to role {role_id}")
        return self._refreshed("Permissions assigned successfully")

    def remove_permission(self, role_id: str, permission_id: str) -> AssignmentMutationResponse:
        """Remove exactly one junction row"""
        try:
            self.supabase.table("role_permissions")\
                .delete()\
                .eq("role_id", role_id)\
                .eq("permission_id", permission_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        logger.info(f"User {self.context.user_id} removed permission {permission_id} from role {role_id}")
        return self._refreshed("Permission removed successfully")

    def _refreshed(self, message: str) -> AssignmentMutationResponse:
        overview, notifications = refresh_after_mutation(self.get_overview, message, fallback=AssignmentOverview)
        return AssignmentMutationResponse(
            overview=AssignmentOverviewResponse.from_overview(overview),
            notifications=notifications
        )
