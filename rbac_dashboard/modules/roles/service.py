from supabase import Client
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.roles.schemas import (
    RoleCreate, RoleUpdate, RoleResponse, RoleMutationResponse
)
from rbac_dashboard.core.errors import store_error
from rbac_dashboard.core.notifications import refresh_after_mutation
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(self, supabase: Client, context: SessionContext):
        self.supabase = supabase
        self.context = context

    def list_roles(self) -> List[RoleResponse]:
        """List all roles ordered by name"""
        try:
            result = self.supabase.table("roles")\
                .select("*")\
                .order("name")\
                .execute()
            return [RoleResponse(**role) for role in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching roles: {e}")
            raise store_error(e, detail="Failed to fetch roles")

    def create_role(self, role_data: RoleCreate) -> RoleMutationResponse:
        """Create a new role"""
        try:
            result = self.supabase.table("roles").insert({
                "name": role_data.name,
                "description": role_data.description
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create role")

            role = RoleResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise store_error(e, conflict_detail=f'A role named "{role_data.name}" already exists')

        logger.info(f"User {self.context.user_id} created role {role.name}")
        return self._refreshed(role, "Role created successfully")

    def update_role(self, role_id: str, role_data: RoleUpdate) -> RoleMutationResponse:
        """Update role; an unknown id affects zero rows and is not an error"""
        try:
            result = self.supabase.table("roles")\
                .update({
                    "name": role_data.name,
                    "description": role_data.description
                })\
                .eq("id", role_id)\
                .execute()
        except Exception as e:
            raise store_error(e, conflict_detail=f'A role named "{role_data.name}" already exists')

        role: Optional[RoleResponse] = None
        if result.data:
            role = RoleResponse(**result.data[0])
            logger.info(f"User {self.context.user_id} updated role {role_id}")
        return self._refreshed(role, "Role updated successfully")

    def delete_role(self, role_id: str, confirmed: bool = False) -> RoleMutationResponse:
        """Delete role; the store cascades role_permissions and user_roles rows"""
        if not confirmed:
            raise HTTPException(status_code=400, detail="Deletion must be confirmed")
        try:
            self.supabase.table("roles")\
                .delete()\
                .eq("id", role_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        logger.info(f"User {self.context.user_id} deleted role {role_id}")
        return self._refreshed(None, "Role deleted successfully")

    def _refreshed(self, role: Optional[RoleResponse], message: str) -> RoleMutationResponse:
        roles, notifications = refresh_after_mutation(self.list_roles, message)
        return RoleMutationResponse(role=role, roles=roles, notifications=notifications)
