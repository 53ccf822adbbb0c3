from supabase import Client
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.permissions.schemas import (
    PermissionCreate, PermissionUpdate, PermissionResponse, PermissionMutationResponse
)
from rbac_dashboard.core.errors import store_error
from rbac_dashboard.core.notifications import refresh_after_mutation
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class PermissionService:
    def __init__(self, supabase: Client, context: SessionContext):
        self.supabase = supabase
        self.context = context

    def list_permissions(self) -> List[PermissionResponse]:
        """List all permissions ordered by name"""
        try:
            result = self.supabase.table("permissions")\
                .select("*")\
                .order("name")\
                .execute()
            return [PermissionResponse(**permission) for permission in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching permissions: {e}")
            raise store_error(e, detail="Failed to fetch permissions")

    def create_permission(self, permission_data: PermissionCreate) -> PermissionMutationResponse:
        """Create a new permission"""
        try:
            result = self.supabase.table("permissions").insert({
                "name": permission_data.name,
                "description": permission_data.description
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create permission")

            permission = PermissionResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise store_error(e, conflict_detail=f'A permission named "{permission_data.name}" already exists')

        logger.info(f"User {self.context.user_id} created permission {permission.name}")
        return self._refreshed(permission, "Permission created successfully")

    def update_permission(self, permission_id: str, permission_data: PermissionUpdate) -> PermissionMutationResponse:
        """Update permission; an unknown id affects zero rows and is not an error"""
        try:
            result = self.supabase.table("permissions")\
                .update({
                    "name": permission_data.name,
                    "description": permission_data.description
                })\
                .eq("id", permission_id)\
                .execute()
        except Exception as e:
            raise store_error(e, conflict_detail=f'A permission named "{permission_data.name}" already exists')

        permission: Optional[PermissionResponse] = None
        if result.data:
            permission = PermissionResponse(**result.data[0])
            logger.info(f"User {self.context.user_id} updated permission {permission_id}")
        else:
            logger.info(f"Update of permission {permission_id} matched no rows")
        return self._refreshed(permission, "Permission updated successfully")

    def delete_permission(self, permission_id: str, confirmed: bool = False) -> PermissionMutationResponse:
        """Delete permission; the store cascades its role_permissions rows"""
        if not confirmed:
            raise HTTPException(status_code=400, detail="Deletion must be confirmed")
        try:
            self.supabase.table("permissions")\
                .delete()\
                .eq("id", permission_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        logger.info(f"User {self.context.user_id} deleted permission {permission_id}")
        return self._refreshed(None, "Permission deleted successfully")

    def _refreshed(self, permission: Optional[PermissionResponse], message: str) -> PermissionMutationResponse:
        permissions, notifications = refresh_after_mutation(self.list_permissions, message)
        return PermissionMutationResponse(
            permission=permission,
            permissions=permissions,
            notifications=notifications
        )
