from supabase import Client
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.user_roles.schemas import UserRoleResponse, UserRoleMutationResponse
from rbac_dashboard.core.errors import store_error
from rbac_dashboard.core.notifications import refresh_after_mutation
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class UserRoleService:
    def __init__(self, supabase: Client, context: SessionContext):
        self.supabase = supabase
        self.context = context

    def list_user_roles(self, user_id: Optional[str] = None) -> List[UserRoleResponse]:
        """List role grants with role names, optionally for one user"""
        try:
            query = self.supabase.table("user_roles")\
                .select("user_id, role_id, created_at, roles!inner(name)")
            if user_id:
                query = query.eq("user_id", user_id)
            result = query.order("created_at").execute()
            return [
                UserRoleResponse(
                    user_id=row["user_id"],
                    role_id=row["role_id"],
                    role_name=row["roles"]["name"],
                    created_at=row["created_at"],
                )
                for row in result.data or []
            ]
        except Exception as e:
            logger.error(f"Error fetching user roles: {e}")
            raise store_error(e, detail="Failed to fetch user roles")

    def get_role_names(self, user_id: str) -> List[str]:
        return sorted(grant.role_name for grant in self.list_user_roles(user_id))

    def grant_role(self, user_id: str, role_id: str) -> UserRoleMutationResponse:
        """Grant a role to a user account"""
        try:
            self.supabase.table("user_roles").insert({
                "user_id": user_id,
                "role_id": role_id
            }).execute()
        except Exception as e:
            raise store_error(e, conflict_detail="Role already granted to user")

        logger.info(f"User {self.context.user_id} granted role {role_id} to {user_id}")
        return self._refreshed(user_id, "Role granted successfully")

    def revoke_role(self, user_id: str, role_id: str) -> UserRoleMutationResponse:
        """Revoke a role from a user account"""
        try:
            self.supabase.table("user_roles")\
                .delete()\
                .eq("user_id", user_id)\
                .eq("role_id", role_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        logger.info(f"User {self.context.user_id} revoked role {role_id} from {user_id}")
        return self._refreshed(user_id, "Role revoked successfully")

    def _refreshed(self, user_id: str, message: str) -> UserRoleMutationResponse:
        user_roles, notifications = refresh_after_mutation(lambda: self.list_user_roles(user_id), message)
        return UserRoleMutationResponse(user_roles=user_roles, notifications=notifications)
