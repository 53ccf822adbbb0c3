from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.user_roles.schemas import (
    UserRoleGrant, UserRoleResponse, UserRoleMutationResponse
)
from rbac_dashboard.modules.user_roles.service import UserRoleService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/user-roles", tags=["user-roles"])


def get_user_role_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> UserRoleService:
    return UserRoleService(supabase, context)


@router.get("", response_model=List[UserRoleResponse])
async def list_user_roles(
    user_id: Optional[str] = None,
    service: UserRoleService = Depends(get_user_role_service)
):
    """List role grants, optionally for one user"""
    return service.list_user_roles(user_id)


@router.post("", response_model=UserRoleMutationResponse, status_code=201)
async def grant_role(
    grant: UserRoleGrant,
    service: UserRoleService = Depends(get_user_role_service)
):
    """Grant a role to a user"""
    return service.grant_role(grant.user_id, grant.role_id)


@router.delete("/{user_id}/{role_id}", response_model=UserRoleMutationResponse)
async def revoke_role(
    user_id: str,
    role_id: str,
    service: UserRoleService = Depends(get_user_role_service)
):
    """Revoke a role from a user"""
    return service.revoke_role(user_id, role_id)
