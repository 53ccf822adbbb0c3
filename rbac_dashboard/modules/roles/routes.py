from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.roles.schemas import (
    RoleCreate, RoleUpdate, RoleResponse, RoleMutationResponse
)
from rbac_dashboard.modules.roles.service import RoleService
from supabase import Client
from typing import List

router = APIRouter(prefix="/roles", tags=["roles"])


def get_role_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> RoleService:
    return RoleService(supabase, context)


@router.get("", response_model=List[RoleResponse])
async def list_roles(service: RoleService = Depends(get_role_service)):
    """List all roles ordered by name"""
    return service.list_roles()


@router.post("", response_model=RoleMutationResponse, status_code=201)
async def create_role(
    role_data: RoleCreate,
    service: RoleService = Depends(get_role_service)
):
    """Create a new role"""
    return service.create_role(role_data)


@router.put("/{role_id}", response_model=RoleMutationResponse)
async def update_role(
    role_id: str,
    role_data: RoleUpdate,
    service: RoleService = Depends(get_role_service)
):
    """Update a role's name and description"""
    return service.update_role(role_id, role_data)


@router.delete("/{role_id}", response_model=RoleMutationResponse)
async def delete_role(
    role_id: str,
    confirm: bool = False,
    service: RoleService = Depends(get_role_service)
):
    """Delete a role (requires ?confirm=true); revokes it from every user"""
    return service.delete_role(role_id, confirmed=confirm)
