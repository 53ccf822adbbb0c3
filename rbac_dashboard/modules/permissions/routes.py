from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.permissions.schemas import (
    PermissionCreate, PermissionUpdate, PermissionResponse, PermissionMutationResponse
)
from rbac_dashboard.modules.permissions.service import PermissionService
from supabase import Client
from typing import List

router = APIRouter(prefix="/permissions", tags=["permissions"])


def get_permission_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> PermissionService:
    return PermissionService(supabase, context)


@router.get("", response_model=List[PermissionResponse])
async def list_permissions(service: PermissionService = Depends(get_permission_service)):
    """List all permissions ordered by name"""
    return service.list_permissions()


@router.post("", response_model=PermissionMutationResponse, status_code=201)
async def create_permission(
    permission_data: PermissionCreate,
    service: PermissionService = Depends(get_permission_service)
):
    """Create a new permission"""
    return service.create_permission(permission_data)


@router.put("/{permission_id}", response_model=PermissionMutationResponse)
async def update_permission(
    permission_id: str,
    permission_data: PermissionUpdate,
    service: PermissionService = Depends(get_permission_service)
):
    """Update a permission's name and description"""
    return service.update_permission(permission_id, permission_data)


@router.delete("/{permission_id}", response_model=PermissionMutationResponse)
async def delete_permission(
    permission_id: str,
    confirm: bool = False,
    service: PermissionService = Depends(get_permission_service)
):
    """Delete a permission (requires ?confirm=true); removes it from every role"""
    return service.delete_permission(permission_id, confirmed=confirm)
