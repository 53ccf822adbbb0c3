from fastapi import APIRouter, Depends, HTTPException
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.assignments.schemas import (
    AssignmentOverviewResponse, AssignmentCommit, AssignmentSelection,
    AssignmentMutationResponse, RolePermissionEntry
)
from rbac_dashboard.modules.assignments.dialog import AssignmentDialog, DialogStateError
from rbac_dashboard.modules.assignments.service import AssignmentService
from supabase import Client
from typing import List

router = APIRouter(prefix="/assignments", tags=["assignments"])


def get_assignment_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> AssignmentService:
    return AssignmentService(supabase, context)


@router.get("", response_model=AssignmentOverviewResponse)
async def get_overview(service: AssignmentService = Depends(get_assignment_service)):
    """Roles, permissions and every role's granted permissions"""
    return AssignmentOverviewResponse.from_overview(service.get_overview())


@router.post("", response_model=AssignmentMutationResponse)
async def commit_assignments(
    commit_data: AssignmentCommit,
    service: AssignmentService = Depends(get_assignment_service)
):
    """Replace all permissions of a role with the submitted selection"""
    return service.commit_assignments(commit_data.role_id, commit_data.permission_ids)


@router.get("/roles/{role_id}/selection", response_model=AssignmentSelection)
async def select_role(
    role_id: str,
    service: AssignmentService = Depends(get_assignment_service)
):
    """Editable selection pre-seeded with the role's current permissions"""
    dialog = AssignmentDialog(service)
    dialog.open()
    try:
        dialog.select_role(role_id)
    except DialogStateError:
        raise HTTPException(status_code=404, detail="Role not found")
    return AssignmentSelection(role_id=dialog.role_id, permission_ids=dialog.selection)


@router.get("/roles/{role_id}/permissions", response_model=List[RolePermissionEntry])
async def get_role_permissions(
    role_id: str,
    service: AssignmentService = Depends(get_assignment_service)
):
    """Permissions currently granted to a role"""
    return service.permissions_for(role_id)


@router.delete("/roles/{role_id}/permissions/{permission_id}", response_model=AssignmentMutationResponse)
async def remove_permission_from_role(
    role_id: str,
    permission_id: str,
    service: AssignmentService = Depends(get_assignment_service)
):
    """Remove a single permission from a role"""
    return service.remove_permission(role_id, permission_id)
