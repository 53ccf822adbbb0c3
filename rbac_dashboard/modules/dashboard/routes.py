from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.dashboard.schemas import DashboardResponse
from rbac_dashboard.modules.dashboard.service import DashboardService
from supabase import Client

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> DashboardService:
    return DashboardService(supabase, context)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Permissions, roles and assignments tabs for the signed-in administrator"""
    return service.load()
