from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import get_session_context, get_user_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from rbac_dashboard.modules.profiles.service import ProfileService
from supabase import Client
from typing import List

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(
    supabase: Client = Depends(get_user_supabase),
    context: SessionContext = Depends(get_session_context)
) -> ProfileService:
    return ProfileService(supabase, context)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    """List every profile"""
    return service.list_profiles()


@router.get("/me", response_model=ProfileResponse)
async def get_own_profile(service: ProfileService = Depends(get_profile_service)):
    """Get the caller's profile"""
    return service.get_own_profile()


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    """Get a profile by account id"""
    return service.get_profile(user_id)


@router.put("/{user_id}", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    profile_data: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service)
):
    """Update a profile (owner only)"""
    return service.update_profile(user_id, profile_data)
