from supabase import Client
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from rbac_dashboard.core.errors import store_error
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def default_full_name(email: Optional[str], user_metadata: Optional[Dict[str, Any]]) -> Optional[str]:
    """Display name used for a new profile: the account's full_name metadata, else its email"""
    return (user_metadata or {}).get("full_name") or email


class ProfileService:
    def __init__(self, supabase: Client, context: SessionContext):
        self.supabase = supabase
        self.context = context

    def list_profiles(self) -> List[ProfileResponse]:
        """List all profiles"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .order("email")\
                .execute()
            return [ProfileResponse(**profile) for profile in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching profiles: {e}")
            raise store_error(e, detail="Failed to fetch profiles")

    def find_profile(self, user_id: str) -> Optional[ProfileResponse]:
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise store_error(e, detail="Failed to fetch profile")
        if not result.data:
            return None
        return ProfileResponse(**result.data[0])

    def get_profile(self, user_id: str) -> ProfileResponse:
        """Get profile by account id"""
        profile = self.find_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile

    def get_own_profile(self) -> ProfileResponse:
        """The caller's profile, inserted with account defaults when provisioning left none"""
        profile = self.find_profile(self.context.user_id)
        if profile is not None:
            return profile
        try:
            result = self.supabase.table("profiles").insert({
                "user_id": self.context.user_id,
                "email": self.context.email,
                "full_name": default_full_name(self.context.email, self.context.user_metadata)
            }).execute()
        except Exception as e:
            raise store_error(e)
        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create profile")
        logger.info(f"Created missing profile for user {self.context.user_id}")
        return ProfileResponse(**result.data[0])

    def update_profile(self, user_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Update a profile; only its owner may do so"""
        if user_id != self.context.user_id:
            raise HTTPException(status_code=403, detail="You can only update your own profile")

        update_data = {}
        if profile_data.full_name is not None:
            update_data["full_name"] = profile_data.full_name
        if not update_data:
            return self.get_profile(user_id)

        try:
            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            raise store_error(e)

        if not result.data:
            raise HTTPException(status_code=404, detail="Profile not found")
        return ProfileResponse(**result.data[0])
