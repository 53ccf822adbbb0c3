from fastapi import APIRouter, Depends
from rbac_dashboard.core.dependencies import (
    get_auth_service, get_current_token, get_session_context, get_user_supabase
)
from rbac_dashboard.modules.auth.schemas import (
    LoginRequest, RegisterRequest, TokenResponse, RegisterResponse,
    SessionContext, CurrentUserResponse
)
from rbac_dashboard.modules.auth.service import AuthService
from rbac_dashboard.modules.profiles.service import ProfileService
from rbac_dashboard.modules.user_roles.service import UserRoleService
from supabase import Client

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new account"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    context: SessionContext = Depends(get_session_context),
    supabase: Client = Depends(get_user_supabase),
):
    """Current account with its profile and granted role names"""
    return CurrentUserResponse(
        user_id=context.user_id,
        email=context.email,
        profile=ProfileService(supabase, context).get_own_profile(),
        roles=UserRoleService(supabase, context).get_role_names(context.user_id),
    )
