"""
Core dependencies: session resolution and the per-caller data store client
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from rbac_dashboard.database.supabase_client import SupabaseClient, get_supabase
from rbac_dashboard.modules.auth.schemas import SessionContext
from rbac_dashboard.modules.auth.service import AuthService
from supabase import Client
from typing import Iterator
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


def get_session_context(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> SessionContext:
    """Resolve the authenticated caller; every manager receives this explicitly"""
    return auth_service.get_current_user(token)


def get_user_supabase(context: SessionContext = Depends(get_session_context)) -> Iterator[Client]:
    """Store client carrying the caller's token so row-level policies see the caller; closed after the response"""
    client = SupabaseClient.get_client_for_token(context.access_token)
    try:
        yield client
    finally:
        SupabaseClient.close_client(client)
