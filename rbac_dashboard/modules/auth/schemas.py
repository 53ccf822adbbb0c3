from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any

from rbac_dashboard.modules.profiles.schemas import ProfileResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    message: str


class SessionContext(BaseModel):
    """The authenticated caller, passed explicitly into every manager."""
    user_id: str
    email: Optional[str] = None
    access_token: str = Field(repr=False)
    user_metadata: Dict[str, Any] = {}


class CurrentUserResponse(BaseModel):
    user_id: str
    email: Optional[str] = None
    profile: Optional[ProfileResponse] = None
    roles: List[str] = []
