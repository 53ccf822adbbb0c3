from pydantic import BaseModel
from typing import List
from datetime import datetime

from rbac_dashboard.core.notifications import Notification


class UserRoleGrant(BaseModel):
    user_id: str
    role_id: str


class UserRoleResponse(BaseModel):
    user_id: str
    role_id: str
    role_name: str
    created_at: datetime


class UserRoleMutationResponse(BaseModel):
    user_roles: List[UserRoleResponse]
    notifications: List[Notification]
