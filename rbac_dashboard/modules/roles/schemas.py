from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

from rbac_dashboard.core.notifications import Notification


class RoleCreate(BaseModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Role name is required")
        return value


class RoleUpdate(RoleCreate):
    pass


class RoleResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RoleMutationResponse(BaseModel):
    role: Optional[RoleResponse] = None
    roles: List[RoleResponse]
    notifications: List[Notification]
