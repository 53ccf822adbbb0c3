from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

from rbac_dashboard.core.notifications import Notification


class PermissionCreate(BaseModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Permission name is required")
        return value


class PermissionUpdate(PermissionCreate):
    pass


class PermissionResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PermissionMutationResponse(BaseModel):
    permission: Optional[PermissionResponse] = None
    permissions: List[PermissionResponse]
    notifications: List[Notification]
