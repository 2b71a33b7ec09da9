from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from rescue.domain.value_objects.role import Role


class UserProfileUpdate(BaseModel):
    version: int
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    primary_phone: str | None = Field(default=None, max_length=20)


class UserProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    external_provider_id: str | None
    first_name: str
    last_name: str
    email: str
    primary_phone: str | None
    role: Role
    is_active: bool
    created_at: datetime
    version: int
