from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from rescue.interfaces.http.schemas.animals import AnimalResponse


class FosterProfileUpdate(BaseModel):
    version: int
    is_active_foster: bool | None = None
    availability_notes: str | None = None
    capacity_details: str | None = None
    home_visit_date: date | None = None
    home_visit_notes: str | None = None


class FosterProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    foster_application_id: UUID | None
    approval_date: datetime
    is_active_foster: bool
    availability_notes: str | None
    capacity_details: str | None
    home_visit_date: date | None
    home_visit_notes: str | None
    version: int


class FosterUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    first_name: str
    last_name: str
    primary_phone: str | None = None


class FosterSummaryResponse(BaseModel):
    profile: FosterProfileResponse
    user: FosterUser | None
    current_foster_count: int


class FosterDetailResponse(BaseModel):
    profile: FosterProfileResponse
    user: FosterUser | None
    animals: list[AnimalResponse]
