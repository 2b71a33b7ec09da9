from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from rescue.interfaces.http.schemas.animals import AnimalResponse


class Adopter(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    first_name: str
    last_name: str
    email: str
    primary_phone: str
    primary_phone_type: str | None = None
    secondary_phone: str | None = None
    secondary_phone_type: str | None = None
    street_address: str | None = None
    apt_unit: str | None = None
    city: str | None = None
    state_province: str | None = None
    zip_postal_code: str | None = None
    spouse_partner_roommate: str | None = None


class AdoptionFinalize(BaseModel):
    adopter: Adopter
    adoption_date: date = Field(default_factory=date.today)
    notes: str | None = None
    version: int | None = None


class AdoptionReturn(BaseModel):
    return_date: date = Field(default_factory=date.today)
    adoption_status: str = "Available"


class AdoptionHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: UUID
    adopter: Adopter
    adoption_date: date
    return_date: date | None
    notes: str | None
    created_by: UUID | None
    created_at: datetime


class AdoptionResultResponse(BaseModel):
    history: AdoptionHistoryResponse
    animal: AnimalResponse


class GraduateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal: AnimalResponse
    adoption_date: date
