from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from rescue.domain.value_objects.animal_status import AnimalStatus


class AnimalCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    species: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    weight: Decimal | None = Field(default=None, ge=0)
    story: str | None = None
    adoption_status: str = "Not Yet Available"


class AnimalUpdate(BaseModel):
    version: int
    name: str | None = None
    species: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    weight: Decimal | None = Field(default=None, ge=0)
    story: str | None = None


class AnimalStatusChange(BaseModel):
    # Kept as a plain string so unknown values reach the status registry
    adoption_status: str
    version: int | None = None


class FosterAssignment(BaseModel):
    foster_user_id: UUID
    version: int | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    species: str | None
    breed: str | None
    birth_date: date | None
    gender: str | None
    weight: Decimal | None
    story: str | None
    adoption_status: AnimalStatus
    current_foster_id: UUID | None
    created_at: datetime
    updated_at: datetime
    version: int


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
