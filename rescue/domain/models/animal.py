from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from rescue.domain.value_objects.animal_status import AnimalStatus


@dataclass(slots=True)
class Animal:
    id: UUID
    name: str
    species: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    weight: Decimal | None = None
    story: str | None = None
    adoption_status: AnimalStatus = AnimalStatus.NOT_YET_AVAILABLE
    # FosterProfile.id, resolved through the foster profiles repository
    current_foster_id: UUID | None = None

    created_by: UUID | None = None
    updated_by: UUID | None = None
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        name: str,
        species: str | None = None,
        breed: str | None = None,
        birth_date: date | None = None,
        gender: str | None = None,
        weight: Decimal | None = None,
        story: str | None = None,
        adoption_status: AnimalStatus = AnimalStatus.NOT_YET_AVAILABLE,
        created_by: UUID | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            species=species,
            breed=breed,
            birth_date=birth_date,
            gender=gender,
            weight=weight,
            story=story,
            adoption_status=adoption_status,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_fostered(self) -> bool:
        return self.current_foster_id is not None
