from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class AdopterSnapshot:
    """Adopter contact details as they were when the adoption was finalized."""

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

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AdopterSnapshot:
        known = {name: data.get(name) for name in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(slots=True)
class AdoptionHistory:
    id: UUID
    animal_id: UUID
    adopter: AdopterSnapshot
    adoption_date: date
    return_date: date | None = None
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: UUID,
        adopter: AdopterSnapshot,
        adoption_date: date,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> AdoptionHistory:
        return cls(
            id=uuid4(),
            animal_id=animal_id,
            adopter=adopter,
            adoption_date=adoption_date,
            return_date=None,
            notes=notes,
            created_by=created_by,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_open(self) -> bool:
        return self.return_date is None
