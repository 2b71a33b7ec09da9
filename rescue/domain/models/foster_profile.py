from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class FosterProfile:
    id: UUID
    user_id: UUID
    foster_application_id: UUID | None = None
    approval_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_active_foster: bool = True
    availability_notes: str | None = None
    capacity_details: str | None = None
    home_visit_date: date | None = None
    home_visit_notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        user_id: UUID,
        foster_application_id: UUID | None = None,
        availability_notes: str | None = None,
        capacity_details: str | None = None,
    ) -> FosterProfile:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            user_id=user_id,
            foster_application_id=foster_application_id,
            approval_date=now,
            is_active_foster=True,
            availability_notes=availability_notes,
            capacity_details=capacity_details,
            created_at=now,
            updated_at=now,
            version=1,
        )
