from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.foster_profile import FosterProfile
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateFosterProfileInput:
    version: int
    is_active_foster: bool | None = None
    availability_notes: str | None = None
    capacity_details: str | None = None
    home_visit_date: date | None = None
    home_visit_notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    user_id: UUID,
    payload: UpdateFosterProfileInput,
) -> FosterProfile:
    ensure_capability(role, Capability.MANAGE_FOSTERS, "update foster profiles")
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    profile = await uow.foster_profiles.get_by_user(user_id)
    if not profile:
        raise NotFoundError(f"Foster profile not found for user {user_id}")
    data: dict = {}
    for field_name in (
        "is_active_foster",
        "availability_notes",
        "capacity_details",
        "home_visit_date",
        "home_visit_notes",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return profile
    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.foster_profiles.update(
        profile.id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating foster profile")
    await uow.commit()
    return updated
