from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.animal import Animal
from rescue.domain.models.foster_profile import FosterProfile
from rescue.domain.models.user import User
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class FosterDetail:
    profile: FosterProfile
    user: User | None
    animals: list[Animal]


async def execute(uow: UnitOfWork, role: Role, user_id: UUID) -> FosterDetail:
    ensure_capability(role, Capability.READ_STAFF_RECORDS, "view foster profiles")
    profile = await uow.foster_profiles.get_by_user(user_id)
    if not profile:
        raise NotFoundError(f"Foster profile not found for user {user_id}")
    user = await uow.users.get(user_id)
    animals = await uow.animals.list(foster_id=profile.id)
    return FosterDetail(profile=profile, user=user, animals=animals)
