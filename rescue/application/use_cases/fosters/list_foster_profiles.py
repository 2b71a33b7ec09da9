from __future__ import annotations

from dataclasses import dataclass

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.foster_profile import FosterProfile
from rescue.domain.models.user import User
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class FosterSummary:
    profile: FosterProfile
    user: User | None
    current_foster_count: int


async def execute(uow: UnitOfWork, role: Role, *, active_only: bool = False) -> list[FosterSummary]:
    ensure_capability(role, Capability.READ_STAFF_RECORDS, "view foster profiles")
    profiles = await uow.foster_profiles.list(active_only=active_only)
    users = await uow.users.get_many([p.user_id for p in profiles]) if profiles else []
    user_by_id = {u.id: u for u in users}
    summaries = []
    for profile in profiles:
        count = await uow.animals.count(foster_id=profile.id)
        summaries.append(
            FosterSummary(
                profile=profile,
                user=user_by_id.get(profile.user_id),
                current_foster_count=count,
            )
        )
    return summaries
