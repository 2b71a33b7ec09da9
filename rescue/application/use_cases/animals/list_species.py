from __future__ import annotations

from rescue.application.authorization import Capability, can
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.value_objects.animal_status import PUBLIC_STATUSES
from rescue.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role) -> list[str]:
    """Distinct species on record, for the animal type filter."""
    statuses = None
    if not can(role, Capability.EDIT_ANIMAL_DETAILS):
        statuses = sorted(PUBLIC_STATUSES, key=lambda s: s.value)
    return await uow.animals.list_species(statuses=statuses)
