from __future__ import annotations

from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, animal_id: UUID) -> None:
    ensure_capability(role, Capability.DELETE_ANIMALS, "delete animals")
    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        raise NotFoundError("Animal not found")
    await uow.commit()
