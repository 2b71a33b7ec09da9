from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from rescue.application.authorization import Capability, can
from rescue.application.errors import ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_animal_status
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import PUBLIC_STATUSES
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    role: Role,
    *,
    statuses: list[str] | None = None,
    foster_id: UUID | None = None,
    species: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListAnimalsResult:
    if limit <= 0 or limit > 200:
        raise ValidationError("limit must be between 1 and 200")
    if offset < 0:
        raise ValidationError("offset must be zero or positive")
    wanted = [parse_animal_status(value) for value in statuses] if statuses else None
    # Public callers only ever see the adoptable listing.
    if not can(role, Capability.EDIT_ANIMAL_DETAILS):
        foster_id = None
        if wanted is None:
            wanted = sorted(PUBLIC_STATUSES, key=lambda s: s.value)
        else:
            wanted = [s for s in wanted if s in PUBLIC_STATUSES]
            if not wanted:
                return ListAnimalsResult(items=[], total=0)
    items = await uow.animals.list(
        statuses=wanted,
        foster_id=foster_id,
        species=species,
        limit=limit,
        offset=offset,
    )
    total = await uow.animals.count(statuses=wanted, foster_id=foster_id, species=species)
    return ListAnimalsResult(items=items, total=total)
