from __future__ import annotations

from typing import Protocol
from uuid import UUID

from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        foster_id: UUID | None = None,
        species: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]: ...

    async def count(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        foster_id: UUID | None = None,
        species: str | None = None,
    ) -> int: ...

    async def list_species(self, *, statuses: list[AnimalStatus] | None = None) -> list[str]: ...

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None: ...

    async def delete(self, animal_id: UUID) -> bool: ...
