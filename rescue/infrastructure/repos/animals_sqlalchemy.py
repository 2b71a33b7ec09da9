from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rescue.application.errors import ConflictError, InfrastructureError
from rescue.application.interfaces.repositories.animals import AnimalRepository
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.infrastructure.db.orm.animal import AnimalORM


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            name=orm.name,
            species=orm.species,
            breed=orm.breed,
            birth_date=orm.birth_date,
            gender=orm.gender,
            weight=orm.weight,
            story=orm.story,
            adoption_status=orm.adoption_status,
            current_foster_id=orm.current_foster_id,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _filtered(self, stmt, statuses, foster_id, species):
        stmt = stmt.where(AnimalORM.deleted_at.is_(None))
        if statuses is not None:
            stmt = stmt.where(AnimalORM.adoption_status.in_(statuses))
        if foster_id is not None:
            stmt = stmt.where(AnimalORM.current_foster_id == foster_id)
        if species is not None:
            stmt = stmt.where(func.lower(AnimalORM.species) == species.lower())
        return stmt

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            name=animal.name,
            species=animal.species,
            breed=animal.breed,
            birth_date=animal.birth_date,
            gender=animal.gender,
            weight=animal.weight,
            story=animal.story,
            adoption_status=animal.adoption_status,
            current_foster_id=animal.current_foster_id,
            created_by=animal.created_by,
            updated_by=animal.updated_by,
            deleted_at=animal.deleted_at,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create animal due to constraint violation") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        foster_id: UUID | None = None,
        species: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Animal]:
        stmt = self._filtered(select(AnimalORM), statuses, foster_id, species)
        stmt = stmt.order_by(AnimalORM.created_at.desc(), AnimalORM.id)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def count(
        self,
        *,
        statuses: list[AnimalStatus] | None = None,
        foster_id: UUID | None = None,
        species: str | None = None,
    ) -> int:
        stmt = self._filtered(select(func.count(AnimalORM.id)), statuses, foster_id, species)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_species(self, *, statuses: list[AnimalStatus] | None = None) -> list[str]:
        stmt = self._filtered(select(AnimalORM.species).distinct(), statuses, None, None)
        stmt = stmt.where(AnimalORM.species.is_not(None)).order_by(AnimalORM.species)
        result = await self.session.execute(stmt)
        return [value for value in result.scalars().all() if value.strip()]

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .where(AnimalORM.deleted_at.is_(None))
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, animal_id: UUID) -> bool:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.deleted_at.is_(None))
            .values(deleted_at=func.now(), version=AnimalORM.version + 1)
            .returning(AnimalORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return result.scalar_one_or_none() is not None
