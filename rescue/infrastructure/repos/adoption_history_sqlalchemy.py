from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rescue.application.errors import ConflictError
from rescue.application.interfaces.repositories.adoption_history import (
    AdoptionHistoryRepository,
)
from rescue.domain.models.adoption_history import AdopterSnapshot, AdoptionHistory
from rescue.infrastructure.db.orm.adoption_history import AdoptionHistoryORM


class AdoptionHistorySQLAlchemyRepository(AdoptionHistoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AdoptionHistoryORM) -> AdoptionHistory:
        return AdoptionHistory(
            id=orm.id,
            animal_id=orm.animal_id,
            adopter=AdopterSnapshot.from_dict(orm.adopter or {}),
            adoption_date=orm.adoption_date,
            return_date=orm.return_date,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
        )

    async def add(self, history: AdoptionHistory) -> AdoptionHistory:
        orm = AdoptionHistoryORM(
            id=history.id,
            animal_id=history.animal_id,
            adopter=history.adopter.to_dict(),
            adoption_date=history.adoption_date,
            return_date=history.return_date,
            notes=history.notes,
            created_by=history.created_by,
            created_at=history.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal already has an open adoption record") from exc
        return self._to_domain(orm)

    async def get(self, history_id: UUID) -> AdoptionHistory | None:
        stmt = select(AdoptionHistoryORM).where(AdoptionHistoryORM.id == history_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_open_for_animal(self, animal_id: UUID) -> AdoptionHistory | None:
        stmt = (
            select(AdoptionHistoryORM)
            .where(AdoptionHistoryORM.animal_id == animal_id)
            .where(AdoptionHistoryORM.return_date.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list_for_animal(self, animal_id: UUID) -> list[AdoptionHistory]:
        stmt = (
            select(AdoptionHistoryORM)
            .where(AdoptionHistoryORM.animal_id == animal_id)
            .order_by(AdoptionHistoryORM.adoption_date.desc(), AdoptionHistoryORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def list_open(self) -> list[AdoptionHistory]:
        stmt = (
            select(AdoptionHistoryORM)
            .where(AdoptionHistoryORM.return_date.is_(None))
            .order_by(AdoptionHistoryORM.adoption_date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def mark_returned(self, history_id: UUID, return_date: date) -> AdoptionHistory | None:
        stmt = (
            update(AdoptionHistoryORM)
            .where(AdoptionHistoryORM.id == history_id)
            .where(AdoptionHistoryORM.return_date.is_(None))
            .values(return_date=return_date)
            .returning(AdoptionHistoryORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
