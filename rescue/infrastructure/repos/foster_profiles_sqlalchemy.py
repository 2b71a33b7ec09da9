from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rescue.application.errors import ConflictError
from rescue.application.interfaces.repositories.foster_profiles import FosterProfileRepository
from rescue.domain.models.foster_profile import FosterProfile
from rescue.infrastructure.db.orm.foster_profile import FosterProfileORM


class FosterProfilesSQLAlchemyRepository(FosterProfileRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FosterProfileORM) -> FosterProfile:
        return FosterProfile(
            id=orm.id,
            user_id=orm.user_id,
            foster_application_id=orm.foster_application_id,
            approval_date=orm.approval_date,
            is_active_foster=orm.is_active_foster,
            availability_notes=orm.availability_notes,
            capacity_details=orm.capacity_details,
            home_visit_date=orm.home_visit_date,
            home_visit_notes=orm.home_visit_notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, profile: FosterProfile) -> FosterProfile:
        orm = FosterProfileORM(
            id=profile.id,
            user_id=profile.user_id,
            foster_application_id=profile.foster_application_id,
            approval_date=profile.approval_date,
            is_active_foster=profile.is_active_foster,
            availability_notes=profile.availability_notes,
            capacity_details=profile.capacity_details,
            home_visit_date=profile.home_visit_date,
            home_visit_notes=profile.home_visit_notes,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            version=profile.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("User already has a foster profile") from exc
        return self._to_domain(orm)

    async def get(self, profile_id: UUID) -> FosterProfile | None:
        stmt = select(FosterProfileORM).where(FosterProfileORM.id == profile_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_user(self, user_id: UUID) -> FosterProfile | None:
        stmt = select(FosterProfileORM).where(FosterProfileORM.user_id == user_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, *, active_only: bool = False) -> list[FosterProfile]:
        stmt = select(FosterProfileORM)
        if active_only:
            stmt = stmt.where(FosterProfileORM.is_active_foster.is_(True))
        stmt = stmt.order_by(FosterProfileORM.approval_date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(
        self,
        profile_id: UUID,
        data: dict,
        expected_version: int,
    ) -> FosterProfile | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(FosterProfileORM)
            .where(FosterProfileORM.id == profile_id)
            .where(FosterProfileORM.version == expected_version)
            .values(**values)
            .returning(FosterProfileORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
