from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rescue.application.errors import ConflictError
from rescue.application.interfaces.repositories.users import UserRepository
from rescue.domain.models.user import User
from rescue.infrastructure.db.orm.user import UserORM


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            first_name=orm.first_name,
            last_name=orm.last_name,
            role=orm.role,
            is_active=orm.is_active,
            primary_phone=orm.primary_phone,
            external_provider_id=orm.external_provider_id,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            is_active=user.is_active,
            primary_phone=user.primary_phone,
            external_provider_id=user.external_provider_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
            version=user.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.strip().lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, user_ids: list[UUID]) -> list[User]:
        if not user_ids:
            return []
        stmt = select(UserORM).where(UserORM.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(self, user_id: UUID, data: dict, expected_version: int) -> User | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id)
            .where(UserORM.version == expected_version)
            .values(**values)
            .returning(UserORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
