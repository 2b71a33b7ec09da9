from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rescue.application.errors import ConflictError, ValidationError
from rescue.application.interfaces.repositories.applications import ApplicationRepository
from rescue.domain.models.application import Application
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus
from rescue.infrastructure.db.orm.application import ApplicationORM


class ApplicationsSQLAlchemyRepository(ApplicationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ApplicationORM) -> Application:
        return Application(
            id=orm.id,
            kind=orm.kind,
            first_name=orm.first_name,
            last_name=orm.last_name,
            primary_email=orm.primary_email,
            primary_phone=orm.primary_phone,
            status=orm.status,
            submission_date=orm.submission_date,
            applicant_user_id=orm.applicant_user_id,
            animal_id=orm.animal_id,
            answers=dict(orm.answers or {}),
            reviewed_by=orm.reviewed_by,
            review_date=orm.review_date,
            internal_notes=orm.internal_notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, application: Application) -> Application:
        orm = ApplicationORM(
            id=application.id,
            kind=application.kind,
            first_name=application.first_name,
            last_name=application.last_name,
            primary_email=application.primary_email,
            primary_phone=application.primary_phone,
            status=application.status,
            submission_date=application.submission_date,
            applicant_user_id=application.applicant_user_id,
            animal_id=application.animal_id,
            answers=application.answers,
            reviewed_by=application.reviewed_by,
            review_date=application.review_date,
            internal_notes=application.internal_notes,
            created_at=application.created_at,
            updated_at=application.updated_at,
            version=application.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ValidationError("Application references an unknown record") from exc
        return self._to_domain(orm)

    async def get(self, application_id: UUID) -> Application | None:
        stmt = select(ApplicationORM).where(ApplicationORM.id == application_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        kind: ApplicationKind | None = None,
        status: ApplicationStatus | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Application]:
        stmt = select(ApplicationORM)
        if kind is not None:
            stmt = stmt.where(ApplicationORM.kind == kind)
        if status is not None:
            stmt = stmt.where(ApplicationORM.status == status)
        stmt = stmt.order_by(ApplicationORM.submission_date.desc(), ApplicationORM.id)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(
        self,
        application_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Application | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(ApplicationORM)
            .where(ApplicationORM.id == application_id)
            .where(ApplicationORM.version == expected_version)
            .values(**values)
            .returning(ApplicationORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update application due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
