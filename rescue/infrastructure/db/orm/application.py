from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus
from rescue.infrastructure.db.base import Base


def _values(enum) -> list[str]:
    return [member.value for member in enum]


class ApplicationORM(Base):
    __tablename__ = "applications"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    kind: Mapped[ApplicationKind] = mapped_column(
        Enum(
            ApplicationKind,
            name="application_kind",
            native_enum=False,
            length=30,
            values_callable=_values,
        ),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    primary_email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    primary_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[ApplicationStatus] = mapped_column(
        Enum(
            ApplicationStatus,
            name="application_status",
            native_enum=False,
            length=30,
            values_callable=_values,
        ),
        nullable=False,
        index=True,
        default=ApplicationStatus.PENDING_REVIEW,
    )
    submission_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    applicant_user_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    animal_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=True
    )
    answers: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    reviewed_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    review_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    internal_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
