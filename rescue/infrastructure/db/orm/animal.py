from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    species: Mapped[str | None] = mapped_column(String(50), nullable=True)
    breed: Mapped[str | None] = mapped_column(String(100), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    story: Mapped[str | None] = mapped_column(Text, nullable=True)
    adoption_status: Mapped[AnimalStatus] = mapped_column(
        Enum(
            AnimalStatus,
            name="animal_adoption_status",
            native_enum=False,
            length=50,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        index=True,
        default=AnimalStatus.NOT_YET_AVAILABLE,
    )
    current_foster_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("foster_profiles.id"), nullable=True, index=True
    )

    created_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    updated_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
