from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Index, Text, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from rescue.infrastructure.db.base import Base


class AdoptionHistoryORM(Base):
    __tablename__ = "adoption_history"
    __table_args__ = (
        # At most one open adoption per animal
        Index(
            "ux_adoption_history_open_animal",
            "animal_id",
            unique=True,
            postgresql_where=text("return_date IS NULL"),
            sqlite_where=text("return_date IS NULL"),
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False, index=True
    )
    adopter: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    adoption_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
