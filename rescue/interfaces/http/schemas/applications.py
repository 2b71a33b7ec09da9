from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus


class ApplicationSubmit(BaseModel):
    kind: str
    first_name: str
    last_name: str
    primary_email: str
    primary_phone: str | None = None
    animal_id: UUID | None = None
    answers: dict[str, Any] = Field(default_factory=dict)


class ApplicationReview(BaseModel):
    status: str
    notes: str | None = None
    version: int | None = None


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    kind: ApplicationKind
    first_name: str
    last_name: str
    primary_email: str | None
    primary_phone: str | None
    status: ApplicationStatus
    submission_date: datetime
    applicant_user_id: UUID | None
    animal_id: UUID | None
    answers: dict[str, Any]
    reviewed_by: UUID | None
    review_date: datetime | None
    internal_notes: str | None
    version: int


class ApplicationReviewResponse(BaseModel):
    application: ApplicationResponse
    foster_profile_id: UUID | None = None
    foster_profile_created: bool = False
