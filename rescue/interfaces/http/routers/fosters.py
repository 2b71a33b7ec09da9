from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from rescue.application.use_cases.fosters import (
    get_foster_profile,
    list_foster_profiles,
    update_foster_profile,
)
from rescue.infrastructure.auth.context import AuthContext
from rescue.interfaces.http.deps import get_auth_context, get_uow
from rescue.interfaces.http.schemas.animals import AnimalResponse
from rescue.interfaces.http.schemas.fosters import (
    FosterDetailResponse,
    FosterProfileResponse,
    FosterProfileUpdate,
    FosterSummaryResponse,
    FosterUser,
)

router = APIRouter(prefix="/fosters", tags=["fosters"])


@router.get("/", response_model=list[FosterSummaryResponse])
async def list_fosters_endpoint(
    active_only: bool = Query(False),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[FosterSummaryResponse]:
    summaries = await list_foster_profiles.execute(uow, context.role, active_only=active_only)
    return [
        FosterSummaryResponse(
            profile=FosterProfileResponse.model_validate(item.profile),
            user=FosterUser.model_validate(item.user) if item.user else None,
            current_foster_count=item.current_foster_count,
        )
        for item in summaries
    ]


@router.get("/{user_id}", response_model=FosterDetailResponse)
async def get_foster_endpoint(
    user_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> FosterDetailResponse:
    detail = await get_foster_profile.execute(uow, context.role, user_id)
    return FosterDetailResponse(
        profile=FosterProfileResponse.model_validate(detail.profile),
        user=FosterUser.model_validate(detail.user) if detail.user else None,
        animals=[AnimalResponse.model_validate(animal) for animal in detail.animals],
    )


@router.put("/{user_id}", response_model=FosterProfileResponse)
async def update_foster_endpoint(
    user_id: UUID,
    payload: FosterProfileUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> FosterProfileResponse:
    updated = await update_foster_profile.execute(
        uow,
        context.role,
        user_id,
        update_foster_profile.UpdateFosterProfileInput(**payload.model_dump(exclude_unset=True)),
    )
    return FosterProfileResponse.model_validate(updated)
