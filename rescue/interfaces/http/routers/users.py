from __future__ import annotations

from fastapi import APIRouter, Depends

from rescue.application.use_cases.users import get_profile, update_profile
from rescue.infrastructure.auth.context import AuthContext
from rescue.interfaces.http.deps import get_auth_context, get_uow
from rescue.interfaces.http.schemas.users import UserProfileResponse, UserProfileUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserProfileResponse)
async def get_my_profile(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserProfileResponse:
    user = await get_profile.execute(uow, context.user_id)
    return UserProfileResponse.model_validate(user)


@router.put("/me", response_model=UserProfileResponse)
async def update_my_profile(
    payload: UserProfileUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserProfileResponse:
    updated = await update_profile.execute(
        uow,
        context.user_id,
        update_profile.UpdateProfileInput(**payload.model_dump(exclude_unset=True)),
    )
    return UserProfileResponse.model_validate(updated)
