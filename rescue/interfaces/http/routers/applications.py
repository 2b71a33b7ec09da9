from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from rescue.application.use_cases.applications import (
    get_application,
    list_applications,
    review_application,
    submit_application,
)
from rescue.infrastructure.auth.context import AuthContext
from rescue.interfaces.http.deps import get_auth_context, get_uow, schedule_dispatch
from rescue.interfaces.http.schemas.applications import (
    ApplicationResponse,
    ApplicationReview,
    ApplicationReviewResponse,
    ApplicationSubmit,
)

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit_application_endpoint(
    payload: ApplicationSubmit,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ApplicationResponse:
    created = await submit_application.execute(
        uow,
        context.user_id,
        submit_application.SubmitApplicationInput(**payload.model_dump()),
    )
    return ApplicationResponse.model_validate(created)


@router.get("/", response_model=list[ApplicationResponse])
async def list_applications_endpoint(
    kind: str | None = Query(None),
    application_status: str | None = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ApplicationResponse]:
    items = await list_applications.execute(
        uow,
        context.role,
        kind=kind,
        status=application_status,
        limit=limit,
        offset=offset,
    )
    return [ApplicationResponse.model_validate(item) for item in items]


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application_endpoint(
    application_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ApplicationResponse:
    application = await get_application.execute(uow, context.role, application_id)
    return ApplicationResponse.model_validate(application)


@router.post("/{application_id}/review", response_model=ApplicationReviewResponse)
async def review_application_endpoint(
    application_id: UUID,
    payload: ApplicationReview,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ApplicationReviewResponse:
    result = await review_application.execute(
        uow,
        context.role,
        context.user_id,
        application_id,
        review_application.ReviewApplicationInput(
            status=payload.status, notes=payload.notes, version=payload.version
        ),
        actor_email=context.email,
    )
    schedule_dispatch(request, background_tasks, uow)
    return ApplicationReviewResponse(
        application=ApplicationResponse.model_validate(result.application),
        foster_profile_id=result.foster_profile.id if result.foster_profile else None,
        foster_profile_created=result.foster_profile_created,
    )
