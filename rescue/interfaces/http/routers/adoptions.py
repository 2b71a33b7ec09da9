from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from rescue.application.use_cases.adoptions import list_graduates, record_return
from rescue.infrastructure.auth.context import AuthContext
from rescue.interfaces.http.deps import get_auth_context, get_uow, schedule_dispatch
from rescue.interfaces.http.schemas.adoptions import (
    AdoptionHistoryResponse,
    AdoptionResultResponse,
    AdoptionReturn,
    GraduateResponse,
)
from rescue.interfaces.http.schemas.animals import AnimalResponse

router = APIRouter(prefix="/adoptions", tags=["adoptions"])


@router.get("/graduates", response_model=list[GraduateResponse])
async def list_graduates_endpoint(uow=Depends(get_uow)) -> list[GraduateResponse]:
    graduates = await list_graduates.execute(uow)
    return [GraduateResponse.model_validate(item) for item in graduates]


@router.post("/{history_id}/return", response_model=AdoptionResultResponse)
async def record_return_endpoint(
    history_id: UUID,
    payload: AdoptionReturn,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AdoptionResultResponse:
    result = await record_return.execute(
        uow,
        context.role,
        context.user_id,
        history_id,
        record_return.RecordReturnInput(
            return_date=payload.return_date, adoption_status=payload.adoption_status
        ),
    )
    schedule_dispatch(request, background_tasks, uow)
    return AdoptionResultResponse(
        history=AdoptionHistoryResponse.model_validate(result.history),
        animal=AnimalResponse.model_validate(result.animal),
    )
