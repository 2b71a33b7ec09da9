from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, Response, status

from rescue.application.use_cases.adoptions import finalize_adoption, list_animal_history
from rescue.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    list_species,
    transition_animal,
    update_animal,
)
from rescue.application.use_cases.fosters import assign_foster, unassign_foster
from rescue.domain.models.adoption_history import AdopterSnapshot
from rescue.infrastructure.auth.context import AuthContext
from rescue.interfaces.http.deps import get_auth_context, get_uow, schedule_dispatch
from rescue.interfaces.http.schemas.adoptions import (
    AdoptionFinalize,
    AdoptionHistoryResponse,
    AdoptionResultResponse,
)
from rescue.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalStatusChange,
    AnimalUpdate,
    FosterAssignment,
)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    adoption_status: list[str] | None = Query(
        None, description="Filter by status. Repeat param or use comma-separated"
    ),
    species: str | None = Query(None),
    foster_id: UUID | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    statuses = adoption_status
    # Normalize comma-separated single value into list
    if statuses and len(statuses) == 1 and "," in statuses[0]:
        statuses = [value.strip() for value in statuses[0].split(",") if value.strip()]
    result = await list_animals.execute(
        uow,
        context.role,
        statuses=statuses,
        foster_id=foster_id,
        species=species,
        limit=limit,
        offset=offset,
    )
    items = [AnimalResponse.model_validate(item) for item in result.items]
    return AnimalsListResponse(items=items, total=result.total)


@router.get("/types", response_model=list[str])
async def list_species_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[str]:
    return await list_species.execute(uow, context.role)


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    created = await create_animal.execute(
        uow,
        context.role,
        context.user_id,
        create_animal.CreateAnimalInput(**payload.model_dump()),
    )
    return AnimalResponse.model_validate(created)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await get_animal.execute(uow, context.role, animal_id)
    return AnimalResponse.model_validate(animal)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    updated = await update_animal.execute(
        uow,
        context.role,
        context.user_id,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump(exclude_unset=True)),
    )
    return AnimalResponse.model_validate(updated)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_animal.execute(uow, context.role, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{animal_id}/status", response_model=AnimalResponse)
async def transition_animal_endpoint(
    animal_id: UUID,
    payload: AnimalStatusChange,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    updated = await transition_animal.execute(
        uow,
        context.role,
        context.user_id,
        animal_id,
        transition_animal.TransitionAnimalInput(
            adoption_status=payload.adoption_status, version=payload.version
        ),
    )
    schedule_dispatch(request, background_tasks, uow)
    return AnimalResponse.model_validate(updated)


@router.post("/{animal_id}/foster", response_model=AnimalResponse)
async def assign_foster_endpoint(
    animal_id: UUID,
    payload: FosterAssignment,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    updated = await assign_foster.execute(
        uow,
        context.role,
        context.user_id,
        animal_id,
        assign_foster.AssignFosterInput(
            foster_user_id=payload.foster_user_id, version=payload.version
        ),
    )
    schedule_dispatch(request, background_tasks, uow)
    return AnimalResponse.model_validate(updated)


@router.delete("/{animal_id}/foster", response_model=AnimalResponse)
async def unassign_foster_endpoint(
    animal_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    version: int | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    updated = await unassign_foster.execute(
        uow, context.role, context.user_id, animal_id, version=version
    )
    schedule_dispatch(request, background_tasks, uow)
    return AnimalResponse.model_validate(updated)


@router.post(
    "/{animal_id}/adoption",
    response_model=AdoptionResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def finalize_adoption_endpoint(
    animal_id: UUID,
    payload: AdoptionFinalize,
    request: Request,
    background_tasks: BackgroundTasks,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AdoptionResultResponse:
    result = await finalize_adoption.execute(
        uow,
        context.role,
        context.user_id,
        animal_id,
        finalize_adoption.FinalizeAdoptionInput(
            adopter=AdopterSnapshot(**payload.adopter.model_dump()),
            adoption_date=payload.adoption_date,
            notes=payload.notes,
            version=payload.version,
        ),
    )
    schedule_dispatch(request, background_tasks, uow)
    return AdoptionResultResponse(
        history=AdoptionHistoryResponse.model_validate(result.history),
        animal=AnimalResponse.model_validate(result.animal),
    )


@router.get("/{animal_id}/adoption-history", response_model=list[AdoptionHistoryResponse])
async def list_animal_history_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[AdoptionHistoryResponse]:
    rows = await list_animal_history.execute(uow, context.role, animal_id)
    return [AdoptionHistoryResponse.model_validate(row) for row in rows]
