from __future__ import annotations

from fastapi import APIRouter, Depends

from rescue.config.settings import Settings
from rescue.interfaces.http.deps import get_app_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {"status": "ok", "environment": settings.environment}
