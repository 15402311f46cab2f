"""Health check endpoints."""

from fastapi import APIRouter, Depends

from docmark.api.deps import get_app_settings
from docmark.core.config import Settings
from docmark.schemas import HealthResponse

router = APIRouter(prefix="/api")


@router.get("/health", tags=["system"], response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness check."""

    return HealthResponse(status="ok", service=settings.app_name, version=settings.app_version)
