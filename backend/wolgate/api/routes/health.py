"""Health check endpoints."""

from fastapi import APIRouter, Depends

from wolgate import __version__
from wolgate.api.deps import get_app_settings
from wolgate.config import Settings
from wolgate.schemas.system import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Lightweight liveness check."""
    return HealthResponse(version=__version__, dry_run=settings.dry_run)


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
