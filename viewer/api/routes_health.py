"""Health check endpoints for the Reddit Media Viewer API."""

from fastapi import APIRouter

from viewer.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """Liveness probe."""
    return {"ok": True}


@router.get("/readyz")
async def readiness_check():
    """
    Readiness probe.

    The service has no backing stores; it is ready once its settings load.

    Returns:
        ``ok`` and the environment the service is running in
    """
    settings = get_settings()
    return {"ok": True, "env": settings.env}
