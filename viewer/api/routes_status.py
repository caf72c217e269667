"""Status bar endpoint for the Reddit Media Viewer API."""

from fastapi import APIRouter, Depends

from viewer.api.dependencies import get_status_reporter
from viewer.status import StatusReporter

router = APIRouter(prefix="/api/status", tags=["status"])


@router.get("")
async def get_status(status: StatusReporter = Depends(get_status_reporter)):
    """Return the most recent status message."""
    return status.current.model_dump()
