"""Display layout endpoints for the Reddit Media Viewer API."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
from slowapi import Limiter
from slowapi.util import get_remote_address

from viewer.api.dependencies import get_layout_controller
from viewer.feed.layout import LayoutController, LayoutMode

router = APIRouter(prefix="/api/layout", tags=["layout"])
limiter = Limiter(key_func=get_remote_address)


class LayoutUpdate(BaseModel):
    """Partial display state change; omitted fields keep their value."""

    layout: LayoutMode | None = None
    columns: int | None = Field(default=None, ge=1, le=10)
    thumbnail_size_px: int | None = Field(default=None, ge=50, le=600)


def _layout_response(controller: LayoutController) -> dict:
    return {
        "state": controller.state.model_dump(mode="json"),
        "presentation": controller.apply().model_dump(),
    }


@router.get("")
async def get_layout(controller: LayoutController = Depends(get_layout_controller)):
    """Return the current display state and its presentation parameters."""
    return _layout_response(controller)


@router.post("")
@limiter.limit("240/minute")
async def update_layout(
    request: Request,
    body: LayoutUpdate,
    controller: LayoutController = Depends(get_layout_controller),
):
    """
    Update display parameters.

    Range sliders post here on every input event, hence the generous limit.
    """
    controller.update(
        layout=body.layout,
        columns=body.columns,
        thumbnail_size_px=body.thumbnail_size_px,
    )
    return _layout_response(controller)
