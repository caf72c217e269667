"""API routers for the Reddit Media Viewer."""

from viewer.api.routes_feed import router as feed_router
from viewer.api.routes_health import router as health_router
from viewer.api.routes_import import router as import_router
from viewer.api.routes_layout import router as layout_router
from viewer.api.routes_status import router as status_router

__all__ = [
    "health_router",
    "feed_router",
    "import_router",
    "layout_router",
    "status_router",
]
