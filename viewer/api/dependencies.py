"""FastAPI dependencies for API routers."""

from fastapi import Depends

from viewer.config import get_settings
from viewer.feed.aggregator import AggregationController
from viewer.feed.layout import LayoutController
from viewer.reddit.auth import AuthClient
from viewer.reddit.client import FeedFetcher
from viewer.status import StatusReporter
from viewer.uploads import MemoryUploadStore, UploadStore

_status_reporter: StatusReporter | None = None
_upload_store: UploadStore | None = None
_layout_controller: LayoutController | None = None


def get_status_reporter() -> StatusReporter:
    """Process-wide status slot shared by every request."""
    global _status_reporter
    if _status_reporter is None:
        _status_reporter = StatusReporter()
    return _status_reporter


def get_upload_store() -> UploadStore:
    """Process-wide upload store, cleared at the start of each session."""
    global _upload_store
    if _upload_store is None:
        _upload_store = MemoryUploadStore()
    return _upload_store


def get_layout_controller() -> LayoutController:
    """Session display state."""
    global _layout_controller
    if _layout_controller is None:
        _layout_controller = LayoutController()
    return _layout_controller


def get_aggregation_controller(
    status: StatusReporter = Depends(get_status_reporter),
) -> AggregationController:
    """Build an aggregation controller wired to the shared status slot.

    Returns:
        A controller whose fetcher and auth client report to ``status``
    """
    settings = get_settings()
    auth = AuthClient(status, settings)
    fetcher = FeedFetcher(auth, status, settings)
    return AggregationController(fetcher, status, settings)
