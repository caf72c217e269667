"""Feed aggregation, rendering and layout for Reddit Media Viewer."""

from .aggregator import (
    AggregationController,
    RunRequest,
    build_query,
    is_media,
    render_posts,
    split_feed_names,
)
from .layout import DisplayState, LayoutController, LayoutMode, apply_layout
from .render import PresentationSink, RenderBuffer

__all__ = [
    "AggregationController",
    "DisplayState",
    "LayoutController",
    "LayoutMode",
    "PresentationSink",
    "RenderBuffer",
    "RunRequest",
    "apply_layout",
    "build_query",
    "is_media",
    "render_posts",
    "split_feed_names",
]
