"""Reddit API access for Reddit Media Viewer."""

from .auth import AuthClient
from .client import FeedFetcher
from .models import Credentials, FeedQuery, Post, SortMode, TimeWindow, clamp_limit

__all__ = [
    "AuthClient",
    "Credentials",
    "FeedFetcher",
    "FeedQuery",
    "Post",
    "SortMode",
    "TimeWindow",
    "clamp_limit",
]
