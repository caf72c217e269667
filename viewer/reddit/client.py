"""Reddit listing client for fetching one page of a subreddit."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from viewer.config import Settings, get_settings
from viewer.errors import FetchError
from viewer.reddit.auth import AuthClient
from viewer.reddit.models import Post, SortMode, TimeWindow, clamp_limit
from viewer.status import StatusReporter

logger = logging.getLogger(__name__)


def listing_params(
    sort: SortMode, limit: int, time_window: TimeWindow | None
) -> dict[str, Any]:
    """Build listing query parameters.

    The ``t`` parameter is only sent for ``top`` listings.
    """
    params: dict[str, Any] = {"limit": clamp_limit(limit)}
    if sort is SortMode.TOP and time_window is not None:
        params["t"] = time_window.value
    return params


def parse_listing(data: Any) -> list[Post]:
    """Extract posts from a listing response body.

    Children missing any required field are skipped.

    Raises:
        FetchError: If the body is an error response or not a listing
    """
    if isinstance(data, dict) and data.get("error"):
        raise FetchError(str(data["error"]))

    try:
        children = data["data"]["children"]
    except (KeyError, TypeError) as e:
        raise FetchError("Malformed listing response") from e
    if not isinstance(children, list):
        raise FetchError("Malformed listing response")

    posts: list[Post] = []
    for child in children:
        try:
            posts.append(Post.model_validate(child["data"]))
        except (KeyError, TypeError, ValidationError):
            logger.warning("Skipping malformed listing child")
            continue
    return posts


class FeedFetcher:
    """Retrieves one page of posts for a single subreddit."""

    def __init__(
        self,
        auth: AuthClient,
        status: StatusReporter,
        settings: Settings | None = None,
    ):
        self._auth = auth
        self._status = status
        self._settings = settings or get_settings()

    async def request_listing(
        self,
        token: str,
        name: str,
        sort: SortMode,
        limit: int,
        time_window: TimeWindow | None = None,
    ) -> list[Post]:
        """Fetch and parse a listing with an existing bearer token.

        Raises:
            FetchError: If the request fails or the response reports an error
        """
        url = f"{self._settings.api_base_url.rstrip('/')}/r/{name}/{sort.value}.json"
        headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": self._settings.user_agent,
        }

        try:
            async with httpx.AsyncClient(timeout=self._settings.http_timeout_seconds) as client:
                r = await client.get(
                    url, headers=headers, params=listing_params(sort, limit, time_window)
                )
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise FetchError(str(e)) from e

        return parse_listing(data)

    async def fetch_feed(
        self,
        client_id: str,
        client_secret: str,
        name: str,
        sort: SortMode,
        limit: int,
        time_window: TimeWindow | None = None,
    ) -> list[Post]:
        """Fetch one page of posts for ``name``.

        A fresh token is obtained for every call. Failures are reported
        through the status slot and yield an empty list; nothing is raised.

        Returns:
            Posts in listing order, or an empty list on failure
        """
        self._status.set_status("Fetching posts...")

        token = await self._auth.get_token(client_id, client_secret)
        if not token:
            return []

        try:
            posts = await self.request_listing(token, name, sort, limit, time_window)
        except FetchError as e:
            logger.warning(f"Listing fetch failed for r/{name}: {e}")
            self._status.set_status(f"Error fetching posts: {e}", is_error=True)
            return []

        self._status.set_status("Posts fetched successfully")
        return posts
