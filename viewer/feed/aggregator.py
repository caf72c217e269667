"""Aggregation and rendering of posts across one or more subreddits."""

import logging
from typing import Sequence

from pydantic import BaseModel

from viewer.config import Settings, get_settings
from viewer.errors import QueryValidationError
from viewer.feed.render import PresentationSink
from viewer.reddit.client import FeedFetcher
from viewer.reddit.models import (
    Credentials,
    FeedQuery,
    Post,
    SortMode,
    TimeWindow,
    clamp_limit,
)
from viewer.status import StatusReporter

logger = logging.getLogger(__name__)

MEDIA_EXTENSIONS = (".gif", ".jpeg", ".jpg", ".png")
TITLE_MAX_LENGTH = 100


class RunRequest(BaseModel):
    """Raw viewer form state submitted by the browser."""

    client_id: str = ""
    client_secret: str = ""
    feeds: str = ""
    sort: SortMode = SortMode.BEST
    limit: int | str | None = None
    time_window: TimeWindow | None = None


def split_feed_names(text: str) -> list[str]:
    """Split '+'-joined subreddit input into trimmed, non-empty names.

    Order is preserved and duplicates are kept.

    Example:
        >>> split_feed_names("a + b+c ")
        ['a', 'b', 'c']
    """
    return [name.strip() for name in text.split("+") if name.strip()]


def parse_limit(value: int | str | None, default: int) -> int:
    """Parse a limit form value, falling back to ``default`` when unreadable."""
    if isinstance(value, int):
        return clamp_limit(value)
    try:
        return clamp_limit(int(str(value).strip()))
    except ValueError:
        return clamp_limit(default)


def build_query(request: RunRequest, default_limit: int = 5) -> tuple[Credentials, FeedQuery]:
    """Validate form state into credentials and a feed query.

    Raises:
        QueryValidationError: If credentials or subreddit names are missing
    """
    client_id = request.client_id.strip()
    client_secret = request.client_secret.strip()
    if not client_id or not client_secret:
        raise QueryValidationError("Please enter Client ID and Secret")

    names = split_feed_names(request.feeds)
    if not names:
        raise QueryValidationError("Please enter a subreddit or multireddit")

    time_window = None
    if request.sort is SortMode.TOP:
        time_window = request.time_window or TimeWindow.DAY

    query = FeedQuery(
        names=names,
        sort=request.sort,
        limit=parse_limit(request.limit, default_limit),
        time_window=time_window,
    )
    return Credentials(client_id=client_id, client_secret=client_secret), query


def is_media(post: Post) -> bool:
    """Check whether a post links directly to an image or animation file."""
    return post.url.lower().endswith(MEDIA_EXTENSIONS)


def render_posts(posts: Sequence[Post], sink: PresentationSink) -> None:
    """Write posts to ``sink`` in order, routing each by media type."""
    for post in posts:
        if is_media(post):
            sink.add_media_tile(post.url, post.title[:TITLE_MAX_LENGTH])
        else:
            sink.add_list_entry(post.permalink, post.url)


class AggregationController:
    """Fetches every requested subreddit in order and renders the merged posts."""

    def __init__(
        self,
        fetcher: FeedFetcher,
        status: StatusReporter,
        settings: Settings | None = None,
    ):
        self._fetcher = fetcher
        self._status = status
        self._settings = settings or get_settings()

    async def aggregate(self, credentials: Credentials, query: FeedQuery) -> list[Post]:
        """Fetch each subreddit sequentially and concatenate the results.

        A subreddit that fails contributes no posts; the remaining ones are
        still fetched.
        """
        posts: list[Post] = []
        for name in query.names:
            posts.extend(
                await self._fetcher.fetch_feed(
                    credentials.client_id,
                    credentials.client_secret,
                    name,
                    query.sort,
                    query.limit,
                    query.time_window,
                )
            )
        return posts

    async def run(self, request: RunRequest, sink: PresentationSink) -> list[Post] | None:
        """Validate, fetch, classify and render one viewer query.

        Args:
            request: Current form state
            sink: Presentation target; cleared before new output is written

        Returns:
            The aggregated posts, or None if validation blocked the run (in
            which case the sink is left untouched)
        """
        try:
            credentials, query = build_query(request, self._settings.default_limit)
        except QueryValidationError as e:
            self._status.set_status(str(e), is_error=True)
            return None

        sink.clear()

        posts = await self.aggregate(credentials, query)
        logger.info(
            f"Aggregated {len(posts)} posts from {len(query.names)} subreddit(s), sort={query.sort.value}"
        )

        render_posts(posts, sink)
        return posts
