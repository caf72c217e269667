"""Pydantic models for Reddit queries and listing items."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

MIN_LIMIT = 1
MAX_LIMIT = 100


class SortMode(str, Enum):
    """Listing orderings supported by the Reddit listing endpoint."""

    BEST = "best"
    HOT = "hot"
    NEW = "new"
    TOP = "top"
    RISING = "rising"
    CONTROVERSIAL = "controversial"


class TimeWindow(str, Enum):
    """Periods a ``top`` listing can be restricted to."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


def clamp_limit(limit: int) -> int:
    """Clamp a listing limit into the range the API accepts (1-100)."""
    return min(max(limit, MIN_LIMIT), MAX_LIMIT)


class Credentials(BaseModel):
    """Application id/secret pair used for the client-credentials grant."""

    client_id: str
    client_secret: str


class FeedQuery(BaseModel):
    """A validated query over one or more subreddits."""

    names: list[str] = Field(min_length=1)
    sort: SortMode = SortMode.BEST
    limit: int = Field(default=5, ge=MIN_LIMIT, le=MAX_LIMIT)
    time_window: TimeWindow | None = None

    @model_validator(mode="after")
    def _time_window_only_for_top(self) -> "FeedQuery":
        if self.sort is not SortMode.TOP:
            self.time_window = None
        return self


class Post(BaseModel):
    """A single listing item; extra Reddit fields are ignored."""

    url: str
    title: str
    permalink: str
