"""Presentation sinks that aggregated posts are rendered into."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

REDDIT_WEB_BASE = "https://reddit.com"


class MediaTile(BaseModel):
    """A thumbnail tile for an image or animation post."""

    url: str
    title: str


class ListEntry(BaseModel):
    """A non-media post shown as a permalink / URL pair."""

    permalink: str
    permalink_url: str
    url: str


class PresentationSink(ABC):
    """Target that the aggregation controller renders into."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all previously rendered output."""
        pass

    @abstractmethod
    def add_media_tile(self, url: str, title: str) -> None:
        """Append a media tile."""
        pass

    @abstractmethod
    def add_list_entry(self, permalink: str, url: str) -> None:
        """Append a non-media list entry."""
        pass


class RenderBuffer(PresentationSink):
    """In-memory sink whose contents are returned to the browser as JSON."""

    def __init__(self):
        self.media: list[MediaTile] = []
        self.entries: list[ListEntry] = []

    def clear(self) -> None:
        self.media = []
        self.entries = []

    def add_media_tile(self, url: str, title: str) -> None:
        self.media.append(MediaTile(url=url, title=title))

    def add_list_entry(self, permalink: str, url: str) -> None:
        self.entries.append(
            ListEntry(permalink=permalink, permalink_url=f"{REDDIT_WEB_BASE}{permalink}", url=url)
        )

    def to_payload(self) -> dict:
        return {
            "media": [tile.model_dump() for tile in self.media],
            "entries": [entry.model_dump() for entry in self.entries],
        }
