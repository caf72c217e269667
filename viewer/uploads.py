"""Storage abstraction for uploaded spreadsheet bytes."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class UploadStore(ABC):
    """Abstract store of uploaded files keyed by filename."""

    @abstractmethod
    def save(self, filename: str, data: bytes) -> str:
        """
        Save file data, replacing any earlier upload with the same name.

        Args:
            filename: Name of the uploaded file
            data: Raw file bytes

        Returns:
            Key the data can be retrieved under
        """
        pass

    @abstractmethod
    def get(self, filename: str) -> bytes | None:
        """
        Get uploaded bytes.

        Args:
            filename: Key returned by save()

        Returns:
            The stored bytes, or None if nothing is stored under that name
        """
        pass

    @abstractmethod
    def delete(self, filename: str) -> bool:
        """
        Delete a single upload.

        Returns:
            True if something was deleted, False otherwise
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every upload; called when a new session starts."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of uploads currently stored."""
        pass


class MemoryUploadStore(UploadStore):
    """Process-local in-memory upload store."""

    def __init__(self):
        self._files: dict[str, bytes] = {}

    def save(self, filename: str, data: bytes) -> str:
        self._files[filename] = data
        logger.info(f"Stored upload {filename!r} ({len(data)} bytes)")
        return filename

    def get(self, filename: str) -> bytes | None:
        return self._files.get(filename)

    def delete(self, filename: str) -> bool:
        if filename in self._files:
            del self._files[filename]
            logger.info(f"Deleted upload {filename!r}")
            return True
        return False

    def clear(self) -> None:
        count = len(self._files)
        self._files.clear()
        if count:
            logger.info(f"Cleared {count} stored upload(s)")

    def __len__(self) -> int:
        return len(self._files)
