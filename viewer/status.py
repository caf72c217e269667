"""Single-slot status reporting."""

import logging

from pydantic import BaseModel

logger = logging.getLogger(__name__)

INITIAL_STATUS = "Please enter Client ID and Secret"


class StatusMessage(BaseModel):
    """Outcome of the most recent status-producing operation."""

    text: str
    is_error: bool = False


class StatusReporter:
    """Holds exactly one current status message; the last write wins."""

    def __init__(self, text: str = INITIAL_STATUS, is_error: bool = True):
        self._current = StatusMessage(text=text, is_error=is_error)

    @property
    def current(self) -> StatusMessage:
        return self._current

    def set_status(self, text: str, is_error: bool = False) -> StatusMessage:
        """Overwrite the current status.

        Args:
            text: Message to show in the status bar
            is_error: Whether the message should be shown as an error

        Returns:
            The new current status
        """
        self._current = StatusMessage(text=text, is_error=is_error)
        if is_error:
            logger.warning(f"Status: {text}")
        else:
            logger.info(f"Status: {text}")
        return self._current
