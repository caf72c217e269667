"""Error taxonomy for Reddit Media Viewer.

Every error here is caught at the boundary where it originates and turned into
a status message plus an empty or partial result.
"""


class ViewerError(Exception):
    """Base class for viewer errors."""


class QueryValidationError(ViewerError):
    """Required viewer input is missing; raised before any network call."""


class AuthError(ViewerError):
    """The client-credentials token exchange failed."""


class FetchError(ViewerError):
    """A single feed listing could not be retrieved or parsed."""


class SpreadsheetImportError(ViewerError):
    """An uploaded spreadsheet could not be read."""
