"""Exception types raised by fecom.

Everything derives from FecomError so the command-line entry point can
report any failure with a single handler.
"""

from typing import Optional


class FecomError(Exception):
    """Base class for all fecom errors."""


class ConfigurationError(FecomError):
    """Missing or invalid settings (e.g. no API key)."""


class InvalidDate(FecomError, ValueError):
    """A calendar date or instant string could not be parsed."""


class InvalidDateRange(InvalidDate):
    """Start date falls after end date."""


class InvalidTimezone(FecomError, ValueError):
    """Timezone name is unknown to the host timezone database."""


class ApiRequestError(FecomError):
    """A YouTube Data API call failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DiscoveryRequestError(ApiRequestError):
    """search.list call failed."""


class CommentRequestError(ApiRequestError):
    """commentThreads.list call failed."""

    def __init__(self, message: str, video_id: str, status: Optional[int] = None):
        super().__init__(message, status=status)
        self.video_id = video_id


class MalformedResponse(FecomError):
    """Upstream response did not have the expected shape."""
