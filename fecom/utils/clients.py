# fecom/utils/clients.py

import json
from typing import Dict, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from fecom.errors import ConfigurationError
from fecom.utils.logging import get_logger

LOGGER = get_logger()

# One client per API key
_youtube: Dict[str, object] = {}


def get_youtube(api_key: Optional[str]):
    """Return a cached YouTube Data API v3 resource built with ``api_key``."""
    if not api_key:
        LOGGER.error("YOUTUBE_API_KEY not set in environment.")
        raise ConfigurationError("❌ YOUTUBE_API_KEY is not set in environment variables.")
    if api_key not in _youtube:
        try:
            LOGGER.debug("Initializing YouTube Data API client...")
            _youtube[api_key] = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        except HttpError as e:
            LOGGER.exception("Failed to build YouTube API client.")
            raise ConfigurationError(f"Failed to initialize YouTube API client: {e}") from e
    return _youtube[api_key]


def reset_clients() -> None:
    _youtube.clear()


def http_error_status(error: HttpError) -> Optional[int]:
    status = getattr(getattr(error, "resp", None), "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def http_error_reason(error: HttpError) -> Optional[str]:
    """Extract the first error reason (e.g. 'commentsDisabled') from an HttpError body."""
    try:
        content = error.content
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")
        errors = json.loads(content).get("error", {}).get("errors", [{}])
        if errors:
            return errors[0].get("reason")
        return None
    except (json.JSONDecodeError, AttributeError, IndexError, KeyError, TypeError):
        return None
