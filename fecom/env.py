"""Runtime settings loaded from the environment and an optional .env file."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from fecom.errors import ConfigurationError

DEFAULT_OUTPUT_FILE = "youtube_comments.tsv"
DEFAULT_MAX_SPAN_DAYS = 3
DEFAULT_RELEVANCE_LANGUAGE = "id"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    timezone: Optional[str] = None  # None means use the host timezone
    output_file: str = DEFAULT_OUTPUT_FILE
    max_span_days: int = DEFAULT_MAX_SPAN_DAYS
    relevance_language: str = DEFAULT_RELEVANCE_LANGUAGE
    skip_failed_videos: bool = False
    escape_tsv: bool = False
    log_level: str = "INFO"


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_positive_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
    if parsed < 1:
        raise ConfigurationError(f"{name} must be >= 1, got {parsed}")
    return parsed


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        dotenv: If True, load .env from the working directory first.
            Variables already present in the environment win.

    Returns:
        Populated Settings
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    env = os.environ if environ is None else environ

    return Settings(
        api_key=env.get("YOUTUBE_API_KEY") or None,
        timezone=env.get("FECOM_TIMEZONE") or None,
        output_file=env.get("FECOM_OUTPUT_FILE") or DEFAULT_OUTPUT_FILE,
        max_span_days=_parse_positive_int(
            "FECOM_MAX_SPAN_DAYS", env.get("FECOM_MAX_SPAN_DAYS"), DEFAULT_MAX_SPAN_DAYS
        ),
        relevance_language=env.get("FECOM_RELEVANCE_LANGUAGE") or DEFAULT_RELEVANCE_LANGUAGE,
        skip_failed_videos=_parse_bool(
            "FECOM_SKIP_FAILED_VIDEOS", env.get("FECOM_SKIP_FAILED_VIDEOS"), False
        ),
        escape_tsv=_parse_bool("FECOM_ESCAPE_TSV", env.get("FECOM_ESCAPE_TSV"), False),
        log_level=env.get("FECOM_LOG_LEVEL") or "INFO",
    )
