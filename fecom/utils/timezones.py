"""Local/UTC conversion for the YouTube search window.

The search API only accepts UTC instants with a literal ``Z`` suffix, while
users give calendar dates in their own timezone. Dates are anchored at local
midnight before conversion.
"""

import os
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fecom.errors import InvalidDate, InvalidTimezone
from fecom.utils.logging import get_logger

LOGGER = get_logger()

UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
LOCAL_DISPLAY_FORMAT = "%Y-%m-%dT%H:%M:%S%Z"
FALLBACK_TIMEZONE = "UTC"

_ETC_TIMEZONE = Path("/etc/timezone")
_ETC_LOCALTIME = Path("/etc/localtime")


def resolve_zone(name: str) -> ZoneInfo:
    if not name:
        raise InvalidTimezone("Timezone name is empty")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezone(f"Unknown timezone: {name!r}") from e


def parse_calendar_date(value: Union[date, str]) -> date:
    """Accept a date or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise InvalidDate(f"Invalid calendar date {value!r}, expected YYYY-MM-DD") from e


def local_to_utc(local_date: Union[date, str], tz_name: str) -> str:
    """Convert local midnight of ``local_date`` in ``tz_name`` to a UTC instant string.

    Args:
        local_date: Calendar date (date or YYYY-MM-DD)
        tz_name: IANA timezone name, e.g. 'Asia/Jakarta'

    Returns:
        Instant formatted as YYYY-MM-DDTHH:MM:SSZ
    """
    zone = resolve_zone(tz_name)
    day = parse_calendar_date(local_date)
    local_midnight = datetime.combine(day, time.min, tzinfo=zone)
    try:
        return local_midnight.astimezone(timezone.utc).strftime(UTC_FORMAT)
    except OverflowError as e:
        raise InvalidDate(f"{day.isoformat()} in {tz_name} is outside the representable UTC range") from e


def utc_to_local(utc_instant: str, tz_name: str) -> str:
    """Render a UTC instant in ``tz_name`` with the zone abbreviation, e.g. 2024-06-01T00:00:00WIB."""
    zone = resolve_zone(tz_name)
    try:
        parsed = datetime.fromisoformat(utc_instant.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise InvalidDate(f"Invalid UTC instant {utc_instant!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(zone).strftime(LOCAL_DISPLAY_FORMAT)


def _zone_from_localtime_link(path: Path) -> Optional[str]:
    if not path.is_symlink():
        return None
    target = str(path.resolve())
    marker = "zoneinfo/"
    if marker not in target:
        return None
    return target.split(marker, 1)[1]


def get_local_timezone() -> str:
    """Best-effort IANA name of the host timezone.

    Checks $TZ, /etc/timezone, then the /etc/localtime symlink. Falls back
    to UTC when nothing usable is found.
    """
    candidates = [os.environ.get("TZ", "").lstrip(":")]
    try:
        candidates.append(_ETC_TIMEZONE.read_text(encoding="utf-8").strip())
    except OSError:
        pass
    candidates.append(_zone_from_localtime_link(_ETC_LOCALTIME) or "")

    for name in candidates:
        if not name:
            continue
        try:
            resolve_zone(name)
        except InvalidTimezone:
            LOGGER.debug(f"Ignoring unusable timezone candidate {name!r}")
            continue
        return name

    LOGGER.warning(f"⚠️ Could not determine host timezone, using {FALLBACK_TIMEZONE}")
    return FALLBACK_TIMEZONE
