"""Search YouTube for videos matching a query inside one date interval.

Only the first page (up to 50 results, ordered by view count) is
requested per interval; narrower intervals are how coverage is widened.
"""

from typing import List

import httplib2
from googleapiclient.errors import HttpError

from fecom.env import DEFAULT_RELEVANCE_LANGUAGE
from fecom.errors import DiscoveryRequestError, MalformedResponse
from fecom.models.ranges import Interval
from fecom.utils.clients import http_error_status
from fecom.utils.intervals import add_days
from fecom.utils.logging import get_logger
from fecom.utils.timezones import local_to_utc

LOGGER = get_logger()

MAX_RESULTS = 50
ORDER = "viewCount"


def search_window(interval: Interval, tz_name: str) -> tuple:
    """UTC (publishedAfter, publishedBefore) for an inclusive interval.

    The upper bound is local midnight after ``interval.end`` so the last day
    of the interval is searched too.
    """
    published_after = local_to_utc(interval.start, tz_name)
    published_before = local_to_utc(add_days(interval.end, 1), tz_name)
    return published_after, published_before


def fetch_video_ids_by_query(
    youtube,
    interval: Interval,
    query: str,
    tz_name: str,
    relevance_language: str = DEFAULT_RELEVANCE_LANGUAGE,
) -> List[str]:
    """Return video IDs published inside ``interval`` that match ``query``.

    Args:
        youtube: YouTube Data API resource (carries the API key)
        interval: Inclusive local-date interval to search
        query: Search terms, passed verbatim (supports -term and a|b)
        tz_name: IANA timezone the interval dates are expressed in
        relevance_language: relevanceLanguage hint for search.list

    Returns:
        Video IDs in the order returned by the API

    Raises:
        DiscoveryRequestError: On a transport failure or non-2xx status
        MalformedResponse: If the response has no usable item list
    """
    published_after, published_before = search_window(interval, tz_name)
    LOGGER.debug(f"🔎 search.list q={query!r} {published_after} → {published_before}")

    try:
        response = youtube.search().list(
            part="snippet",
            type="video",
            maxResults=MAX_RESULTS,
            order=ORDER,
            publishedAfter=published_after,
            publishedBefore=published_before,
            q=query,
            relevanceLanguage=relevance_language,
        ).execute()
    except HttpError as e:
        raise DiscoveryRequestError(
            f"YouTube search failed for interval {interval}: {e}",
            status=http_error_status(e),
        ) from e
    except (httplib2.HttpLib2Error, OSError) as e:
        raise DiscoveryRequestError(f"YouTube search transport error for interval {interval}: {e}") from e

    if not isinstance(response, dict):
        raise MalformedResponse(f"search.list returned {type(response).__name__}, expected an object")
    items = response.get("items", [])
    if not isinstance(items, list):
        raise MalformedResponse("search.list 'items' is not a list")

    video_ids = []
    for item in items:
        item_id = item.get("id") if isinstance(item, dict) else None
        video_id = item_id.get("videoId") if isinstance(item_id, dict) else None
        if not video_id:
            LOGGER.debug(f"Skipping search item without id.videoId: {item_id!r}")
            continue
        video_ids.append(video_id)
    return video_ids
