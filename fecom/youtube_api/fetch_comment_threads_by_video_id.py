"""Fetch top-level comment threads for a video from YouTube API.

Retrieves a single page of up to 100 threads ordered by relevance and maps
each to a CommentRecord.
"""

from typing import List

import httplib2
from googleapiclient.errors import HttpError

from fecom.errors import CommentRequestError, MalformedResponse
from fecom.models.comments import CommentRecord
from fecom.utils.clients import http_error_reason, http_error_status
from fecom.utils.logging import get_logger

LOGGER = get_logger()

MAX_RESULTS = 100
ORDER = "relevance"


def fetch_comment_threads_by_video_id(youtube, video_id: str) -> List[CommentRecord]:
    """Fetch top-level comments for a video.

    A video with comments disabled, or with none posted, yields an empty list.

    Args:
        youtube: YouTube Data API resource
        video_id: YouTube video ID

    Returns:
        One CommentRecord per thread, in API order

    Raises:
        CommentRequestError: On a transport failure or non-2xx status
        MalformedResponse: If the response has no usable item list
    """
    try:
        response = youtube.commentThreads().list(
            part="snippet",
            maxResults=MAX_RESULTS,
            order=ORDER,
            videoId=video_id,
        ).execute()
    except HttpError as e:
        status = http_error_status(e)
        if status == 403 and http_error_reason(e) == "commentsDisabled":
            LOGGER.info(f"🚫 Comments are disabled for video {video_id}")
            return []
        raise CommentRequestError(
            f"YouTube API error while fetching comments for {video_id}: {e}",
            video_id=video_id,
            status=status,
        ) from e
    except (httplib2.HttpLib2Error, OSError) as e:
        raise CommentRequestError(
            f"Transport error while fetching comments for {video_id}: {e}",
            video_id=video_id,
        ) from e

    if not isinstance(response, dict):
        raise MalformedResponse(f"commentThreads.list returned {type(response).__name__}, expected an object")
    items = response.get("items", [])
    if not isinstance(items, list):
        raise MalformedResponse("commentThreads.list 'items' is not a list")

    records = []
    for item in items:
        try:
            records.append(CommentRecord.from_thread(item))
        except (KeyError, AttributeError):
            LOGGER.debug(f"Skipping thread without top-level comment on video {video_id}")
    return records
