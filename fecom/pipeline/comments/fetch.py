#!/usr/bin/env python3
"""Fetch YouTube comments for videos matching a query within a date range."""

import argparse
import sys
from typing import List, Optional

from fecom.env import Settings, load_settings
from fecom.errors import CommentRequestError, FecomError
from fecom.models.ranges import DateRange
from fecom.utils.clients import get_youtube
from fecom.utils.intervals import partition
from fecom.utils.logging import get_logger, set_log_level
from fecom.utils.timezones import get_local_timezone, resolve_zone
from fecom.utils.tsv_utils import TsvCommentWriter
from fecom.youtube_api.fetch_comment_threads_by_video_id import fetch_comment_threads_by_video_id
from fecom.youtube_api.fetch_video_ids_by_query import fetch_video_ids_by_query

LOGGER = get_logger()


def run(date_range: DateRange, query: str, settings: Settings, youtube=None) -> int:
    """Fetch comments for every video found in each interval of ``date_range``.

    Args:
        date_range: Inclusive local-date range to search
        query: Search terms, passed verbatim to search.list
        settings: Runtime settings (API key, timezone, output file, ...)
        youtube: Optional prebuilt YouTube API resource

    Returns:
        Number of comment rows written
    """
    tz_name = settings.timezone or get_local_timezone()
    resolve_zone(tz_name)
    intervals = partition(date_range, settings.max_span_days)
    if youtube is None:
        youtube = get_youtube(settings.api_key)

    LOGGER.info(
        f"🌎 Fetching YouTube comments from {date_range.start} to {date_range.end} "
        f"in {settings.max_span_days}-day intervals ({len(intervals)} total, timezone {tz_name})..."
    )

    with TsvCommentWriter(settings.output_file, escape=settings.escape_tsv) as sink:
        for interval in intervals:
            LOGGER.info(f"📅 Processing interval: {interval}")
            video_ids = fetch_video_ids_by_query(
                youtube,
                interval,
                query,
                tz_name,
                relevance_language=settings.relevance_language,
            )
            LOGGER.info(f"📦 Found {len(video_ids)} videos for this interval")

            for idx, video_id in enumerate(video_ids, start=1):
                LOGGER.info(f"🗨️ Fetching comments for video {idx}/{len(video_ids)}: {video_id}")
                try:
                    records = fetch_comment_threads_by_video_id(youtube, video_id)
                except CommentRequestError as e:
                    if not settings.skip_failed_videos:
                        raise
                    LOGGER.warning(f"⚠️ Skipping video {video_id}: {e}")
                    continue
                written = sink.write_all(records)
                LOGGER.debug(f"Wrote {written} comments for video {video_id}")

        total = sink.rows_written

    LOGGER.info(f"✅ {total} YouTube comments saved to {settings.output_file}")
    return total


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fecom",
        description="Fetch YouTube comments for videos matching a query within a date range",
        epilog="Example: fecom 1970-01-01 1970-01-07 'foo|bar -bir'",
    )
    parser.add_argument("start", help="Start date (YYYY-MM-DD), local time")
    parser.add_argument("end", help="End date (YYYY-MM-DD), local time, inclusive")
    parser.add_argument("query", help="Search query; supports NOT (-term) and OR (a|b)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        set_log_level(settings.log_level)
        date_range = DateRange.from_strings(args.start, args.end)
        run(date_range, args.query, settings)
    except (FecomError, ValueError) as e:
        LOGGER.error(f"❌ {e}")
        return 1
    except OSError as e:
        LOGGER.error(f"❌ Could not write output: {e}")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
