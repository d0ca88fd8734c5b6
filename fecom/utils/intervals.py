"""Split a date range into fixed-size search intervals.

search.list returns at most 50 results per call, so a wide window is
searched in small chunks to surface more videos.
"""

from datetime import date, timedelta
from typing import Iterator, Union

from fecom.errors import InvalidDate
from fecom.models.ranges import DateRange, Interval
from fecom.utils.timezones import parse_calendar_date

__all__ = [
    "MAX_SPAN_DAYS",
    "IntervalPartition",
    "add_days",
    "partition",
]

MAX_SPAN_DAYS = 3


def add_days(day: Union[date, str], days: int) -> date:
    """Return ``day`` shifted by ``days`` (negative values go backwards).

    Raises:
        InvalidDate: If the result falls outside the supported date range
    """
    parsed = parse_calendar_date(day)
    try:
        return parsed + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDate(f"{parsed.isoformat()} shifted by {days} days is out of range") from e


class IntervalPartition:
    """Lazy, re-iterable sequence of Intervals covering a DateRange.

    Each interval spans at most ``max_span_days`` days. Intervals are
    contiguous and never overlap; the last one is clamped to the range end.
    """

    def __init__(self, date_range: DateRange, max_span_days: int = MAX_SPAN_DAYS):
        if max_span_days < 1:
            raise ValueError(f"max_span_days must be >= 1, got {max_span_days}")
        self.date_range = date_range
        self.max_span_days = max_span_days

    def __iter__(self) -> Iterator[Interval]:
        cursor = self.date_range.start
        final = self.date_range.end
        while True:
            span = min(self.max_span_days - 1, (final - cursor).days)
            end = cursor + timedelta(days=span)
            yield Interval(start=cursor, end=end)
            if end == final:
                break
            cursor = add_days(end, 1)

    def __len__(self) -> int:
        return -(-self.date_range.days // self.max_span_days)

    def __repr__(self) -> str:
        return (
            f"IntervalPartition({self.date_range.start.isoformat()}..{self.date_range.end.isoformat()}, "
            f"max_span_days={self.max_span_days})"
        )


def partition(date_range: DateRange, max_span_days: int = MAX_SPAN_DAYS) -> IntervalPartition:
    return IntervalPartition(date_range, max_span_days)
