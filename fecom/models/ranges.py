"""Date range DTOs used to chunk a search window."""

from dataclasses import dataclass
from datetime import date

from fecom.errors import InvalidDateRange
from fecom.utils.timezones import parse_calendar_date


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates requested by the user."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidDateRange(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    @staticmethod
    def from_strings(start: str, end: str) -> "DateRange":
        return DateRange(start=parse_calendar_date(start), end=parse_calendar_date(end))


@dataclass(frozen=True)
class Interval:
    """Inclusive sub-range of a DateRange, searched with a single API call."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"
