"""Data Transfer Objects (DTOs) for fecom.

All DTOs can be imported directly from this package for convenience:
    from fecom.models import DateRange, Interval, CommentRecord
"""

# Date range DTOs
from fecom.models.ranges import DateRange, Interval

# Comment DTOs
from fecom.models.comments import PLATFORM_YOUTUBE, CommentRecord

__all__ = [
    # Ranges
    "DateRange",
    "Interval",
    # Comments
    "CommentRecord",
    "PLATFORM_YOUTUBE",
]
