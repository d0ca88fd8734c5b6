"""Comment-related Data Transfer Objects (DTOs).

This module contains the normalised record written for each top-level
YouTube comment.
"""

from dataclasses import dataclass
from typing import List

PLATFORM_YOUTUBE = "YouTube"


@dataclass(frozen=True)
class CommentRecord:
    """One top-level comment, as written to the output file."""

    platform: str
    posted_at: str  # upstream publishedAt, kept verbatim (UTC)
    comment: str  # textOriginal, unformatted

    def to_row(self) -> List[str]:
        return [self.platform, self.posted_at, self.comment]

    @staticmethod
    def from_thread(item: dict) -> "CommentRecord":
        """Build a record from a commentThreads.list item.

        Raises:
            KeyError: If the item has no top-level comment snippet
        """
        snippet = (
            item.get("snippet", {})
                .get("topLevelComment", {})
                .get("snippet")
        )
        if not snippet:
            raise KeyError("snippet.topLevelComment.snippet")
        return CommentRecord(
            platform=PLATFORM_YOUTUBE,
            posted_at=snippet.get("publishedAt") or "",
            comment=snippet.get("textOriginal") or "",
        )
