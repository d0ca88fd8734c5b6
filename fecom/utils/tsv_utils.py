"""Tab-separated output file for comment records."""

from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from fecom.models.comments import CommentRecord
from fecom.utils.logging import get_logger

__all__ = [
    "escape_tsv_field",
    "format_row",
    "TsvCommentWriter",
]

LOGGER = get_logger()

# Same escapes as jq's @tsv
_TSV_ESCAPES = str.maketrans({"\\": "\\\\", "\t": "\\t", "\r": "\\r", "\n": "\\n"})


def escape_tsv_field(value: str) -> str:
    return value.translate(_TSV_ESCAPES)


def format_row(record: CommentRecord, escape: bool = False) -> str:
    """Render a record as one TSV line (platform, posted_at, comment).

    Without ``escape`` the comment text is written raw, so embedded tabs or
    newlines will split the row.
    """
    fields = record.to_row()
    if escape:
        fields = [escape_tsv_field(f) for f in fields]
    return "\t".join(fields) + "\n"


class TsvCommentWriter:
    """Context manager that truncates ``path`` on open and appends records.

    Example:
        with TsvCommentWriter("youtube_comments.tsv") as sink:
            sink.write_all(records)
    """

    def __init__(self, path: Union[str, Path], escape: bool = False):
        self.path = Path(path)
        self.escape = escape
        self.rows_written = 0
        self._fh: Optional[TextIO] = None

    def __enter__(self) -> "TsvCommentWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("w", encoding="utf-8", newline="")
        LOGGER.debug(f"Opened {self.path} for writing")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def write(self, record: CommentRecord) -> None:
        if self._fh is None:
            raise RuntimeError("TsvCommentWriter is not open")
        self._fh.write(format_row(record, escape=self.escape))
        self.rows_written += 1

    def write_all(self, records: Iterable[CommentRecord]) -> int:
        count = 0
        for record in records:
            self.write(record)
            count += 1
        if self._fh is not None:
            self._fh.flush()
        return count
