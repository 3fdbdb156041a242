"""Maps raw CSV rows to marker records."""

from collections.abc import Sequence

from csvmarkers.data.models import MarkerRecord, RawRow, RowIssue, SkipReason
from csvmarkers.utils.constants import COMMENT_COLUMN, HEADER_LINE_OFFSET, TIMESTAMP_COLUMN
from csvmarkers.utils.exceptions import NoValidMarkers
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class MarkerRowParser:
    """Turns rows into marker records, dropping rows with an empty field.

    Column 0 is the timestamp and column 1 the comment; any further
    columns are ignored. Dropped rows are kept in ``dropped``.
    """

    def __init__(self) -> None:
        self.dropped: list[RowIssue] = []

    def to_marker_records(self, rows: Sequence[RawRow]) -> list[MarkerRecord]:
        """
        Build marker records from rows, keeping file order.

        Args:
            rows: Rows produced by CsvReader

        Returns:
            Non-empty list of MarkerRecord

        Raises:
            NoValidMarkers: If no row has both a timestamp and a comment
        """
        self.dropped = []
        records: list[MarkerRecord] = []

        for index, row in enumerate(rows):
            line_number = row.line_number or index + HEADER_LINE_OFFSET
            timestamp = row[TIMESTAMP_COLUMN]
            comment = row[COMMENT_COLUMN]

            if not timestamp or not comment:
                missing = "timestamp" if not timestamp else "comment"
                detail = f"empty {missing} in row: {', '.join(row.fields)}"
                logger.warning(f"Line {line_number}: skipping row, {detail}")
                self.dropped.append(RowIssue(line_number, SkipReason.EMPTY_FIELD, detail))
                continue

            records.append(MarkerRecord(timestamp, comment, line_number=line_number))
            logger.debug(f"Line {line_number}: marker candidate {timestamp!r} -> {comment!r}")

        if not records:
            raise NoValidMarkers(rows_checked=len(rows))

        return records
