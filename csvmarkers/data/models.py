"""Data models for rows, markers and import outcomes.

This module defines the value types passed between the reader, the row
parser and the import pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum


class SkipReason(str, Enum):
    """Kinds of recoverable per-row problems."""

    TOO_FEW_FIELDS = "too_few_fields"
    EMPTY_FIELD = "empty_field"
    INVALID_TIME = "invalid_time"
    SINK_REJECTED = "sink_rejected"


class MarkerStatus(str, Enum):
    """Final status of a marker record offered to the sink."""

    INSERTED = "inserted"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class RawRow:
    """Trimmed, unquoted fields of one CSV data line.

    Attributes:
        fields: Field values in column order
        line_number: 1-based line number in the source file
    """

    fields: tuple[str, ...]
    line_number: int = 0

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, index: int) -> str:
        return self.fields[index]


@dataclass(frozen=True)
class MarkerRecord:
    """A timestamp/comment pair ready for time parsing.

    Attributes:
        timestamp_text: Timestamp as written in the CSV (never empty)
        comment_text: Marker label (never empty)
        line_number: Source line for diagnostics, ignored for equality

    Example:
        >>> MarkerRecord("10", "Goal", line_number=2)
        MarkerRecord(timestamp_text='10', comment_text='Goal', line_number=2)
    """

    timestamp_text: str
    comment_text: str
    line_number: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Reject empty fields."""
        if not self.timestamp_text:
            raise ValueError("MarkerRecord timestamp_text cannot be empty")
        if not self.comment_text:
            raise ValueError("MarkerRecord comment_text cannot be empty")


@dataclass(frozen=True)
class TimeParseResult:
    """Outcome of parsing a timestamp.

    Exactly one of ``seconds`` and ``error`` is set.
    """

    text: str
    seconds: float | None = None
    error: SkipReason | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RowIssue:
    """A row dropped before reaching the sink.

    Attributes:
        line_number: 1-based line number in the source file
        reason: Why the row was dropped
        detail: Human-readable description for logs and reports
    """

    line_number: int
    reason: SkipReason
    detail: str = ""


@dataclass(frozen=True)
class MarkerOutcome:
    """What happened to one marker record during an import run."""

    record: MarkerRecord
    status: MarkerStatus
    seconds: float | None = None
    reason: SkipReason | None = None

    @property
    def line_number(self) -> int | None:
        return self.record.line_number


@dataclass
class ImportResult:
    """Counts and per-record outcomes of one import run.

    ``inserted_count + skipped_count`` always equals the number of marker
    records offered to the sink loop. Rows dropped earlier are listed in
    ``dropped_rows`` and are not counted as skipped.

    Attributes:
        inserted_count: Markers the sink accepted
        skipped_count: Records with an invalid time or rejected by the sink
        outcomes: Per-record outcomes in file order
        dropped_rows: Rows filtered out by the reader or row parser
    """

    inserted_count: int = 0
    skipped_count: int = 0
    outcomes: list[MarkerOutcome] = field(default_factory=list)
    dropped_rows: list[RowIssue] = field(default_factory=list)

    def record_inserted(self, record: MarkerRecord, seconds: float) -> None:
        self.inserted_count += 1
        self.outcomes.append(MarkerOutcome(record, MarkerStatus.INSERTED, seconds=seconds))

    def record_skipped(self, record: MarkerRecord, reason: SkipReason, seconds: float | None = None) -> None:
        self.skipped_count += 1
        self.outcomes.append(MarkerOutcome(record, MarkerStatus.SKIPPED, seconds=seconds, reason=reason))

    @property
    def total(self) -> int:
        return self.inserted_count + self.skipped_count

    def summary(self) -> str:
        """One-line summary of the run."""
        return (
            f"Inserted {self.inserted_count} marker{'s' if self.inserted_count != 1 else ''}, "
            f"skipped {self.skipped_count}"
        )
