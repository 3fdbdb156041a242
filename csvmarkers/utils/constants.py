"""Constants for marker CSV import and Avid marker output."""

from typing import Final

# CSV input
DEFAULT_DELIMITER: Final[str] = ","
QUOTE_CHARS: Final[tuple[str, ...]] = ('"', "'")
MIN_FIELDS: Final[int] = 2
TIMESTAMP_COLUMN: Final[int] = 0
COMMENT_COLUMN: Final[int] = 1

# Header occupies line 1, so data row N sits on line N + 2 (0-indexed rows)
HEADER_LINE_OFFSET: Final[int] = 2

# Time conversion
SECONDS_PER_HOUR: Final[int] = 3600
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_DAY: Final[int] = 86400
TIME_PARTS: Final[int] = 3

# Avid marker output
DEFAULT_FPS: Final[str] = "24"
DEFAULT_START_TIMECODE: Final[str] = "00:00:00:00"
DEFAULT_USERNAME: Final[str] = "user"
DEFAULT_TRACK: Final[str] = "V1"
DEFAULT_COLOR: Final[str] = "Red"
DEFAULT_DURATION: Final[int] = 1

AVID_MARKER_COLORS: Final[tuple[str, ...]] = (
    "Red",
    "Green",
    "Blue",
    "Cyan",
    "Magenta",
    "Yellow",
    "Black",
    "White",
)

# Common frame rate aliases mapped to the values the timecode library expects
FPS_MAP: Final[dict[str, str]] = {
    "23.98": "23.976",
    "29.97": "29.97",
    "59.94": "59.94",
}

OUTPUT_SUFFIX: Final[str] = "_markers.txt"

# Import report
REPORT_COLUMNS: Final[tuple[str, ...]] = ("line", "timestamp", "seconds", "comment", "status", "reason")
