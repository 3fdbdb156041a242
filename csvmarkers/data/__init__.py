"""CSV reading, row validation and timestamp parsing."""

from .csv_reader import CsvReader
from .models import (
    ImportResult,
    MarkerOutcome,
    MarkerRecord,
    MarkerStatus,
    RawRow,
    RowIssue,
    SkipReason,
    TimeParseResult,
)
from .row_parser import MarkerRowParser
from .time_parser import parse_time_string, try_parse_time_string

__all__ = [
    'CsvReader',
    'ImportResult',
    'MarkerOutcome',
    'MarkerRecord',
    'MarkerRowParser',
    'MarkerStatus',
    'RawRow',
    'RowIssue',
    'SkipReason',
    'TimeParseResult',
    'parse_time_string',
    'try_parse_time_string',
]
