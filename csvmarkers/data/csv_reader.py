"""CSV reader for marker files.

Reads line-oriented text, skips blank lines, validates and discards the
header, and returns the remaining lines as cleaned rows. Commas are never
escaped; quotes are only stripped from field boundaries.
"""

from csvmarkers.config.models import CsvConfig
from csvmarkers.data.models import RawRow, RowIssue, SkipReason
from csvmarkers.io.sources import LineSource
from csvmarkers.utils.constants import MIN_FIELDS, QUOTE_CHARS
from csvmarkers.utils.exceptions import HeaderInvalid, SourceReadError
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


def clean_field(field: str) -> str:
    """
    Trim a field and strip one matching pair of surrounding quotes.

    Examples:
        ' "Nice shot" ' -> 'Nice shot'
        "'5'" -> '5'
        '"unbalanced' -> '"unbalanced'
    """
    field = field.strip()
    if len(field) >= 2 and field[0] in QUOTE_CHARS and field[-1] == field[0]:
        field = field[1:-1]
    return field


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """Split a line on the delimiter and clean every field."""
    return [clean_field(field) for field in line.split(delimiter)]


class CsvReader:
    """Reader for two-column marker CSV files.

    Rows with fewer than two fields are dropped and remembered in
    ``dropped`` (reset on every read).

    Example:
        >>> reader = CsvReader()
        >>> rows = reader.read(TextLineSource("t,c\\n10,Goal\\n"))
        >>> rows[0].fields
        ('10', 'Goal')
    """

    def __init__(self, config: CsvConfig | None = None) -> None:
        self.config = config or CsvConfig()
        self.dropped: list[RowIssue] = []

    def read(self, source: LineSource) -> list[RawRow]:
        """
        Read all data rows from a line source.

        The source handle is closed before this method returns or raises.

        Args:
            source: Line source to read

        Returns:
            Data rows in file order (header excluded)

        Raises:
            SourceNotFound: If the source cannot be opened
            SourceReadError: If the text cannot be decoded
            HeaderInvalid: If the header line has fewer than two fields
        """
        self.dropped = []
        rows: list[RawRow] = []
        header_seen = False

        logger.debug(f"Reading CSV from {source.name}")

        with source.open() as handle:
            try:
                for line_number, line in enumerate(handle, start=1):
                    line = line.rstrip("\r\n")

                    if self.config.skip_empty_lines and not line.strip():
                        continue

                    fields = split_line(line, self.config.delimiter)

                    if not header_seen:
                        header_seen = True
                        if len(fields) < MIN_FIELDS:
                            raise HeaderInvalid("Invalid CSV header", line_number, len(fields))
                        logger.debug(f"Header at line {line_number}: {fields}")
                        continue

                    if len(fields) < MIN_FIELDS:
                        self._drop(line_number, f"expected at least {MIN_FIELDS} fields, found {len(fields)}: {line!r}")
                        continue

                    rows.append(RawRow(tuple(fields), line_number))
            except UnicodeDecodeError as e:
                raise SourceReadError(f"Cannot decode text ({e.reason})", source.name) from e

        logger.info(f"Read {len(rows)} data row{'s' if len(rows) != 1 else ''} from {source.name}")
        if self.dropped:
            logger.info(f"Dropped {len(self.dropped)} malformed row{'s' if len(self.dropped) != 1 else ''}")

        return rows

    def _drop(self, line_number: int, detail: str) -> None:
        logger.warning(f"Line {line_number}: skipping invalid row, {detail}")
        self.dropped.append(RowIssue(line_number, SkipReason.TOO_FEW_FIELDS, detail))
