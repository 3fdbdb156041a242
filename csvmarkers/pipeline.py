"""
Marker import pipeline.

Reads a marker CSV, validates its rows, parses every timestamp and hands
the markers to a sink in file order. Fatal conditions raise; per-row
problems are counted as skips and the loop carries on.
"""

from pathlib import Path

from csvmarkers.config.models import ImportConfig
from csvmarkers.data.csv_reader import CsvReader
from csvmarkers.data.models import ImportResult, SkipReason
from csvmarkers.data.row_parser import MarkerRowParser
from csvmarkers.data.time_parser import try_parse_time_string
from csvmarkers.io.sinks import MarkerSink
from csvmarkers.io.sources import LineSource, as_line_source
from csvmarkers.utils.exceptions import NoActiveSequence
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ImportPipeline:
    """Runs one CSV-to-markers import per call to :meth:`run`.

    Runs share no state; a new reader and row parser are created for each.

    Example:
        >>> sink = MarkerCollector()
        >>> result = ImportPipeline().run("events.csv", sink)
        >>> result.inserted_count, result.skipped_count
        (2, 0)
    """

    def __init__(self, config: ImportConfig | None = None) -> None:
        self.config = config or ImportConfig()

    def run(self, file_path: "str | Path | LineSource", marker_sink: MarkerSink | None) -> ImportResult:
        """
        Import markers from a CSV file into a sink.

        Args:
            file_path: Path to the CSV, or any line source
            marker_sink: Sink for the active sequence; None when the host
                has no sequence open

        Returns:
            ImportResult with inserted/skipped counts and per-row outcomes

        Raises:
            SourceNotFound: If the file cannot be opened
            SourceReadError: If the file cannot be decoded
            HeaderInvalid: If the header has fewer than two fields
            NoValidMarkers: If no row has both a timestamp and a comment
            NoActiveSequence: If marker_sink is None
        """
        source = as_line_source(file_path)
        reader = CsvReader(self.config.csv)
        row_parser = MarkerRowParser()

        rows = reader.read(source)
        if self.config.debug:
            for row in rows:
                logger.debug(f"Line {row.line_number}: {', '.join(row.fields)}")

        records = row_parser.to_marker_records(rows)

        if marker_sink is None:
            raise NoActiveSequence()

        result = ImportResult(dropped_rows=reader.dropped + row_parser.dropped)
        result.dropped_rows.sort(key=lambda issue: issue.line_number)

        for record in records:
            parsed = try_parse_time_string(record.timestamp_text)

            if not parsed.ok:
                logger.warning(
                    f"Line {record.line_number}: invalid time format '{record.timestamp_text}', "
                    f"expected seconds or HH:MM:SS"
                )
                result.record_skipped(record, parsed.error)
                continue

            if marker_sink.place_marker(parsed.seconds, record.comment_text):
                result.record_inserted(record, parsed.seconds)
            else:
                logger.warning(
                    f"Line {record.line_number}: marker '{record.comment_text}' at {parsed.seconds}s was rejected"
                )
                result.record_skipped(record, SkipReason.SINK_REJECTED, parsed.seconds)

        logger.info(result.summary())
        return result
