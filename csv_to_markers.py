#!/usr/bin/env python3
"""
CSV to Timeline Markers

Command-line tool to turn a CSV of timestamped events into an Avid marker
list.

CSV FORMAT:
    Row 1 is a header and is skipped.
    Column 1: timestamp in seconds (12.5) or HH:MM:SS (00:01:02.5)
    Column 2: marker comment

Usage:
    python csv_to_markers.py events.csv [options]

Examples:
    # Write events_markers.txt next to the CSV
    python csv_to_markers.py events.csv

    # 25 fps sequence starting at 10:00:00:00, blue markers
    python csv_to_markers.py events.csv --fps 25 --start-timecode 10:00:00:00 --color Blue

    # Validate only and write a report of skipped rows
    python csv_to_markers.py events.csv --dry-run --report report.xlsx
"""

import sys
from pathlib import Path

from csvmarkers.config.parser import ConfigParser
from csvmarkers.config.validator import ConfigValidator
from csvmarkers.io.report_writer import ReportWriter
from csvmarkers.io.sinks import AvidMarkerSink, MarkerCollector, generate_output_filename
from csvmarkers.pipeline import ImportPipeline
from csvmarkers.utils.exceptions import CsvMarkersException
from csvmarkers.utils.logger import get_logger, log_banner, setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error, 130 if interrupted)
    """
    parser = ConfigParser()

    try:
        config, extra_args = parser.parse_args(argv)
        ConfigValidator.validate(config)
    except CsvMarkersException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level, log_file=config.log_file, verbose=extra_args["verbose"])
    logger = get_logger(__name__)

    input_path = Path(extra_args["input_file"])
    if extra_args["output"]:
        output_path = Path(extra_args["output"])
    else:
        output_path = input_path.with_name(generate_output_filename(input_path))

    if extra_args["dry_run"]:
        destination = "Dry run: no marker file will be written"
    else:
        destination = f"Output file: {output_path}"
    log_banner(
        logger,
        "Starting CSV to marker import",
        f"Input file: {input_path}",
        destination,
        f"Frame rate: {config.avid.fps} fps, start {config.avid.start_timecode}",
    )

    sink = MarkerCollector() if extra_args["dry_run"] else AvidMarkerSink(config.avid)

    try:
        result = ImportPipeline(config).run(input_path, sink)

        if not extra_args["dry_run"]:
            sink.write(output_path)

        if extra_args["report"]:
            ReportWriter.write(result, extra_args["report"], source_name=input_path.name)

    except KeyboardInterrupt:
        logger.error("Import interrupted by user")
        return 130
    except CsvMarkersException as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error writing output: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1

    log_banner(logger, "Import complete")

    return 0


if __name__ == "__main__":
    sys.exit(main())
