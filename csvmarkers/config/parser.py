"""Command-line argument parser for the marker importer.

Converts command-line arguments (optionally layered over a JSON settings
file) into an ImportConfig.
"""

import argparse
import json
from typing import Any

from csvmarkers.config.models import ImportConfig
from csvmarkers.utils.constants import AVID_MARKER_COLORS
from csvmarkers.utils.exceptions import ConfigurationError
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigParser:
    """Parser for command-line arguments.

    Options left unset on the command line keep the value from the
    ``--config`` file, or the dataclass default when no file is given.

    Example:
        >>> parser = ConfigParser()
        >>> config, extra = parser.parse_args(['events.csv', '--fps', '25'])
    """

    def __init__(self) -> None:
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Import timestamped events from a CSV file as timeline markers.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog(),
        )

        parser.add_argument("input_file", help="Path to the marker CSV file")
        parser.add_argument(
            "--output", "-o",
            default=None,
            help="Avid marker file to write (default: <input>_markers.txt next to the input)",
        )
        parser.add_argument(
            "--config",
            type=str,
            help="Load settings from JSON configuration file",
        )

        csv_group = parser.add_argument_group("CSV Settings")
        csv_group.add_argument(
            "--delimiter",
            default=None,
            help="Field delimiter (default: ,)",
        )
        csv_group.add_argument(
            "--keep-blank-lines",
            action="store_true",
            help="Treat blank lines as malformed rows instead of ignoring them",
        )

        avid_group = parser.add_argument_group("Marker Settings")
        avid_group.add_argument("--fps", default=None, help="Sequence frame rate (default: 24)")
        avid_group.add_argument(
            "--start-timecode",
            default=None,
            help="Timecode of the sequence start (default: 00:00:00:00)",
        )
        avid_group.add_argument("--user", "-u", default=None, help="Username for marker entries (default: user)")
        avid_group.add_argument("--track", default=None, help="Marker track (default: V1)")
        avid_group.add_argument(
            "--color",
            default=None,
            choices=AVID_MARKER_COLORS,
            help="Marker color (default: Red)",
        )

        output_group = parser.add_argument_group("Output")
        output_group.add_argument(
            "--report",
            default=None,
            metavar="REPORT_FILE",
            help="Write a per-row import report (.xlsx or .csv)",
        )
        output_group.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse and validate only, do not write a marker file",
        )

        mode_group = parser.add_argument_group("Logging")
        verbosity = mode_group.add_mutually_exclusive_group()
        verbosity.add_argument("--debug", action="store_true", help="Log every parsed row")
        verbosity.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging output")
        verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
        mode_group.add_argument("--log-file", default=None, help="Write log output to file")

        return parser

    def _get_epilog(self) -> str:
        return """
CSV Format:
  Row 1 is a header and is skipped.
  Column 1: timestamp, either seconds (12.5) or HH:MM:SS (00:01:02.5)
  Column 2: marker comment

Examples:
  Basic usage:
    python csv_to_markers.py events.csv

  25 fps sequence starting at 10:00:00:00:
    python csv_to_markers.py events.csv --fps 25 --start-timecode 10:00:00:00

  Check a file and write a report without creating markers:
    python csv_to_markers.py events.csv --dry-run --report report.xlsx
"""

    def parse_args(self, args: list[str] | None = None) -> tuple[ImportConfig, dict[str, Any]]:
        """Parse command-line arguments.

        Args:
            args: Arguments to parse (None = use sys.argv)

        Returns:
            Tuple of (config, extra_args) where extra_args holds input_file,
            output, report, dry_run and verbose

        Raises:
            ConfigurationError: If the --config file cannot be loaded
        """
        parsed = self.parser.parse_args(args)

        if parsed.config:
            config = self._load_config_file(parsed.config)
        else:
            config = ImportConfig()

        self._apply_args_to_config(config, parsed)

        extra_args = {
            "input_file": parsed.input_file,
            "output": parsed.output,
            "report": parsed.report,
            "dry_run": parsed.dry_run,
            "verbose": parsed.verbose,
        }

        return config, extra_args

    def _load_config_file(self, path: str) -> ImportConfig:
        logger.info(f"Loading configuration from {path}")
        try:
            return ImportConfig.from_json(path)
        except FileNotFoundError as e:
            raise ConfigurationError("Configuration file not found", config_key="config", invalid_value=path) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file is not valid JSON ({e.msg})", config_key="config") from e
        except TypeError as e:
            raise ConfigurationError(f"Unknown setting in configuration file ({e})", config_key="config") from e

    def _apply_args_to_config(self, config: ImportConfig, args: argparse.Namespace) -> None:
        if args.quiet:
            config.log_level = "WARNING"
        elif args.verbose or args.debug:
            config.log_level = "DEBUG"

        config.debug = config.debug or args.debug
        if args.log_file:
            config.log_file = args.log_file

        if args.delimiter is not None:
            # Allow "\t" to be typed literally on the command line
            config.csv.delimiter = "\t" if args.delimiter == "\\t" else args.delimiter
        if args.keep_blank_lines:
            config.csv.skip_empty_lines = False

        if args.fps is not None:
            config.avid.fps = args.fps
        if args.start_timecode is not None:
            config.avid.start_timecode = args.start_timecode
        if args.user is not None:
            config.avid.username = args.user
        if args.track is not None:
            config.avid.track = args.track
        if args.color is not None:
            config.avid.color = args.color
