"""Configuration validation utilities.

Checks that an ImportConfig is usable before any file is read, so a bad
frame rate or timecode fails the run up front instead of per marker.
"""

import math
import re

from csvmarkers.config.models import AvidMarkerConfig, CsvConfig, ImportConfig
from csvmarkers.utils.constants import AVID_MARKER_COLORS
from csvmarkers.utils.exceptions import ConfigurationError
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)

# HH:MM:SS:FF, or HH:MM:SS;FF for drop-frame
TIMECODE_RE = re.compile(r"^\d{2}:\d{2}:\d{2}[:;]\d{2}$")

# V1..V99, A1..A99 or the timecode track
TRACK_RE = re.compile(r"^(?:[VA][1-9]\d?|TC)$")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidator:
    """Validator for configuration objects.

    Example:
        >>> ConfigValidator.validate(ImportConfig())
        >>> # Raises ConfigurationError if invalid
    """

    @classmethod
    def validate(cls, config: ImportConfig) -> None:
        """Validate entire configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        cls.validate_csv_config(config.csv)
        cls.validate_avid_config(config.avid)

        if config.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level (expected one of: {', '.join(LOG_LEVELS)})",
                config_key="log_level",
                invalid_value=config.log_level,
            )

    @classmethod
    def validate_csv_config(cls, csv_config: CsvConfig) -> None:
        if len(csv_config.delimiter) != 1:
            raise ConfigurationError(
                "Delimiter must be a single character",
                config_key="delimiter",
                invalid_value=csv_config.delimiter,
            )

        if csv_config.delimiter in ('"', "'") or (csv_config.delimiter.isspace() and csv_config.delimiter != "\t"):
            raise ConfigurationError(
                "Delimiter cannot be a quote or whitespace character other than tab",
                config_key="delimiter",
                invalid_value=csv_config.delimiter,
            )

    @classmethod
    def validate_avid_config(cls, avid: AvidMarkerConfig) -> None:
        """Validate Avid marker output settings.

        Raises:
            ConfigurationError: If a setting is out of range
        """
        try:
            fps = float(avid.fps)
        except ValueError:
            fps = 0.0

        if not math.isfinite(fps) or fps <= 0:
            raise ConfigurationError(
                "Frame rate must be a positive number",
                config_key="fps",
                invalid_value=avid.fps,
            )

        if not TIMECODE_RE.match(avid.start_timecode):
            raise ConfigurationError(
                "Start timecode must be HH:MM:SS:FF",
                config_key="start_timecode",
                invalid_value=avid.start_timecode,
            )

        if avid.color not in AVID_MARKER_COLORS:
            raise ConfigurationError(
                f"Unknown marker color (expected one of: {', '.join(AVID_MARKER_COLORS)})",
                config_key="color",
                invalid_value=avid.color,
            )

        if not TRACK_RE.match(avid.track):
            raise ConfigurationError(
                "Track must be V1-V99, A1-A99 or TC",
                config_key="track",
                invalid_value=avid.track,
            )

        if isinstance(avid.duration, bool) or not isinstance(avid.duration, int) or avid.duration < 1:
            raise ConfigurationError(
                "Marker duration must be at least 1 frame",
                config_key="duration",
                invalid_value=avid.duration,
            )

        if not avid.username or any(ch.isspace() for ch in avid.username):
            raise ConfigurationError(
                "Username must be a single word",
                config_key="username",
                invalid_value=avid.username,
            )

        logger.debug(f"Avid settings validated: {avid.fps} fps from {avid.start_timecode}")

