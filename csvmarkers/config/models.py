"""Configuration data models for marker import.

These dataclasses hold every tunable of an import run and support JSON
serialization so settings can be kept next to a project.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from csvmarkers.utils.constants import (
    DEFAULT_COLOR,
    DEFAULT_DELIMITER,
    DEFAULT_DURATION,
    DEFAULT_FPS,
    DEFAULT_START_TIMECODE,
    DEFAULT_TRACK,
    DEFAULT_USERNAME,
)
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CsvConfig:
    """Settings for reading the marker CSV.

    Attributes:
        delimiter: Field separator
        skip_empty_lines: Ignore blank and whitespace-only lines
    """

    delimiter: str = DEFAULT_DELIMITER
    skip_empty_lines: bool = True


@dataclass
class AvidMarkerConfig:
    """Settings for Avid marker list output.

    Attributes:
        fps: Timeline frame rate (e.g. "24", "23.976", "29.97")
        start_timecode: Timecode of the first frame of the sequence
        username: User column written for every marker
        track: Track the markers are placed on
        color: Marker color
        duration: Marker duration in frames

    Example:
        >>> avid = AvidMarkerConfig(fps="25", start_timecode="10:00:00:00")
    """

    fps: str = DEFAULT_FPS
    start_timecode: str = DEFAULT_START_TIMECODE
    username: str = DEFAULT_USERNAME
    track: str = DEFAULT_TRACK
    color: str = DEFAULT_COLOR
    duration: int = DEFAULT_DURATION

    def __post_init__(self) -> None:
        # JSON files may carry the frame rate as a number
        self.fps = str(self.fps)


@dataclass
class ImportConfig:
    """Top-level configuration for an import run.

    Attributes:
        csv: CSV reading settings
        avid: Avid marker output settings
        debug: Log every parsed row
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
    """

    csv: CsvConfig = field(default_factory=CsvConfig)
    avid: AvidMarkerConfig = field(default_factory=AvidMarkerConfig)
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, filepath: str | Path) -> None:
        """Save configuration to a JSON file.

        Args:
            filepath: Path to JSON file
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Saved configuration to {path}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImportConfig":
        """Create configuration from a dictionary.

        Args:
            data: Dictionary with configuration data

        Returns:
            ImportConfig instance
        """
        data = dict(data)

        if isinstance(data.get("csv"), dict):
            data["csv"] = CsvConfig(**data["csv"])

        if isinstance(data.get("avid"), dict):
            data["avid"] = AvidMarkerConfig(**data["avid"])

        return cls(**data)

    @classmethod
    def from_json(cls, filepath: str | Path) -> "ImportConfig":
        """Load configuration from a JSON file.

        Args:
            filepath: Path to JSON file

        Returns:
            ImportConfig instance
        """
        path = Path(filepath)

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)
