"""
Marker sinks - where parsed markers end up.

The import pipeline only knows the MarkerSink protocol. MarkerCollector
keeps markers in memory; AvidMarkerSink also renders them as an Avid
marker list that Media Composer imports through the Markers window.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from timecode import Timecode, TimecodeError

from csvmarkers.config.models import AvidMarkerConfig
from csvmarkers.utils.constants import FPS_MAP, OUTPUT_SUFFIX, SECONDS_PER_DAY
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class MarkerSink(Protocol):
    """Capability to place a named marker on a timeline."""

    def place_marker(self, at_seconds: float, label: str) -> bool:
        """Place a marker; return False if the host rejected it."""
        ...


@dataclass(frozen=True)
class PlacedMarker:
    """A marker accepted by a sink."""

    seconds: float
    label: str


class MarkerCollector:
    """Sink that records every accepted marker in order."""

    def __init__(self) -> None:
        self.markers: list[PlacedMarker] = []

    def place_marker(self, at_seconds: float, label: str) -> bool:
        self.markers.append(PlacedMarker(at_seconds, label))
        return True

    def __len__(self) -> int:
        return len(self.markers)


# ============================================================================
# Avid marker list output
# ============================================================================

def sanitize_text(text: str) -> str:
    """
    Sanitize text for the tab-delimited Avid marker format.

    Tabs and line breaks become spaces and runs of whitespace collapse.

    Args:
        text: Input text string

    Returns:
        Single-line text safe for a tab-delimited column
    """
    if not text:
        return ""
    text = str(text).replace("\t", " ").replace("\r", " ").replace("\n", " ")
    return " ".join(text.split())


def normalize_fps(fps: str) -> str:
    """
    Map a frame rate string to the form the timecode library expects.

    Examples:
        "23.98" -> "23.976"
        "25p" -> "25"
    """
    fps_str = str(fps).strip().removesuffix("p").removesuffix("P")
    return FPS_MAP.get(fps_str, fps_str)


def frames_per_day(fps: str, drop_frame: bool = False) -> int:
    """
    Number of frames on a 24 hour timecode clock.

    Drop-frame clocks skip two frame numbers per 30 fps at the start of
    every minute except each tenth, 1296 minutes a day.

    Examples:
        frames_per_day("24") -> 2073600
        frames_per_day("29.97", drop_frame=True) -> 2589408
    """
    int_fps = round(float(fps))
    day = int_fps * SECONDS_PER_DAY
    if drop_frame:
        day -= (int_fps // 15) * 1296
    return day


def seconds_to_timecode(seconds: float, fps: str, start_timecode: str = "00:00:00:00") -> str:
    """
    Convert an offset in seconds to a sequence timecode.

    The offset is rounded to the nearest frame and added to the start
    timecode using the timecode module's frame arithmetic.

    Args:
        seconds: Offset from the start of the sequence (>= 0)
        fps: Frame rate (e.g. "24", "23.976", "29.97")
        start_timecode: Timecode of the first frame as "HH:MM:SS:FF"

    Returns:
        Timecode string, "HH:MM:SS:FF" (";" before frames for drop-frame rates)

    Raises:
        ValueError: If the marker would land past 23:59:59 on the sequence clock

    Example:
        seconds_to_timecode(10, "24", "01:00:00:00") -> "01:00:10:00"
    """
    fps = normalize_fps(fps)
    frames = seconds * float(fps)
    if not math.isfinite(frames):
        raise ValueError(f"offset {seconds}s is out of range")
    frame_offset = round(frames)

    tc = Timecode(fps, start_timecode=start_timecode)

    # Timecode frames are 1-based; the clock wraps at midnight
    if tc.frames - 1 + frame_offset >= frames_per_day(fps, tc.drop_frame):
        raise ValueError(f"offset {seconds}s runs past 23:59:59 from {start_timecode}")

    tc += frame_offset

    return str(tc)


def format_marker_line(timecode: str, comment: str, settings: AvidMarkerConfig) -> str:
    """
    Format one marker as an Avid marker list line.

    Format: <user>\t<timecode>\t<track>\t<color>\t<comment>\t<duration>\t\t<color>
    """
    username = settings.username.lower().replace(" ", "")
    color = settings.color
    return (
        f"{username}\t{timecode}\t{settings.track}\t{color}\t"
        f"{sanitize_text(comment)}\t{settings.duration}\t\t{color}\n"
    )


def generate_output_filename(input_csv_path: Path) -> str:
    """
    Generate the marker list filename for an input CSV.

    Input:  game_events.csv
    Output: game_events_markers.txt
    """
    return f"{Path(input_csv_path).stem}{OUTPUT_SUFFIX}"


class AvidMarkerSink(MarkerCollector):
    """
    Sink that builds an Avid marker list.

    Markers before the start of the sequence, or past the end of its
    24 hour clock, are rejected. Call
    :meth:`write` once the import has finished.
    """

    def __init__(self, settings: AvidMarkerConfig | None = None) -> None:
        super().__init__()
        self.settings = settings or AvidMarkerConfig()
        self.timecodes: list[str] = []

    def place_marker(self, at_seconds: float, label: str) -> bool:
        if at_seconds < 0:
            logger.warning(f"Cannot place marker '{label}' at {at_seconds}s, before the sequence start")
            return False

        try:
            timecode = seconds_to_timecode(at_seconds, self.settings.fps, self.settings.start_timecode)
        except (ValueError, OverflowError, TimecodeError) as e:
            logger.warning(f"Cannot convert {at_seconds}s to timecode for marker '{label}': {e}")
            return False

        self.timecodes.append(timecode)
        logger.debug(f"Marker at {timecode}: {label}")
        return super().place_marker(at_seconds, label)

    def lines(self) -> list[str]:
        return [
            format_marker_line(timecode, marker.label, self.settings)
            for timecode, marker in zip(self.timecodes, self.markers)
        ]

    def write(self, output_path: Path | str) -> Path:
        """
        Write the collected markers to an Avid marker text file.

        Args:
            output_path: Path to the output .txt file

        Returns:
            Path that was written
        """
        output_path = Path(output_path)
        with open(output_path, "w", encoding="utf-8") as f:
            f.writelines(self.lines())

        logger.info(f"Wrote {len(self.markers)} markers to {output_path.name}")
        return output_path
