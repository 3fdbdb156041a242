"""Timestamp parsing.

Accepts plain seconds ("12", "-3.5", ".25", "1e2") and HH:MM:SS with
integer hours/minutes and decimal seconds ("01:02:03.5").
"""

import math
import re

from csvmarkers.data.models import SkipReason, TimeParseResult
from csvmarkers.utils.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, TIME_PARTS
from csvmarkers.utils.exceptions import InvalidTimeFormat

# Signed decimal with optional fraction, leading-dot form and exponent
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def _parse_decimal(text: str) -> float | None:
    if not _DECIMAL_RE.match(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def _parse_hms(text: str) -> float | None:
    parts = text.split(":")
    if len(parts) != TIME_PARTS:
        return None

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = float(parts[2])
    except ValueError:
        return None

    if not math.isfinite(seconds):
        return None

    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds


def try_parse_time_string(text: str) -> TimeParseResult:
    """
    Parse a timestamp without raising.

    Plain decimal seconds take priority over the colon form.

    Args:
        text: Timestamp text as read from the CSV

    Returns:
        TimeParseResult with ``seconds`` set, or ``error`` set to
        SkipReason.INVALID_TIME
    """
    cleaned = text.strip()

    seconds = _parse_decimal(cleaned)
    if seconds is None:
        seconds = _parse_hms(cleaned)

    if seconds is None:
        return TimeParseResult(text=text, error=SkipReason.INVALID_TIME)
    return TimeParseResult(text=text, seconds=seconds)


def parse_time_string(text: str) -> float:
    """
    Convert a timestamp to an offset in seconds.

    Args:
        text: "SS[.sss]" or "HH:MM:SS[.sss]"

    Returns:
        Offset in seconds

    Raises:
        InvalidTimeFormat: If text matches neither form

    Examples:
        "10" -> 10.0
        "01:02:03.5" -> 3723.5
        "1:2" -> InvalidTimeFormat
    """
    result = try_parse_time_string(text)
    if not result.ok:
        raise InvalidTimeFormat(text)
    return result.seconds
