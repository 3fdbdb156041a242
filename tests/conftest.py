# tests/conftest.py

import sys
from pathlib import Path

import pytest

# -------------------------------------------------------------------
# Make project root importable
# -------------------------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RejectingSink:
    """Sink that rejects markers whose label is listed in ``reject``."""

    def __init__(self, reject=()):
        self.reject = set(reject)
        self.calls = []

    def place_marker(self, at_seconds, label):
        self.calls.append((at_seconds, label))
        return label not in self.reject


@pytest.fixture
def write_csv(tmp_path):
    """
    Write CSV text to a file under tmp_path and return its path.
    """
    def _write(text, name="events.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write


@pytest.fixture
def events_csv(write_csv):
    """The header/Goal/empty/Save sample."""
    return write_csv("t,c\n10,Goal\n,Empty\n20,Save\n")


@pytest.fixture
def rejecting_sink():
    return RejectingSink
