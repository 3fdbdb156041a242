# tests/test_sinks.py

from pathlib import Path

import pytest

from csvmarkers.config.models import AvidMarkerConfig
from csvmarkers.data.models import SkipReason
from csvmarkers.io.sinks import (
    AvidMarkerSink,
    MarkerCollector,
    format_marker_line,
    frames_per_day,
    generate_output_filename,
    normalize_fps,
    sanitize_text,
    seconds_to_timecode,
)
from csvmarkers.io.sources import TextLineSource
from csvmarkers.pipeline import ImportPipeline


@pytest.mark.parametrize("seconds,fps,start,expected", [
    (0, "24", "00:00:00:00", "00:00:00:00"),
    (10, "24", "00:00:00:00", "00:00:10:00"),
    (3723.5, "24", "00:00:00:00", "01:02:03:12"),
    (10, "24", "01:00:00:00", "01:00:10:00"),
    (1.04, "25", "10:00:00:00", "10:00:01:01"),
])
def test_seconds_to_timecode(seconds, fps, start, expected):
    assert seconds_to_timecode(seconds, fps, start) == expected


@pytest.mark.parametrize("raw,expected", [
    ("23.98", "23.976"),
    ("24", "24"),
    ("25p", "25"),
    (" 29.97 ", "29.97"),
])
def test_normalize_fps(raw, expected):
    assert normalize_fps(raw) == expected


def test_sanitize_text_flattens_tabs_and_newlines():
    assert sanitize_text("Goal\tby\n  number   9\r\n") == "Goal by number 9"
    assert sanitize_text("") == ""


def test_format_marker_line():
    settings = AvidMarkerConfig(username="Logger One", color="Blue", track="V2")
    line = format_marker_line("01:00:10:00", "Goal", settings)
    assert line == "loggerone\t01:00:10:00\tV2\tBlue\tGoal\t1\t\tBlue\n"


def test_generate_output_filename():
    assert generate_output_filename(Path("/tmp/game_events.csv")) == "game_events_markers.txt"


def test_collector_keeps_order():
    sink = MarkerCollector()
    assert sink.place_marker(2.0, "b")
    assert sink.place_marker(1.0, "a")
    assert [(m.seconds, m.label) for m in sink.markers] == [(2.0, "b"), (1.0, "a")]
    assert len(sink) == 2


def test_avid_sink_rejects_negative_offsets():
    sink = AvidMarkerSink()
    assert not sink.place_marker(-1.0, "Too early")
    assert len(sink) == 0


def test_negative_timestamp_is_skipped_by_pipeline():
    sink = AvidMarkerSink()
    result = ImportPipeline().run(TextLineSource("t,c\n-5,Early\n5,Kickoff\n"), sink)
    assert (result.inserted_count, result.skipped_count) == (1, 1)
    assert sink.timecodes == ["00:00:05:00"]


def test_avid_sink_writes_marker_list(tmp_path):
    settings = AvidMarkerConfig(fps="25", start_timecode="10:00:00:00", username="editor", color="Green")
    sink = AvidMarkerSink(settings)
    ImportPipeline().run(TextLineSource("t,c\n00:00:10,Goal\n20.5,\"Save\"\n"), sink)

    output = sink.write(tmp_path / "markers.txt")

    assert output.read_text(encoding="utf-8").splitlines() == [
        "editor\t10:00:10:00\tV1\tGreen\tGoal\t1\t\tGreen",
        "editor\t10:00:20:12\tV1\tGreen\tSave\t1\t\tGreen",
    ]


@pytest.mark.parametrize("fps,drop_frame,expected", [
    ("24", False, 2073600),
    ("25", False, 2160000),
    ("23.976", False, 2073600),
    ("29.97", True, 2589408),
    ("59.94", True, 5178816),
])
def test_frames_per_day(fps, drop_frame, expected):
    assert frames_per_day(fps, drop_frame) == expected


def test_last_frame_of_the_day_is_accepted():
    assert seconds_to_timecode(86399, "24") == "23:59:59:00"
    assert seconds_to_timecode(3599, "24", "23:00:00:00") == "23:59:59:00"


@pytest.mark.parametrize("seconds,start", [
    (86400, "00:00:00:00"),
    (90000, "00:00:00:00"),
    (1e15, "00:00:00:00"),
    (3600, "23:00:00:00"),
])
def test_offsets_past_midnight_are_refused(seconds, start):
    with pytest.raises(ValueError):
        seconds_to_timecode(seconds, "24", start)


def test_offset_too_large_for_a_frame_count_is_refused():
    with pytest.raises(ValueError):
        seconds_to_timecode(1e308, "24")


def test_avid_sink_rejects_offsets_it_cannot_place():
    sink = AvidMarkerSink()
    assert not sink.place_marker(1e308, "Huge")
    assert not sink.place_marker(90000, "Tomorrow")
    assert len(sink) == 0
    assert sink.timecodes == []


def test_out_of_range_timestamps_are_skipped_by_pipeline():
    sink = AvidMarkerSink()
    result = ImportPipeline().run(TextLineSource("t,c\n1e308,Huge\n90000,Tomorrow\n5,Kickoff\n"), sink)
    assert (result.inserted_count, result.skipped_count) == (1, 2)
    assert sink.timecodes == ["00:00:05:00"]
    assert [o.reason for o in result.outcomes if o.reason] == [SkipReason.SINK_REJECTED] * 2
