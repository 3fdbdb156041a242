# tests/test_pipeline.py

import logging

import pytest

from csvmarkers.config.models import CsvConfig, ImportConfig
from csvmarkers.data.models import MarkerStatus, SkipReason
from csvmarkers.io.sinks import MarkerCollector, PlacedMarker
from csvmarkers.io.sources import TextLineSource
from csvmarkers.pipeline import ImportPipeline
from csvmarkers.utils.exceptions import HeaderInvalid, NoActiveSequence, NoValidMarkers, SourceNotFound


def placed(sink):
    return [(marker.seconds, marker.label) for marker in sink.markers]


def test_sample_file_end_to_end(events_csv):
    sink = MarkerCollector()
    result = ImportPipeline().run(events_csv, sink)

    assert result.inserted_count == 2
    assert result.skipped_count == 0
    assert placed(sink) == [(10.0, "Goal"), (20.0, "Save")]
    # The empty-timestamp row never reached the sink
    assert [issue.line_number for issue in result.dropped_rows] == [3]


def test_unparseable_timestamp_is_skipped_and_loop_continues():
    source = TextLineSource("time,comment\n5,Kickoff\nabc,Comment\n00:01:00,Goal\n")
    sink = MarkerCollector()
    result = ImportPipeline().run(source, sink)

    assert result.inserted_count == 2
    assert result.skipped_count == 1
    assert placed(sink) == [(5.0, "Kickoff"), (60.0, "Goal")]

    skipped = [o for o in result.outcomes if o.status is MarkerStatus.SKIPPED]
    assert len(skipped) == 1
    assert skipped[0].reason is SkipReason.INVALID_TIME
    assert skipped[0].line_number == 3


def test_sink_rejection_is_a_skip(rejecting_sink):
    sink = rejecting_sink(reject={"Offside"})
    source = TextLineSource("t,c\n1,Pass\n2,Offside\n3,Shot\n")
    result = ImportPipeline().run(source, sink)

    assert result.inserted_count == 2
    assert result.skipped_count == 1
    assert sink.calls == [(1.0, "Pass"), (2.0, "Offside"), (3.0, "Shot")]
    assert result.outcomes[1].reason is SkipReason.SINK_REJECTED
    assert result.outcomes[1].seconds == 2.0


def test_counts_cover_every_record_offered():
    source = TextLineSource("t,c\n1,a\nbad,b\n,c\n2\n00:00:03,d\n1:2,e\n")
    result = ImportPipeline().run(source, MarkerCollector())

    assert result.inserted_count + result.skipped_count == len(result.outcomes) == 4
    assert result.total == 4
    assert sorted(issue.line_number for issue in result.dropped_rows) == [4, 5]


def test_quoted_row():
    sink = MarkerCollector()
    ImportPipeline().run(TextLineSource('"time","comment"\n"5","Nice shot"\n'), sink)
    assert sink.markers == [PlacedMarker(5.0, "Nice shot")]


def test_header_only_is_fatal(write_csv):
    with pytest.raises(NoValidMarkers):
        ImportPipeline().run(write_csv("timestamp,comment\n"), MarkerCollector())


def test_invalid_header_is_fatal():
    sink = MarkerCollector()
    with pytest.raises(HeaderInvalid):
        ImportPipeline().run(TextLineSource("timestamp\n10,Goal\n"), sink)
    assert len(sink) == 0


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(SourceNotFound):
        ImportPipeline().run(tmp_path / "nope.csv", MarkerCollector())


def test_missing_sink_is_fatal(events_csv):
    with pytest.raises(NoActiveSequence):
        ImportPipeline().run(events_csv, None)


def test_reader_errors_win_over_missing_sink():
    with pytest.raises(NoValidMarkers):
        ImportPipeline().run(TextLineSource("t,c\n"), None)


def test_runs_are_independent(events_csv):
    pipeline = ImportPipeline()
    first_sink, second_sink = MarkerCollector(), MarkerCollector()

    first = pipeline.run(events_csv, first_sink)
    second = pipeline.run(events_csv, second_sink)

    assert (first.inserted_count, first.skipped_count) == (second.inserted_count, second.skipped_count)
    assert placed(first_sink) == placed(second_sink)
    assert first.outcomes == second.outcomes


def test_config_delimiter_is_used():
    config = ImportConfig(csv=CsvConfig(delimiter="\t"))
    sink = MarkerCollector()
    ImportPipeline(config).run(TextLineSource("t\tc\n00:00:01.5\tGoal, home\n"), sink)
    assert placed(sink) == [(1.5, "Goal, home")]


def test_warnings_carry_line_numbers(caplog):
    source = TextLineSource("t,c\n1,a\nxyz,b\n")
    with caplog.at_level(logging.WARNING, logger="csvmarkers"):
        ImportPipeline().run(source, MarkerCollector())
    assert any("Line 3" in message and "xyz" in message for message in caplog.messages)


def test_summary_line(events_csv):
    result = ImportPipeline().run(events_csv, MarkerCollector())
    assert result.summary() == "Inserted 2 markers, skipped 0"


def test_debug_logs_rows(caplog):
    config = ImportConfig(debug=True)
    with caplog.at_level(logging.DEBUG, logger="csvmarkers"):
        ImportPipeline(config).run(TextLineSource("t,c\n10,Goal\n"), MarkerCollector())
    assert any("Line 2: 10, Goal" in message for message in caplog.messages)
