"""Line sources, marker sinks and report output."""

from .report_writer import ReportWriter
from .sinks import AvidMarkerSink, MarkerCollector, MarkerSink, PlacedMarker
from .sources import FileLineSource, LineSource, TextLineSource

__all__ = [
    'AvidMarkerSink',
    'FileLineSource',
    'LineSource',
    'MarkerCollector',
    'MarkerSink',
    'PlacedMarker',
    'ReportWriter',
    'TextLineSource',
]
