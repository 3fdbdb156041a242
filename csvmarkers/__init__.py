"""
CSV to Timeline Markers

Imports timestamped events from a two-column CSV file as named markers on
an editing timeline, or as an Avid marker list.
"""

from .config.models import AvidMarkerConfig, CsvConfig, ImportConfig
from .data.models import ImportResult, MarkerRecord, RawRow
from .data.time_parser import parse_time_string
from .io.sinks import AvidMarkerSink, MarkerCollector, MarkerSink
from .pipeline import ImportPipeline
from .utils.exceptions import (
    CsvMarkersException,
    HeaderInvalid,
    InvalidTimeFormat,
    NoActiveSequence,
    NoValidMarkers,
    SourceNotFound,
)

__all__ = [
    # Configuration
    'AvidMarkerConfig',
    'CsvConfig',
    'ImportConfig',

    # Data
    'ImportResult',
    'MarkerRecord',
    'RawRow',
    'parse_time_string',

    # Sinks and pipeline
    'AvidMarkerSink',
    'MarkerCollector',
    'MarkerSink',
    'ImportPipeline',

    # Exceptions
    'CsvMarkersException',
    'HeaderInvalid',
    'InvalidTimeFormat',
    'NoActiveSequence',
    'NoValidMarkers',
    'SourceNotFound',
]

__version__ = '1.0.0'
