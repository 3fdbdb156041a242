"""Utility modules for csvmarkers."""

from .exceptions import (
    ConfigurationError,
    CsvMarkersException,
    HeaderInvalid,
    InvalidTimeFormat,
    NoActiveSequence,
    NoValidMarkers,
    SourceNotFound,
    SourceReadError,
)
from .logger import capture_logs, get_logger, log_banner, setup_logging

__all__ = [
    'ConfigurationError',
    'CsvMarkersException',
    'HeaderInvalid',
    'InvalidTimeFormat',
    'NoActiveSequence',
    'NoValidMarkers',
    'SourceNotFound',
    'SourceReadError',
    'capture_logs',
    'get_logger',
    'log_banner',
    'setup_logging',
]
