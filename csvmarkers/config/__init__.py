"""Configuration models, command-line parsing and validation."""

from .models import AvidMarkerConfig, CsvConfig, ImportConfig
from .parser import ConfigParser
from .validator import ConfigValidator

__all__ = ['AvidMarkerConfig', 'CsvConfig', 'ImportConfig', 'ConfigParser', 'ConfigValidator']
