"""Custom exception classes for the csvmarkers package.

Fatal import conditions are raised as exceptions and end the run with a
single terminal message. Per-row problems are never raised out of the
import loop; they are reported through explicit outcomes instead.
"""

from pathlib import Path


class CsvMarkersException(Exception):
    """Base exception for all csvmarkers errors.

    Catch this to handle every fatal import condition in one place.
    """

    pass


class SourceReadError(CsvMarkersException):
    """Raised when the marker CSV cannot be opened or decoded.

    Attributes:
        source: Name or path of the source that failed
    """

    def __init__(self, message: str, source: str | Path | None = None) -> None:
        """Initialize with source details.

        Args:
            message: Description of the error
            source: Path or display name of the source
        """
        self.source = str(source) if source is not None else None

        error_parts = [message]
        if self.source:
            error_parts.append(f"'{self.source}'")

        super().__init__(": ".join(error_parts))


class SourceNotFound(SourceReadError):
    """Raised when the marker CSV does not exist or cannot be opened."""

    pass


class HeaderInvalid(CsvMarkersException):
    """Raised when the header line has fewer than two fields.

    Attributes:
        line_number: 1-based line number of the header
        field_count: Number of fields found on the header line
    """

    def __init__(self, message: str, line_number: int | None = None, field_count: int | None = None) -> None:
        self.line_number = line_number
        self.field_count = field_count

        error_parts = [message]
        if line_number is not None:
            error_parts.append(f"at line {line_number}")
        if field_count is not None:
            error_parts.append(f"(found {field_count} field{'s' if field_count != 1 else ''}, expected at least 2)")

        super().__init__(" ".join(error_parts))


class NoValidMarkers(CsvMarkersException):
    """Raised when no row survives validation.

    Attributes:
        rows_checked: Number of data rows that were examined
    """

    def __init__(self, message: str = "No valid markers found in CSV", rows_checked: int = 0) -> None:
        self.rows_checked = rows_checked
        super().__init__(f"{message} ({rows_checked} data row{'s' if rows_checked != 1 else ''} checked)")


class NoActiveSequence(CsvMarkersException):
    """Raised when there is no timeline to place markers on."""

    def __init__(self, message: str = "No active sequence found") -> None:
        super().__init__(message)


class InvalidTimeFormat(CsvMarkersException):
    """Raised when a timestamp is neither plain seconds nor HH:MM:SS.

    Attributes:
        text: The original timestamp text
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid time format: '{text}'. Expected seconds or HH:MM:SS format.")


class ConfigurationError(CsvMarkersException):
    """Raised when configuration is invalid.

    Attributes:
        config_key: Configuration key that has an issue
        invalid_value: The invalid value (if applicable)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        invalid_value: object = None,
    ) -> None:
        """Initialize with configuration error details.

        Args:
            message: Description of the error
            config_key: Configuration key with issue
            invalid_value: The value that was invalid
        """
        self.config_key = config_key
        self.invalid_value = invalid_value

        error_parts = [message]
        if config_key:
            error_parts.append(f"for setting '{config_key}'")
        if invalid_value is not None:
            error_parts.append(f"(value: {invalid_value!r})")

        super().__init__(" ".join(error_parts))
