"""Line sources for the CSV reader.

A line source knows whether it exists and hands out a closeable text
handle. The reader owns that handle for the duration of one read.
"""

import io
from pathlib import Path
from typing import Protocol, TextIO

from csvmarkers.utils.exceptions import SourceNotFound
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class LineSource(Protocol):
    """Anything the CSV reader can pull text lines from."""

    name: str

    def exists(self) -> bool:
        ...

    def open(self) -> TextIO:
        ...


class FileLineSource:
    """
    Reads a marker CSV from a local path.

    Text is decoded as UTF-8; a leading byte order mark (as written by
    Excel) is dropped.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.name = str(self.path)

    def exists(self) -> bool:
        return self.path.is_file()

    def open(self) -> TextIO:
        """
        Open the file for reading.

        Raises:
            SourceNotFound: If the file is missing or cannot be opened
        """
        if not self.exists():
            raise SourceNotFound("File does not exist", self.path)

        logger.debug(f"Opening {self.path} ({self.encoding})")
        try:
            return open(self.path, "r", encoding=self.encoding, newline=None)
        except OSError as e:
            raise SourceNotFound(f"Cannot open file ({e.strerror or e})", self.path) from e

    def __repr__(self) -> str:
        return f"FileLineSource({self.name!r})"


class TextLineSource:
    """In-memory CSV text, used by tests and previews."""

    def __init__(self, text: str, name: str = "<text>") -> None:
        self.text = text
        self.name = name

    def exists(self) -> bool:
        return True

    def open(self) -> TextIO:
        return io.StringIO(self.text, newline=None)

    def __repr__(self) -> str:
        return f"TextLineSource({self.name!r})"


def as_line_source(source: "str | Path | LineSource") -> LineSource:
    """Wrap a path in a FileLineSource; pass line sources through."""
    if isinstance(source, (str, Path)):
        return FileLineSource(source)
    return source
