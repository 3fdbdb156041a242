"""Logging for marker imports.

Every csvmarkers module logs under the ``csvmarkers`` namespace through
:func:`get_logger`. Entry points call :func:`setup_logging` once; the GUI
additionally mirrors records into its window with :func:`capture_logs`.
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Final, Iterator

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"

LOGGER_PREFIX: Final[str] = "csvmarkers"
BANNER_WIDTH: Final[int] = 60


def _package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_PREFIX)


def _console_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if verbose:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path | str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | str | None = None,
    console: bool = True,
    verbose: bool = False,
) -> None:
    """Configure console and file output for an import run.

    Handlers from an earlier call are closed and replaced, so the CLI can
    be invoked repeatedly in one process (as the tests do).

    Args:
        level: Level name or number; "DEBUG" also dumps every parsed row
        log_file: Optional log file, parent directories are created
        console: Whether to log to stdout
        verbose: Use the timestamped format on the console too

    Example:
        >>> setup_logging(level="DEBUG", log_file="marker_import.log")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    package_logger = _package_logger()
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers = []
    if console:
        handlers.append(_console_handler(verbose))
    if log_file:
        handlers.append(_file_handler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``csvmarkers`` namespace.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Line 4: skipped row with empty comment")
    """
    if name == LOGGER_PREFIX or name.startswith(f"{LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def log_banner(logger: logging.Logger, *lines: str) -> None:
    """Log ``lines`` between two rules of '=' characters."""
    logger.info("=" * BANNER_WIDTH)
    for line in lines:
        logger.info(line)
    logger.info("=" * BANNER_WIDTH)


@contextmanager
def capture_logs(handler: logging.Handler) -> Iterator[logging.Handler]:
    """Attach ``handler`` to the package logger for the duration of a block."""
    package_logger = _package_logger()
    package_logger.addHandler(handler)
    try:
        yield handler
    finally:
        package_logger.removeHandler(handler)
