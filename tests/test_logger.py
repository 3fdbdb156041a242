# tests/test_logger.py

import logging

import pytest

from csvmarkers.utils.logger import LOGGER_PREFIX, capture_logs, get_logger, log_banner, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    package_logger = logging.getLogger(LOGGER_PREFIX)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_get_logger_namespaces_module_names():
    assert get_logger("csv_to_markers").name == "csvmarkers.csv_to_markers"
    assert get_logger("csvmarkers.pipeline").name == "csvmarkers.pipeline"
    assert get_logger("csvmarkersextra").name == "csvmarkers.csvmarkersextra"


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(level="DEBUG", log_file=tmp_path / "logs" / "first.log")
    setup_logging(level="WARNING")

    package_logger = logging.getLogger(LOGGER_PREFIX)
    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1
    assert (tmp_path / "logs" / "first.log").exists()


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "import.log"
    setup_logging(level="INFO", log_file=log_file, console=False)

    get_logger("test").warning("Line 3: invalid time format 'soon'")

    assert "Line 3: invalid time format 'soon'" in log_file.read_text(encoding="utf-8")


def test_capture_logs_is_scoped():
    setup_logging(level="INFO", console=False)
    handler = ListHandler()

    with capture_logs(handler):
        log_banner(get_logger("test"), "Import complete")
    get_logger("test").info("after")

    assert handler.messages == ["=" * 60, "Import complete", "=" * 60]
    assert handler not in logging.getLogger(LOGGER_PREFIX).handlers
