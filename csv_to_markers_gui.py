"""
CSV to Timeline Markers - desktop front end.

Pick a marker CSV, set the sequence frame rate and start timecode, and
write an Avid marker list. The import runs on a worker thread and its log
is mirrored in the window.
"""

import logging
import sys
from pathlib import Path

from PyQt5.QtCore import QThread, Qt, pyqtSignal
from PyQt5.QtGui import QFont, QTextCursor
from PyQt5.QtWidgets import (QApplication, QComboBox, QFileDialog, QFormLayout,
                             QGroupBox, QHBoxLayout, QLabel, QLineEdit,
                             QMainWindow, QMessageBox, QProgressBar, QPushButton,
                             QTextEdit, QVBoxLayout, QWidget)

from csvmarkers.config.models import AvidMarkerConfig, ImportConfig
from csvmarkers.config.validator import ConfigValidator
from csvmarkers.io.sinks import AvidMarkerSink, generate_output_filename
from csvmarkers.pipeline import ImportPipeline
from csvmarkers.utils.constants import AVID_MARKER_COLORS
from csvmarkers.utils.exceptions import CsvMarkersException
from csvmarkers.utils.logger import CONSOLE_FORMAT, capture_logs, get_logger, setup_logging

logger = get_logger(__name__)


class SignalLogHandler(logging.Handler):
    """Forwards csvmarkers log records to a Qt signal."""

    def __init__(self, signal):
        super().__init__()
        self.signal = signal
        self.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    def emit(self, record):
        self.signal.emit(self.format(record))


class ImportWorker(QThread):
    """Worker thread for the import to keep the GUI responsive"""
    progress = pyqtSignal(str)
    finished = pyqtSignal(bool, str)

    def __init__(self, input_path, output_path, config):
        super().__init__()
        self.input_path = input_path
        self.output_path = output_path
        self.config = config

    def run(self):
        with capture_logs(SignalLogHandler(self.progress)):
            self._run_import()

    def _run_import(self):
        try:
            sink = AvidMarkerSink(self.config.avid)
            result = ImportPipeline(self.config).run(self.input_path, sink)
            sink.write(self.output_path)
            self.finished.emit(True, result.summary())

        except CsvMarkersException as e:
            self.finished.emit(False, str(e))
        except OSError as e:
            logger.error(f"Error writing output: {e}", exc_info=True)
            self.finished.emit(False, f"Error writing output: {e}")
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            self.finished.emit(False, f"Unexpected error: {e}")


class MarkerImportGUI(QMainWindow):
    def __init__(self):
        super().__init__()
        self.input_path = ""
        self.output_path = ""
        self.worker = None
        self.initUI()

    def initUI(self):
        self.setWindowTitle('CSV to Timeline Markers')
        self.setGeometry(100, 100, 800, 600)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        title = QLabel('CSV to Timeline Markers')
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        # File selection group
        file_group = QGroupBox("File Selection")
        file_layout = QVBoxLayout()

        input_layout = QHBoxLayout()
        input_label = QLabel("Input CSV:")
        input_label.setMinimumWidth(100)
        self.input_line = QLineEdit()
        self.input_line.setReadOnly(True)
        self.input_line.setPlaceholderText("No file selected...")
        input_btn = QPushButton("Browse...")
        input_btn.clicked.connect(self.select_input_file)
        input_layout.addWidget(input_label)
        input_layout.addWidget(self.input_line)
        input_layout.addWidget(input_btn)
        file_layout.addLayout(input_layout)

        output_layout = QHBoxLayout()
        output_label = QLabel("Output TXT:")
        output_label.setMinimumWidth(100)
        self.output_line = QLineEdit()
        self.output_line.setReadOnly(True)
        self.output_line.setPlaceholderText("No file selected...")
        output_btn = QPushButton("Browse...")
        output_btn.clicked.connect(self.select_output_file)
        output_layout.addWidget(output_label)
        output_layout.addWidget(self.output_line)
        output_layout.addWidget(output_btn)
        file_layout.addLayout(output_layout)

        file_group.setLayout(file_layout)
        main_layout.addWidget(file_group)

        # Sequence settings
        settings_group = QGroupBox("Sequence Settings")
        settings_layout = QFormLayout()
        defaults = AvidMarkerConfig()

        self.fps_combo = QComboBox()
        self.fps_combo.setEditable(True)
        self.fps_combo.addItems(["23.976", "24", "25", "29.97", "30", "50", "59.94", "60"])
        self.fps_combo.setCurrentText(defaults.fps)
        settings_layout.addRow("Frame rate:", self.fps_combo)

        self.start_tc_line = QLineEdit(defaults.start_timecode)
        settings_layout.addRow("Start timecode:", self.start_tc_line)

        self.user_line = QLineEdit(defaults.username)
        settings_layout.addRow("User:", self.user_line)

        self.color_combo = QComboBox()
        self.color_combo.addItems(list(AVID_MARKER_COLORS))
        self.color_combo.setCurrentText(defaults.color)
        settings_layout.addRow("Marker color:", self.color_combo)

        settings_group.setLayout(settings_layout)
        main_layout.addWidget(settings_group)

        self.import_btn = QPushButton("Import Markers")
        self.import_btn.setMinimumHeight(40)
        import_font = QFont()
        import_font.setPointSize(12)
        import_font.setBold(True)
        self.import_btn.setFont(import_font)
        self.import_btn.clicked.connect(self.start_import)
        self.import_btn.setEnabled(False)
        main_layout.addWidget(self.import_btn)

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        main_layout.addWidget(self.progress_bar)

        log_group = QGroupBox("Import Log")
        log_layout = QVBoxLayout()
        self.log_text = QTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setFont(QFont("Courier", 9))
        log_layout.addWidget(self.log_text)
        log_group.setLayout(log_layout)
        main_layout.addWidget(log_group)

        clear_btn = QPushButton("Clear Log")
        clear_btn.clicked.connect(self.clear_log)
        main_layout.addWidget(clear_btn)

        self.log_message("Ready. Please select a CSV file with markers.")

    def select_input_file(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select CSV File with Markers",
            "",
            "CSV Files (*.csv);;All Files (*)"
        )
        if file_path:
            self.input_path = file_path
            self.input_line.setText(file_path)
            self.log_message(f"Input file selected: {file_path}")

            # Suggest an output file next to the CSV
            if not self.output_path:
                self.output_path = str(Path(file_path).with_name(generate_output_filename(Path(file_path))))
                self.output_line.setText(self.output_path)

            self.check_ready_to_import()

    def select_output_file(self):
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Avid Marker File",
            self.output_path,
            "Text Files (*.txt);;All Files (*)"
        )
        if file_path:
            self.output_path = file_path
            self.output_line.setText(file_path)
            self.log_message(f"Output file selected: {file_path}")
            self.check_ready_to_import()

    def check_ready_to_import(self):
        self.import_btn.setEnabled(bool(self.input_path and self.output_path))

    def build_config(self):
        """
        Build and validate the import configuration from the form.

        Returns:
            Tuple of (config, error_message)
        """
        config = ImportConfig(
            avid=AvidMarkerConfig(
                fps=self.fps_combo.currentText().strip(),
                start_timecode=self.start_tc_line.text().strip(),
                username=self.user_line.text().strip(),
                color=self.color_combo.currentText(),
            )
        )
        try:
            ConfigValidator.validate(config)
        except CsvMarkersException as e:
            return None, str(e)
        return config, None

    def start_import(self):
        config, error_msg = self.build_config()
        if config is None:
            QMessageBox.critical(self, "Invalid Settings", error_msg)
            return

        if self.worker is not None and self.worker.isRunning():
            QMessageBox.warning(
                self,
                "Import In Progress",
                "An import is already running. Please wait for it to complete."
            )
            return

        self.import_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.log_message("\n" + "=" * 60)
        self.log_message("Starting import...")

        self.worker = ImportWorker(self.input_path, self.output_path, config)
        self.worker.progress.connect(self.log_message)
        self.worker.finished.connect(self.import_finished)
        self.worker.start()

    def import_finished(self, success, message):
        self.progress_bar.setVisible(False)
        self.import_btn.setEnabled(True)
        self.worker = None

        if success:
            self.log_message(f"\n✓ SUCCESS: {message}\n")
            QMessageBox.information(self, "Markers Imported", message)
        else:
            self.log_message(f"\n✗ FAILED: {message}\n")
            QMessageBox.critical(self, "Import Failed", message)

    def log_message(self, message):
        self.log_text.append(message)
        cursor = self.log_text.textCursor()
        cursor.movePosition(QTextCursor.End)
        self.log_text.setTextCursor(cursor)

    def clear_log(self):
        self.log_text.clear()
        self.log_message("Log cleared. Ready for import.")


def main():
    setup_logging(level="INFO", log_file="csv_marker_import.log")
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    gui = MarkerImportGUI()
    gui.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
