"""
Stand Finder Qt Shell - Qt frontend over the Stand Finder core.

Run with:
    python -m standfinder_qt [URL]

Headless (no window):
    python -m standfinder_qt URL --export chart.png
    python -m standfinder_qt URL --json

Features:
  - Paste a personality-test chart URL, press Enter or "Find my stand"
  - Shows the matched stand's name and its six stat grades
  - Draws the stand's radar chart
  - Invalid URLs leave the previous result untouched and show a message

Logging:
  - Set STANDFINDER_LOGLEVEL=DEBUG for verbose logging
  - Default level is INFO
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence


# =============================================================================
# Logging Configuration
# =============================================================================

def setup_logging():
    """Configure logging for the standfinder and standfinder_qt packages."""
    # Get log level from environment (default: INFO)
    level_name = os.environ.get("STANDFINDER_LOGLEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in ("standfinder", "standfinder_qt"):
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Only add handler if not already configured
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logging.getLogger("standfinder_qt")


# Setup logging early
_logger = setup_logging()

# Now safe to import Qt and core
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from standfinder import __version__
from standfinder.common.settings import Settings, clamp_canvas_size
from standfinder.core.catalog import load_catalog
from standfinder.core.errors import StandFinderError
from standfinder.core.models import CatalogEntry, StatAxis
from standfinder.core.pipeline import StandResult, find_stand
from standfinder_qt.widgets.radar_painter import StandChartWidget, export_png

# Row order of the stat table
STAT_ROWS = (
    StatAxis.POWER,
    StatAxis.SPEED,
    StatAxis.RANGE,
    StatAxis.DURABILITY,
    StatAxis.PRECISION,
    StatAxis.POTENTIAL,
)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


# =============================================================================
# Main Window
# =============================================================================

class MainWindow(QMainWindow):
    """URL input, stand result card and radar chart."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[Sequence[CatalogEntry]] = None,
    ):
        super().__init__()
        self.setWindowTitle(f"Stand Finder v{__version__}")

        self._settings = settings if settings is not None else Settings()
        self._catalog = tuple(catalog) if catalog is not None else load_catalog(self._settings.catalog_path)
        self._result: Optional[StandResult] = None

        self._build_ui()
        if self._settings.last_url:
            self.url_input.setText(self._settings.last_url)

    # -------------------------------------------------------------------------
    # UI
    # -------------------------------------------------------------------------

    def _build_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)

        form_row = QHBoxLayout()
        self.url_input = QLineEdit()
        self.url_input.setObjectName("ChartUrlInput")
        self.url_input.setPlaceholderText("https://charts.idrlabs.com/graphic/autism-spectrum?&p=...")
        self.url_input.returnPressed.connect(self.on_submit)
        self.submit_button = QPushButton("Find my stand")
        self.submit_button.setObjectName("SubmitButton")
        self.submit_button.clicked.connect(self.on_submit)
        form_row.addWidget(self.url_input, stretch=1)
        form_row.addWidget(self.submit_button)
        layout.addLayout(form_row)

        # Result card, hidden until the first successful match
        self.result_section = QWidget()
        self.result_section.setObjectName("StandReveal")
        result_layout = QVBoxLayout(self.result_section)
        self.stand_name = QLabel()
        self.stand_name.setObjectName("StandName")
        font = self.stand_name.font()
        font.setPointSize(font.pointSize() + 4)
        font.setBold(True)
        self.stand_name.setFont(font)
        result_layout.addWidget(self.stand_name)

        stats_form = QFormLayout()
        self.stat_labels: dict[StatAxis, QLabel] = {}
        for axis in STAT_ROWS:
            value_label = QLabel()
            value_label.setObjectName(f"StandStats{axis.value.capitalize()}")
            self.stat_labels[axis] = value_label
            stats_form.addRow(f"{axis.value.capitalize()}:", value_label)
        result_layout.addLayout(stats_form)

        self.chart = StandChartWidget(self._settings.canvas_size)
        result_layout.addWidget(self.chart, alignment=Qt.AlignHCenter)
        self.result_section.setVisible(False)
        layout.addWidget(self.result_section)
        layout.addStretch(1)

        self.setCentralWidget(central)
        self.statusBar().showMessage(f"{len(self._catalog)} stands loaded")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    @property
    def result(self) -> Optional[StandResult]:
        return self._result

    @Slot()
    def on_submit(self):
        """Run the pipeline for the entered URL and show the stand."""
        url = self.url_input.text()
        try:
            result = find_stand(url, self._catalog)
        except StandFinderError as e:
            # Previous result stays on screen
            _logger.warning("Lookup failed: %s", e)
            self.statusBar().showMessage(e.user_message)
            return

        self.show_result(result)
        self._settings.last_url = url.strip()
        try:
            self._settings.save()
        except OSError as e:
            _logger.warning("Could not save settings: %s", e)

    def show_result(self, result: StandResult):
        self._result = result
        stand = result.stand
        self.stand_name.setText(result.headline)
        labels = stand.levels.labels()
        for axis, label in self.stat_labels.items():
            label.setText(labels[axis.value])
        self.chart.set_levels(stand.levels)
        self.result_section.setVisible(True)
        self.statusBar().showMessage(result.summary)


# =============================================================================
# Headless mode
# =============================================================================

def format_result(result: StandResult) -> str:
    """Plain-text result card."""
    labels = result.stand.levels.labels()
    lines = [result.headline]
    lines.extend(f"  {axis.value.capitalize():<11} {labels[axis.value]}" for axis in STAT_ROWS)
    return "\n".join(lines)


def run_headless(args: argparse.Namespace, settings: Settings) -> int:
    """Look up a stand without opening a window. Returns the exit code."""
    if not args.url:
        print("ERROR: a chart URL is required with --export or --json", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
        result = find_stand(args.url, catalog)
    except StandFinderError as e:
        _logger.error("%s", e)
        print(f"ERROR: {e.user_message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_result(result))

    if args.export:
        # Text rendering needs a GUI application, not a display
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
        _app = QGuiApplication.instance() or QGuiApplication([])
        size = clamp_canvas_size(args.size) if args.size is not None else settings.canvas_size
        export_png(result.stand.levels, args.export, size)
    return EXIT_OK


# =============================================================================
# Main
# =============================================================================

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="standfinder_qt", description="Find the stand matching a chart URL.")
    parser.add_argument("url", nargs="?", help="personality-test chart URL")
    parser.add_argument("--export", type=Path, help="write the stand's radar chart to this PNG file (no window)")
    parser.add_argument("--json", action="store_true", help="print the result as JSON (no window)")
    parser.add_argument("--size", type=int, help="chart canvas size in pixels")
    parser.add_argument("--catalog", type=Path, help="catalog JSON file (default: bundled stands)")
    parser.add_argument("--settings-dir", type=Path, help="directory holding standfinder_settings.json")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the Qt shell."""
    args = parse_args(argv)
    settings = Settings(settings_dir=args.settings_dir)

    if args.export or args.json:
        return run_headless(args, settings)

    if args.size is not None:
        settings.canvas_size = args.size

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Stand Finder")

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
        window = MainWindow(settings, catalog)
    except StandFinderError as e:
        _logger.error("Cannot start: %s", e)
        print(f"ERROR: {e.user_message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.url:
        window.url_input.setText(args.url)
        window.on_submit()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
