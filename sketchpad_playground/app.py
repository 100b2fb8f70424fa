"""Application bootstrap for the Sketchpad Playground."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar

from .config import EditorSettings, SettingsError, configure_logging, load_settings
from .controller import InteractionController
from .shapes import shape_metrics
from .widgets import Controls, Surface

logger = logging.getLogger(__name__)


class Main(QMainWindow):
    """Top-level window wiring together the surface, controller, and tool dock."""

    def __init__(self, settings: Optional[EditorSettings] = None):
        super().__init__()
        self.setWindowTitle("Sketchpad Playground")
        self.settings = settings or EditorSettings()

        self.surface = Surface(self.settings)
        self.controller = InteractionController(self.surface)
        self.surface.attach(self.controller)
        self.controls = Controls(self.controller, self._on_changed)

        self.setCentralWidget(self.surface)
        self.addDockWidget(Qt.RightDockWidgetArea, self.controls.dock)
        self._setup_status_bar()
        self.surface.changed.connect(self._on_changed)
        self._on_changed()

    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)
        self._mode_label = QLabel()
        self._length_label = QLabel()
        self._area_label = QLabel()
        for label in (self._mode_label, self._length_label, self._area_label):
            bar.addPermanentWidget(label)

    def _on_changed(self) -> None:
        self.controls.sync_fields()
        self._mode_label.setText(
            f"Mode: {self.controller.mode.value.title()} | Shape: {self.controller.tool_shape.value.title()}"
        )
        shape = self.controller.draft or self.controller.selected_shape()
        metrics = shape_metrics(shape) if shape is not None else {}
        self._length_label.setText(self._format_value("length", metrics.get("length")))
        self._area_label.setText(self._format_value("area", metrics.get("area")))

    def _format_value(self, label: str, value: float | None, precision: int = 2) -> str:
        if value is None:
            return f"{label}: --"
        return f"{label}: {value:.{precision}f}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sketchpad", description="Sketchpad Playground vector editor")
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv: Iterable[str] | None = None) -> int:  # pragma: no cover - GUI entry point
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        settings = load_settings(args.settings)
    except SettingsError as exc:
        parser.error(str(exc))
    app = QApplication(sys.argv[:1])
    window = Main(settings)
    window.show()
    logger.info("Surface %dx%d", settings.surface_width, settings.surface_height)
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - GUI entry point
    sys.exit(main())
