"""Qt widgets for the Sketchpad Playground UI."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QButtonGroup,
    QDockWidget,
    QFormLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from .config import EditorSettings
from .controller import InteractionController
from .shapes import Shape, ShapeKind, format_field, shape_outline
from .tools import Mode

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class Surface(QWidget):
    """Drawing surface: forwards pointer input and acts as the renderer adapter.

    Render commands are turned into a display list of outlines that
    ``paintEvent`` replays. The list is rebuilt from scratch on every
    ``clear()``, so the widget never holds scene state of its own.
    """

    changed = Signal()

    def __init__(self, settings: EditorSettings):
        super().__init__()
        self.setObjectName("SketchpadSurface")
        self._settings = settings
        self.setFixedSize(QSize(settings.surface_width, settings.surface_height))
        self.setMouseTracking(True)
        self.setToolTip(
            "Draw: press, drag and release.\n"
            "Erase: hold the button and sweep over shapes.\n"
            "Drag: press on a shape and move it."
        )
        self._display: List[Tuple[np.ndarray, str]] = []
        self._stroke_index = 0
        self._selection_index: Callable[[], Optional[int]] = lambda: None
        self._controller: Optional[InteractionController] = None
        self._last_pos: Point = (0.0, 0.0)

    def attach(self, controller: InteractionController) -> None:
        self._controller = controller
        self._selection_index = lambda: controller.selection
        controller.refresh()

    # ------------------------------------------------------------------
    # Renderer adapter
    def clear(self) -> None:
        self._display = []
        self._stroke_index = 0
        self.update()

    def stroke_shape(self, shape: Shape) -> None:
        role = "selected" if self._stroke_index == self._selection_index() else "shape"
        self._stroke_index += 1
        self._display.append((shape_outline(shape, samples=self._settings.circle_samples), role))
        self.update()

    def stroke_preview(self, shape: Shape) -> None:
        self._display.append((shape_outline(shape, samples=self._settings.circle_samples), "preview"))
        self.update()

    # ------------------------------------------------------------------
    # Painting
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.fillRect(self.rect(), QColor("white"))
        colors = {
            "shape": QColor(self._settings.stroke_color),
            "selected": QColor(self._settings.selection_color),
            "preview": QColor(self._settings.preview_color),
        }
        for points, role in self._display:
            pen = QPen(colors[role], self._settings.line_width)
            if role == "preview":
                pen.setStyle(Qt.DashLine)
            painter.setPen(pen)
            painter.drawPolyline([QPointF(float(x), float(y)) for x, y in points])
        painter.end()

    # ------------------------------------------------------------------
    # Pointer input
    def _event_pos(self, event) -> Point:
        pos = event.position()
        self._last_pos = (float(pos.x()), float(pos.y()))
        return self._last_pos

    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        if self._controller is None or event.button() != Qt.LeftButton:
            return
        self._controller.pointer_down(*self._event_pos(event))
        self.changed.emit()

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        if self._controller is None:
            return
        self._controller.pointer_move(*self._event_pos(event))
        if self._controller.in_gesture():
            self.changed.emit()

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        if self._controller is None or event.button() != Qt.LeftButton:
            return
        self._controller.pointer_up(*self._event_pos(event))
        self.changed.emit()

    def leaveEvent(self, event):  # pragma: no cover - GUI entry point
        if self._controller is not None:
            self._controller.pointer_leave(*self._last_pos)
            self.changed.emit()
        super().leaveEvent(event)


class Controls:
    """Docked mode/tool selector plus the numeric field-edit panel."""

    _MODES = (
        (Mode.DRAW, "Draw", "Press, drag and release to draw the active shape."),
        (Mode.ERASE, "Erase", "Hold the button and sweep to delete every shape under the pointer."),
        (Mode.DRAG, "Drag", "Press on a shape to select it and drag it around."),
    )
    _SHAPES = (
        (ShapeKind.LINE, "Line"),
        (ShapeKind.RECTANGLE, "Rectangle"),
        (ShapeKind.CIRCLE, "Circle"),
    )

    def __init__(self, controller: InteractionController, on_changed: Callable[[], None]):
        self._controller = controller
        self._on_changed = on_changed
        self.dock = QDockWidget("Tools")
        self.dock.setObjectName("SketchpadToolsDock")
        self.dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)
        host = QWidget()
        layout = QVBoxLayout(host)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self._mode_group = QButtonGroup(host)
        mode_box = QGroupBox("Mode")
        mode_layout = QVBoxLayout(mode_box)
        for mode, text, tip in self._MODES:
            button = QRadioButton(text)
            button.setToolTip(tip)
            button.setChecked(mode is controller.mode)
            button.toggled.connect(lambda checked, m=mode: self._set_mode(m, checked))
            self._mode_group.addButton(button)
            mode_layout.addWidget(button)
        layout.addWidget(mode_box)

        self._shape_group = QButtonGroup(host)
        shape_box = QGroupBox("Shape")
        shape_layout = QVBoxLayout(shape_box)
        for kind, text in self._SHAPES:
            button = QRadioButton(text)
            button.setChecked(kind is controller.tool_shape)
            button.toggled.connect(lambda checked, k=kind: self._set_shape(k, checked))
            self._shape_group.addButton(button)
            shape_layout.addWidget(button)
        layout.addWidget(shape_box)

        clear_button = QPushButton("Clear")
        clear_button.setToolTip("Remove every shape from the drawing.")
        clear_button.clicked.connect(self._clear)
        layout.addWidget(clear_button)

        self._fields_box = QGroupBox("Selection")
        self._fields_layout = QFormLayout(self._fields_box)
        self._field_edits: Dict[str, QLineEdit] = {}
        self._shown_text: Dict[str, str] = {}
        self._empty_label = QLabel("Nothing selected")
        self._fields_layout.addRow(self._empty_label)
        layout.addWidget(self._fields_box)

        layout.addStretch(1)
        self.dock.setWidget(host)
        self.sync_fields()

    def _set_mode(self, mode: Mode, checked: bool) -> None:
        if not checked:
            return
        self._controller.set_mode(mode)
        self._on_changed()

    def _set_shape(self, kind: ShapeKind, checked: bool) -> None:
        if not checked:
            return
        self._controller.set_tool_shape(kind)
        self._on_changed()

    def _clear(self) -> None:
        self._controller.clear()
        self._on_changed()

    def _commit_field(self, name: str) -> None:
        edit = self._field_edits.get(name)
        if edit is None:
            return
        if edit.text() == self._shown_text.get(name):
            return
        if not self._controller.set_field(name, edit.text()):
            logger.debug("Ignored edit %s=%r", name, edit.text())
        self._on_changed()

    def sync_fields(self) -> None:
        """Rebuild the field editors from the current selection."""
        fields = self._controller.selected_fields()
        if list(fields) != list(self._field_edits):
            while self._fields_layout.rowCount():
                self._fields_layout.removeRow(0)
            self._field_edits = {}
            self._shown_text = {}
            if not fields:
                self._empty_label = QLabel("Nothing selected")
                self._fields_layout.addRow(self._empty_label)
            for name in fields:
                edit = QLineEdit()
                edit.editingFinished.connect(lambda n=name: self._commit_field(n))
                self._fields_layout.addRow(name.replace("_", " ").title(), edit)
                self._field_edits[name] = edit
        for name, value in fields.items():
            edit = self._field_edits[name]
            if not edit.hasFocus():
                blocked = edit.blockSignals(True)
                text = format_field(value)
                edit.setText(text)
                self._shown_text[name] = text
                edit.blockSignals(blocked)


__all__ = ["Controls", "Surface"]
