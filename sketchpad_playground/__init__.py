"""Shape model and interaction engine for a small 2-D vector editor.

The Qt front end lives in ``widgets`` and ``app`` and is imported lazily so the
engine can be used headless.
"""
from .config import EditorSettings, SettingsError, load_settings
from .controller import InteractionController
from .render import RecordingRenderer, RendererAdapter, redraw
from .scene import DragContext, SceneStore
from .shapes import (
    Circle,
    Line,
    Rectangle,
    Shape,
    ShapeKind,
    begin_shape,
    commit_shape,
    hit_test,
    move_anchor,
    set_field,
    update_shape_to_pointer,
)
from .tools import Mode

__all__ = [
    "Circle",
    "DragContext",
    "EditorSettings",
    "InteractionController",
    "Line",
    "Mode",
    "RecordingRenderer",
    "Rectangle",
    "RendererAdapter",
    "SceneStore",
    "SettingsError",
    "Shape",
    "ShapeKind",
    "begin_shape",
    "commit_shape",
    "hit_test",
    "load_settings",
    "move_anchor",
    "redraw",
    "set_field",
    "update_shape_to_pointer",
]
