"""Interaction controller: the single owner and mutator of the scene."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .render import RendererAdapter, redraw
from .scene import SceneStore
from .shapes import Shape, ShapeKind, coerce_kind, set_field, shape_fields
from .tools import MODES, DrawMode, Mode, ModeBase, ModeContext, coerce_mode

logger = logging.getLogger(__name__)


class InteractionController:
    """Routes pointer events to the active mode and keeps the renderer in sync.

    Every handler runs to completion, including a full clear-and-redraw,
    before returning. Invalid input never raises; it simply changes nothing.
    """

    def __init__(self, renderer: RendererAdapter, scene: Optional[SceneStore] = None):
        self._renderer = renderer
        self.scene = scene if scene is not None else SceneStore()
        self._tool_shape = ShapeKind.LINE
        self._state: ModeBase = self._build(Mode.DRAW)

    def _build(self, mode: Mode) -> ModeBase:
        ctx = ModeContext(scene=self.scene, tool_shape=self._tool_shape, redraw=self._redraw)
        return MODES[mode](ctx)

    def _switch(self, mode: Mode, repaint: bool = True) -> None:
        had_draft = self._state.draft() is not None
        if self._state.in_gesture():
            logger.debug("Abandoning %s gesture", self._state.mode.value)
        self._state.deactivate()
        self._state = self._build(mode)
        if had_draft and repaint:
            self._redraw(None)

    def _redraw(self, draft: Optional[Shape] = None) -> None:
        redraw(self._renderer, self.scene, draft)

    # ------------------------------------------------------------------
    # Tool / mode selector
    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def tool_shape(self) -> ShapeKind:
        return self._tool_shape

    def set_mode(self, mode: Mode | str) -> None:
        target = coerce_mode(mode)
        if target is None or target is self.mode:
            return
        self._switch(target)
        logger.debug("Mode -> %s", target.value)

    def set_tool_shape(self, kind: ShapeKind | str) -> None:
        target = coerce_kind(kind)
        if target is None or target is self._tool_shape:
            return
        self._tool_shape = target
        self._switch(self.mode)
        logger.debug("Tool shape -> %s", target.value)

    # ------------------------------------------------------------------
    # Pointer input
    def pointer_down(self, x: float, y: float) -> None:
        self._state.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self._state.pointer_move(x, y)

    def pointer_up(self, x: float, y: float) -> None:
        self._state.pointer_up(x, y)

    def pointer_leave(self, x: float, y: float) -> None:
        self._state.pointer_leave(x, y)

    # ------------------------------------------------------------------
    # State readouts
    @property
    def selection(self) -> Optional[int]:
        return self.scene.selection

    @property
    def draft(self) -> Optional[Shape]:
        return self._state.draft()

    @property
    def pending_start(self) -> Optional[Tuple[float, float]]:
        if isinstance(self._state, DrawMode):
            return self._state.pending_start
        return None

    def in_gesture(self) -> bool:
        return self._state.in_gesture()

    def selected_shape(self) -> Optional[Shape]:
        return self.scene.selected_shape()

    def selected_fields(self) -> Dict[str, float]:
        shape = self.selected_shape()
        if shape is None:
            return {}
        return shape_fields(shape)

    # ------------------------------------------------------------------
    # Edits
    def set_field(self, field_name: str, raw: object) -> bool:
        """Write one numeric field of the selected shape; True when something changed.

        While a drag gesture is live the drag owns the shape and edits are ignored.
        """
        if self.scene.drag is not None:
            return False
        index = self.scene.selection
        shape = self.scene.selected_shape()
        if index is None or shape is None:
            return False
        updated = set_field(shape, field_name, raw)
        if updated == shape:
            return False
        self.scene.replace_at(index, updated)
        self._redraw(self.draft)
        return True

    def clear(self) -> None:
        """Empty the scene, abandoning whatever gesture is in flight."""
        self._switch(self.mode, repaint=False)
        self.scene.clear()
        logger.debug("Scene cleared")
        self._redraw(None)

    def refresh(self) -> None:
        self._redraw(self.draft)


__all__ = ["InteractionController"]
