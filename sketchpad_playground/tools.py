"""Interaction modes for the Sketchpad Playground canvas.

Each mode owns its pointer handlers and whatever gesture state they need. The
controller builds a fresh mode object on every switch, so a new mode can never
inherit a half-finished gesture from the previous one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Tuple

from .scene import DragContext, SceneStore
from .shapes import Shape, ShapeKind, begin_shape, commit_shape, move_anchor, update_shape_to_pointer

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class Mode(str, Enum):
    DRAW = "draw"
    ERASE = "erase"
    DRAG = "drag"


@dataclass
class ModeContext:
    scene: SceneStore
    tool_shape: ShapeKind
    redraw: Callable[[Optional[Shape]], None]  # full refresh, optionally with a draft on top


class ModeBase:
    """Common interface every mode implements."""

    mode: ClassVar[Mode]

    def __init__(self, ctx: ModeContext):
        self.ctx = ctx

    def pointer_down(self, x: float, y: float) -> None:
        pass

    def pointer_move(self, x: float, y: float) -> None:
        pass

    def pointer_up(self, x: float, y: float) -> None:
        pass

    def pointer_leave(self, x: float, y: float) -> None:
        pass

    def in_gesture(self) -> bool:
        return False

    def draft(self) -> Optional[Shape]:
        return None

    def deactivate(self) -> None:
        pass


class DrawMode(ModeBase):
    """Press to anchor, move to preview, release (or leave the surface) to commit."""

    mode = Mode.DRAW

    def __init__(self, ctx: ModeContext):
        super().__init__(ctx)
        self._start: Optional[Point] = None
        self._draft: Optional[Shape] = None

    @property
    def pending_start(self) -> Optional[Point]:
        return self._start

    def pointer_down(self, x: float, y: float) -> None:
        self._start = (float(x), float(y))
        self._draft = begin_shape(self.ctx.tool_shape, x, y)
        self.ctx.scene.selection = None
        self.ctx.redraw(self._draft)

    def pointer_move(self, x: float, y: float) -> None:
        if self._start is None:
            return
        sx, sy = self._start
        self._draft = update_shape_to_pointer(self._draft, self.ctx.tool_shape, sx, sy, x, y)
        self.ctx.redraw(self._draft)

    def pointer_up(self, x: float, y: float) -> None:
        self._finish(x, y)

    def pointer_leave(self, x: float, y: float) -> None:
        self._finish(x, y)

    def _finish(self, x: float, y: float) -> None:
        if self._start is None:
            return
        sx, sy = self._start
        # Recompute from the release point; the last move may be stale.
        shape = commit_shape(update_shape_to_pointer(self._draft, self.ctx.tool_shape, sx, sy, x, y))
        index = self.ctx.scene.append(shape)
        self._start = None
        self._draft = None
        logger.debug("Committed %s at index %d", shape.kind.value, index)
        self.ctx.redraw(None)

    def in_gesture(self) -> bool:
        return self._start is not None

    def draft(self) -> Optional[Shape]:
        return self._draft

    def deactivate(self) -> None:
        self._start = None
        self._draft = None


class EraseMode(ModeBase):
    """Paint-over deletion: every shape under the pointer goes while the button is held."""

    mode = Mode.ERASE

    def __init__(self, ctx: ModeContext):
        super().__init__(ctx)
        self._pressed = False

    def pointer_down(self, x: float, y: float) -> None:
        self._pressed = True
        self._erase_at(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        if not self._pressed:
            return
        self._erase_at(x, y)

    def pointer_up(self, x: float, y: float) -> None:
        self._pressed = False

    def pointer_leave(self, x: float, y: float) -> None:
        self._pressed = False

    def _erase_at(self, x: float, y: float) -> None:
        scene = self.ctx.scene
        removed = scene.remove_where(scene.hits(x, y))
        if removed:
            logger.debug("Erased %d shape(s) at (%.1f, %.1f)", removed, x, y)
        self.ctx.redraw(None)

    def in_gesture(self) -> bool:
        return self._pressed

    def deactivate(self) -> None:
        self._pressed = False


class DragMode(ModeBase):
    """Pick the topmost shape under the pointer and translate it by its anchor."""

    mode = Mode.DRAG

    def pointer_down(self, x: float, y: float) -> None:
        scene = self.ctx.scene
        index = scene.topmost_hit(x, y)
        if index is None:
            scene.selection = None
            scene.drag = None
        else:
            shape = scene[index]
            scene.selection = index
            scene.drag = DragContext(index, float(x) - shape.anchor_x, float(y) - shape.anchor_y)
        self.ctx.redraw(None)

    def pointer_move(self, x: float, y: float) -> None:
        scene = self.ctx.scene
        drag = scene.drag
        if drag is None or not scene.in_bounds(drag.index):
            return
        moved = move_anchor(scene[drag.index], float(x) - drag.offset_x, float(y) - drag.offset_y)
        scene.replace_at(drag.index, moved)
        self.ctx.redraw(None)

    def pointer_up(self, x: float, y: float) -> None:
        self.ctx.scene.drag = None

    def pointer_leave(self, x: float, y: float) -> None:
        self.ctx.scene.drag = None

    def in_gesture(self) -> bool:
        return self.ctx.scene.drag is not None

    def deactivate(self) -> None:
        self.ctx.scene.drag = None


MODES = {
    Mode.DRAW: DrawMode,
    Mode.ERASE: EraseMode,
    Mode.DRAG: DragMode,
}


def coerce_mode(value: object) -> Optional[Mode]:
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).lower())
    except ValueError:
        return None


__all__ = [
    "DragMode",
    "DrawMode",
    "EraseMode",
    "MODES",
    "Mode",
    "ModeBase",
    "ModeContext",
    "coerce_mode",
]
