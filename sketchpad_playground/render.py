"""Renderer adapter contract.

The interaction engine never owns a drawing surface. It hands the current
scene to an adapter as ``clear()`` followed by one ``stroke_shape`` per shape in
draw order, plus one extra stroke for the live draft while drawing. Adapters
must not keep their own copy of the scene between redraws.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from .shapes import Shape

Command = Tuple[str, Optional[Shape]]


@runtime_checkable
class RendererAdapter(Protocol):
    def clear(self) -> None:
        ...

    def stroke_shape(self, shape: Shape) -> None:
        ...


def redraw(renderer: RendererAdapter, shapes: Iterable[Shape], draft: Optional[Shape] = None) -> None:
    """Full refresh: clear, stroke the scene in order, then the draft if any.

    Adapters exposing ``stroke_preview`` get the draft through it so they can
    style the preview differently.
    """
    renderer.clear()
    for shape in shapes:
        renderer.stroke_shape(shape)
    if draft is None:
        return
    preview = getattr(renderer, "stroke_preview", None)
    if callable(preview):
        preview(draft)
    else:
        renderer.stroke_shape(draft)


class RecordingRenderer:
    """Headless adapter that logs the command stream it receives."""

    def __init__(self) -> None:
        self.commands: List[Command] = []

    def clear(self) -> None:
        self.commands.append(("clear", None))

    def stroke_shape(self, shape: Shape) -> None:
        self.commands.append(("stroke", shape))

    def last_frame(self) -> List[Shape]:
        """Shapes stroked since the most recent ``clear``."""
        frame: List[Shape] = []
        for name, shape in self.commands:
            if name == "clear":
                frame = []
            elif shape is not None:
                frame.append(shape)
        return frame

    def frame_count(self) -> int:
        return sum(1 for name, _ in self.commands if name == "clear")

    def reset(self) -> None:
        self.commands.clear()


__all__ = ["Command", "RecordingRenderer", "RendererAdapter", "redraw"]
