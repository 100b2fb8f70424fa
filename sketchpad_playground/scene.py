"""Authoritative ordered shape collection plus selection and drag bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .shapes import Shape, hit_test

ShapePredicate = Callable[[Shape], bool]


@dataclass(frozen=True)
class DragContext:
    """Shape being dragged and the pointer-to-anchor offset captured on press."""

    index: int
    offset_x: float
    offset_y: float


class SceneStore:
    """Ordered shapes in draw order; the last shape is topmost.

    Shapes are addressed by position. Mutations are limited to ``append``,
    ``remove_where``, ``replace_at`` and ``clear``; none of them raise.
    """

    def __init__(self) -> None:
        self._shapes: List[Shape] = []
        self.selection: Optional[int] = None
        self.drag: Optional[DragContext] = None

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes))

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def in_bounds(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._shapes)

    def selected_shape(self) -> Optional[Shape]:
        if not self.in_bounds(self.selection):
            return None
        return self._shapes[self.selection]  # type: ignore[index]

    # ------------------------------------------------------------------
    # Mutation
    def append(self, shape: Shape) -> int:
        self._shapes.append(shape)
        return len(self._shapes) - 1

    def remove_where(self, predicate: ShapePredicate) -> int:
        """Drop every shape matching ``predicate`` and return how many went.

        Survivors keep their relative order. A selected survivor is re-indexed;
        a removed selection is cleared. Any drag in progress is dropped since
        its index may no longer be valid.
        """
        survivors: List[Shape] = []
        new_selection: Optional[int] = None
        for index, shape in enumerate(self._shapes):
            if predicate(shape):
                continue
            if index == self.selection:
                new_selection = len(survivors)
            survivors.append(shape)
        removed = len(self._shapes) - len(survivors)
        if removed:
            self._shapes = survivors
            self.selection = new_selection
            self.drag = None
        return removed

    def replace_at(self, index: int, shape: Shape) -> bool:
        if not self.in_bounds(index):
            return False
        self._shapes[index] = shape
        return True

    def clear(self) -> None:
        self._shapes.clear()
        self.selection = None
        self.drag = None

    # ------------------------------------------------------------------
    # Hit-testing
    def topmost_hit(self, px: float, py: float) -> Optional[int]:
        """Index of the last-drawn shape containing the point, or ``None``."""
        for index in range(len(self._shapes) - 1, -1, -1):
            if hit_test(self._shapes[index], px, py):
                return index
        return None

    @staticmethod
    def hits(px: float, py: float) -> ShapePredicate:
        """Predicate for ``remove_where`` matching every shape under the point."""
        return lambda shape: hit_test(shape, px, py)


__all__ = ["DragContext", "SceneStore", "ShapePredicate"]
