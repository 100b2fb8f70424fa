"""Shape variants and the pure functions that build and edit them.

Shapes are frozen dataclasses: every edit (drag, field change, live preview)
produces a new value, and the scene stores whichever value it is handed. Each
variant carries only the fields that apply to its kind.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Union

import numpy as np
from pydantic import FiniteFloat, TypeAdapter, ValidationError

from .geometry import (
    circle_points,
    point_in_axis_aligned_box,
    point_in_circle,
    point_near_segment_bounding_box,
    polygon_area,
    polyline_length,
)


class ShapeKind(str, Enum):
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


@dataclass(frozen=True)
class Line:
    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    anchor_x: float
    anchor_y: float
    end_x: float
    end_y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle; negative extents grow left/up from the anchor."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    anchor_x: float
    anchor_y: float
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    anchor_x: float
    anchor_y: float
    radius: float = 0.0


Shape = Union[Line, Rectangle, Circle]

_VARIANTS: Dict[ShapeKind, type] = {
    ShapeKind.LINE: Line,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.CIRCLE: Circle,
}

_NUMBER = TypeAdapter(FiniteFloat)


def coerce_kind(value: object) -> Optional[ShapeKind]:
    """Map a kind or its string value onto ``ShapeKind``; unknown values give ``None``."""
    if isinstance(value, ShapeKind):
        return value
    try:
        return ShapeKind(str(value).lower())
    except ValueError:
        return None


def format_field(value: float) -> str:
    """Text for a field editor that parses back to exactly ``value``."""
    return repr(float(value))


def parse_number(value: object) -> Optional[float]:
    """Parse a finite float from a number or numeric text, ``None`` when that fails."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return float(_NUMBER.validate_python(value))
    except ValidationError:
        return None


# ---------------------------------------------------------------------------
# Construction


def begin_shape(tool_shape: ShapeKind, anchor_x: float, anchor_y: float) -> Shape:
    """Return a draft stub anchored at the press point with zeroed trailing fields."""
    kind = coerce_kind(tool_shape) or ShapeKind.LINE
    ax, ay = float(anchor_x), float(anchor_y)
    if kind is ShapeKind.LINE:
        # A fresh line collapses onto its anchor rather than the origin.
        return Line(ax, ay, ax, ay)
    return _VARIANTS[kind](ax, ay)


def update_shape_to_pointer(
    draft: Optional[Shape],
    tool_shape: ShapeKind,
    anchor_x: float,
    anchor_y: float,
    px: float,
    py: float,
) -> Shape:
    """Recompute the trailing fields of a draft from the live pointer position.

    ``draft`` is only a hint: the result depends on the tool shape, the anchor
    and the pointer, never on values left over from earlier move events.
    """
    kind = coerce_kind(tool_shape)
    if kind is None:
        kind = draft.kind if draft is not None else ShapeKind.LINE
    ax, ay = float(anchor_x), float(anchor_y)
    px, py = float(px), float(py)
    if kind is ShapeKind.LINE:
        return Line(ax, ay, px, py)
    if kind is ShapeKind.RECTANGLE:
        return Rectangle(ax, ay, px - ax, py - ay)
    return Circle(ax, ay, math.hypot(px - ax, py - ay))


def commit_shape(draft: Shape) -> Shape:
    """Finalize a draft. Shapes are immutable so the committed value is the draft's field set."""
    return replace(draft)


# ---------------------------------------------------------------------------
# Editing


def editable_fields(kind: ShapeKind) -> Tuple[str, ...]:
    variant = _VARIANTS.get(coerce_kind(kind))  # type: ignore[arg-type]
    if variant is None:
        return ()
    return tuple(f.name for f in fields(variant))


def shape_fields(shape: Shape) -> Dict[str, float]:
    """Return the editable fields of ``shape`` in declaration order."""
    return {name: float(getattr(shape, name)) for name in editable_fields(shape.kind)}


def set_field(shape: Shape, field_name: str, value: object) -> Shape:
    """Return ``shape`` with one numeric field replaced.

    Inapplicable field names, unparsable or non-finite values, and a negative
    radius leave the shape unchanged.
    """
    if field_name not in editable_fields(shape.kind):
        return shape
    number = parse_number(value)
    if number is None:
        return shape
    if field_name == "radius" and number < 0.0:
        return shape
    return replace(shape, **{field_name: number})


def move_anchor(shape: Shape, anchor_x: float, anchor_y: float) -> Shape:
    """Translate ``shape`` so its anchor lands on ``(anchor_x, anchor_y)``.

    Lines carry their end point along by the same delta; rectangles and
    circles keep their extents.
    """
    ax, ay = float(anchor_x), float(anchor_y)
    if isinstance(shape, Line):
        dx = ax - shape.anchor_x
        dy = ay - shape.anchor_y
        return Line(ax, ay, shape.end_x + dx, shape.end_y + dy)
    return replace(shape, anchor_x=ax, anchor_y=ay)


# ---------------------------------------------------------------------------
# Queries


def hit_test(shape: Shape, px: float, py: float) -> bool:
    if isinstance(shape, Line):
        return point_near_segment_bounding_box(px, py, shape.anchor_x, shape.anchor_y, shape.end_x, shape.end_y)
    if isinstance(shape, Rectangle):
        return point_in_axis_aligned_box(px, py, shape.anchor_x, shape.anchor_y, shape.width, shape.height)
    if isinstance(shape, Circle):
        return point_in_circle(px, py, shape.anchor_x, shape.anchor_y, shape.radius)
    return False


def shape_outline(shape: Shape, samples: int = 128) -> np.ndarray:
    """Return the stroke path of ``shape`` as an ``(n, 2)`` polyline."""
    if isinstance(shape, Line):
        return np.array([[shape.anchor_x, shape.anchor_y], [shape.end_x, shape.end_y]], dtype=float)
    if isinstance(shape, Rectangle):
        x0, y0 = shape.anchor_x, shape.anchor_y
        x1, y1 = x0 + shape.width, y0 + shape.height
        return np.array([[x0, y0], [x1, y0], [x1, y1], [x0, y1], [x0, y0]], dtype=float)
    return circle_points((shape.anchor_x, shape.anchor_y), shape.radius, samples=samples)


def shape_metrics(shape: Shape) -> Dict[str, Optional[float]]:
    """Length/perimeter and enclosed area used by status readouts."""
    if isinstance(shape, Circle):
        return {
            "length": 2.0 * math.pi * shape.radius,
            "area": math.pi * shape.radius * shape.radius,
        }
    outline = shape_outline(shape)
    if isinstance(shape, Line):
        return {"length": polyline_length(outline), "area": None}
    return {"length": polyline_length(outline), "area": polygon_area(outline[:-1])}


__all__ = [
    "Circle",
    "Line",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "begin_shape",
    "coerce_kind",
    "commit_shape",
    "editable_fields",
    "format_field",
    "hit_test",
    "move_anchor",
    "parse_number",
    "set_field",
    "shape_fields",
    "shape_metrics",
    "shape_outline",
    "update_shape_to_pointer",
]
