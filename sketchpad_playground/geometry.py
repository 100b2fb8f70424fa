"""Geometry helpers for the Sketchpad Playground.

Hit-testing primitives are plain axis-aligned containment tests; a line counts
as hit anywhere inside its bounding box. Measurement helpers sample outlines
with numpy so renderers and the status bar share one polyline representation.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Box = Tuple[float, float, float, float]


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Return the Euclidean distance between ``(ax, ay)`` and ``(bx, by)``."""
    return float(math.hypot(float(bx) - float(ax), float(by) - float(ay)))


def normalize_box(x0: float, y0: float, w: float, h: float) -> Box:
    """Return ``(min_x, min_y, max_x, max_y)`` for a box with signed extents."""
    x1 = x0 + w
    y1 = y0 + h
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def point_in_axis_aligned_box(px: float, py: float, x0: float, y0: float, w: float, h: float) -> bool:
    """Containment test for a box whose width/height may be negative. Edges count as inside."""
    min_x, min_y, max_x, max_y = normalize_box(x0, y0, w, h)
    return min_x <= px <= max_x and min_y <= py <= max_y


def point_near_segment_bounding_box(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> bool:
    """Return True when the point lies in the segment's enclosing rectangle.

    This is not a distance-to-stroke test: any point inside the bounding box
    of a diagonal segment counts as a hit, while a perfectly horizontal or
    vertical segment only matches points exactly on its span.
    """
    return point_in_axis_aligned_box(px, py, x1, y1, x2 - x1, y2 - y1)


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    return distance(px, py, cx, cy) <= r


# ---------------------------------------------------------------------------
# Measurement helpers


def circle_points(center: Sequence[float], radius: float, samples: int = 128) -> np.ndarray:
    """Sample a closed circle outline as an ``(samples, 2)`` polyline."""
    angle = np.linspace(0.0, 2.0 * math.pi, max(int(samples), 3), endpoint=True)
    cx, cy = float(center[0]), float(center[1])
    x = cx + radius * np.cos(angle)
    y = cy + radius * np.sin(angle)
    return np.column_stack((x, y))


def polyline_length(points: np.ndarray) -> float:
    """Return the cumulative length of a polyline."""
    if points.size == 0:
        return 0.0
    delta = np.diff(points, axis=0)
    seg = np.hypot(delta[:, 0], delta[:, 1])
    return float(np.sum(seg))


def polygon_area(points: np.ndarray) -> float:
    """Return the absolute area spanned by a closed polygon."""
    if points.size == 0:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


__all__ = [
    "circle_points",
    "distance",
    "normalize_box",
    "point_in_axis_aligned_box",
    "point_in_circle",
    "point_near_segment_bounding_box",
    "polygon_area",
    "polyline_length",
]
