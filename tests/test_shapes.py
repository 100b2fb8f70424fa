from __future__ import annotations

import math

import numpy as np
import pytest

from sketchpad_playground.shapes import (
    Circle,
    Line,
    Rectangle,
    ShapeKind,
    begin_shape,
    commit_shape,
    editable_fields,
    format_field,
    hit_test,
    move_anchor,
    parse_number,
    set_field,
    shape_fields,
    shape_metrics,
    shape_outline,
    update_shape_to_pointer,
)


def test_begin_shape_zeroes_trailing_fields() -> None:
    assert begin_shape(ShapeKind.RECTANGLE, 5, 6) == Rectangle(5.0, 6.0, 0.0, 0.0)
    assert begin_shape(ShapeKind.CIRCLE, 5, 6) == Circle(5.0, 6.0, 0.0)
    # A fresh line is collapsed onto its anchor.
    assert begin_shape(ShapeKind.LINE, 5, 6) == Line(5.0, 6.0, 5.0, 6.0)


def test_line_requires_both_endpoints() -> None:
    with pytest.raises(TypeError):
        Line(5, 5)  # type: ignore[call-arg]


def test_begin_shape_accepts_string_kind() -> None:
    assert isinstance(begin_shape("circle", 0, 0), Circle)


def test_update_line_tracks_pointer() -> None:
    draft = begin_shape(ShapeKind.LINE, 10, 10)
    assert update_shape_to_pointer(draft, ShapeKind.LINE, 10, 10, 100, 100) == Line(10, 10, 100, 100)


def test_update_rectangle_keeps_signed_extent() -> None:
    draft = begin_shape(ShapeKind.RECTANGLE, 50, 50)
    shape = update_shape_to_pointer(draft, ShapeKind.RECTANGLE, 50, 50, 20, 20)
    assert shape == Rectangle(50, 50, -30, -30)


def test_update_circle_radius_is_distance() -> None:
    draft = begin_shape(ShapeKind.CIRCLE, 0, 0)
    shape = update_shape_to_pointer(draft, ShapeKind.CIRCLE, 0, 0, 3, 4)
    assert isinstance(shape, Circle)
    assert shape.radius == pytest.approx(5.0)


def test_update_ignores_stale_draft_values() -> None:
    stale = Rectangle(0, 0, 999, 999)
    assert update_shape_to_pointer(stale, ShapeKind.RECTANGLE, 0, 0, 4, 2) == Rectangle(0, 0, 4, 2)


def test_commit_returns_equal_shape() -> None:
    draft = Circle(1, 2, 3)
    committed = commit_shape(draft)
    assert committed == draft
    assert committed.kind is ShapeKind.CIRCLE


def test_editable_fields_per_kind() -> None:
    assert editable_fields(ShapeKind.LINE) == ("anchor_x", "anchor_y", "end_x", "end_y")
    assert editable_fields(ShapeKind.RECTANGLE) == ("anchor_x", "anchor_y", "width", "height")
    assert editable_fields(ShapeKind.CIRCLE) == ("anchor_x", "anchor_y", "radius")
    assert shape_fields(Circle(1, 2, 3)) == {"anchor_x": 1.0, "anchor_y": 2.0, "radius": 3.0}


@pytest.mark.parametrize("raw, expected", [("12.5", 12.5), (" -3 ", -3.0), (7, 7.0), ("1e2", 100.0)])
def test_parse_number_accepts_numeric_input(raw, expected) -> None:
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1,5", None, True, "nan", "inf", float("nan")])
def test_parse_number_rejects_garbage(raw) -> None:
    assert parse_number(raw) is None


def test_set_field_updates_applicable_field() -> None:
    rect = Rectangle(0, 0, 10, 10)
    assert set_field(rect, "width", "-25") == Rectangle(0, 0, -25, 10)
    assert set_field(rect, "anchor_y", 4) == Rectangle(0, 4, 10, 10)


def test_set_field_inapplicable_name_is_noop() -> None:
    circle = Circle(0, 0, 5)
    assert set_field(circle, "width", "10") is circle
    assert set_field(circle, "kind", "10") is circle


def test_set_field_unparsable_value_is_noop() -> None:
    line = Line(0, 0, 1, 1)
    assert set_field(line, "end_x", "twelve") is line


def test_set_field_rejects_negative_radius() -> None:
    circle = Circle(0, 0, 5)
    assert set_field(circle, "radius", "-5") is circle
    assert set_field(circle, "radius", "0") == Circle(0, 0, 0)


@pytest.mark.parametrize("value", [141.42135623730951, 0.1 + 0.2, 1e-7, 123456789.125, -2.5, 0.0])
def test_format_field_parses_back_exactly(value) -> None:
    assert parse_number(format_field(value)) == value


def test_set_field_with_formatted_value_keeps_shape() -> None:
    circle = Circle(0, 0, math.hypot(100, 100))
    assert set_field(circle, "radius", format_field(circle.radius)) == circle


def test_move_anchor_translates_line_endpoints() -> None:
    moved = move_anchor(Line(0, 0, 30, 40), 100, 50)
    assert moved == Line(100, 50, 130, 90)


def test_move_anchor_keeps_extents() -> None:
    assert move_anchor(Rectangle(0, 0, -5, 7), 10, 10) == Rectangle(10, 10, -5, 7)
    assert move_anchor(Circle(0, 0, 3), -1, 2) == Circle(-1, 2, 3)


def test_hit_test_dispatch() -> None:
    assert hit_test(Line(10, 10, 100, 100), 90, 20)
    assert hit_test(Rectangle(50, 50, -30, -30), 30, 30)
    assert hit_test(Circle(0, 0, 5), 3, 4)
    assert not hit_test(Circle(0, 0, 5), 10, 10)


def test_zero_extent_shapes_are_hit_at_anchor() -> None:
    assert hit_test(Rectangle(5, 5, 0, 0), 5, 5)
    assert hit_test(Circle(5, 5, 0), 5, 5)
    assert not hit_test(Circle(5, 5, 0), 5, 6)


def test_outlines() -> None:
    np.testing.assert_allclose(shape_outline(Line(0, 0, 3, 4)), [[0, 0], [3, 4]])
    rect = shape_outline(Rectangle(0, 0, 2, -1))
    assert rect.shape == (5, 2)
    np.testing.assert_allclose(rect[2], [2, -1])
    assert shape_outline(Circle(0, 0, 1), samples=32).shape == (32, 2)


def test_metrics() -> None:
    assert shape_metrics(Line(0, 0, 3, 4)) == {"length": pytest.approx(5.0), "area": None}
    rect = shape_metrics(Rectangle(0, 0, -4, 2))
    assert rect["length"] == pytest.approx(12.0)
    assert rect["area"] == pytest.approx(8.0)
    circle = shape_metrics(Circle(0, 0, 2))
    assert circle["length"] == pytest.approx(4 * math.pi)
    assert circle["area"] == pytest.approx(4 * math.pi)
