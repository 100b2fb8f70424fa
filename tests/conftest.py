"""Shared fixtures: a recording renderer and a controller wired to it."""

from __future__ import annotations

import pytest

from sketchpad_playground.controller import InteractionController
from sketchpad_playground.render import RecordingRenderer
from sketchpad_playground.shapes import Circle, Line, Rectangle


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def controller(renderer: RecordingRenderer) -> InteractionController:
    return InteractionController(renderer)


@pytest.fixture()
def three_shapes() -> list:
    return [
        Line(0.0, 0.0, 40.0, 40.0),
        Rectangle(10.0, 10.0, 50.0, 30.0),
        Circle(100.0, 100.0, 20.0),
    ]


def _draw(ctrl: InteractionController, start: tuple, end: tuple, moves: int = 2) -> None:
    """Press at ``start``, move towards ``end`` and release there."""
    ctrl.pointer_down(*start)
    for step in range(1, moves + 1):
        t = step / (moves + 1)
        ctrl.pointer_move(start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t)
    ctrl.pointer_up(*end)


@pytest.fixture()
def draw():
    return _draw
