"""A canvas that draws nothing and only measures the drawing's extents."""

from __future__ import annotations

from typing import NamedTuple

from turtle_graphics.canvas import Canvas
from turtle_graphics.geometry import move_degrees
from turtle_graphics.style import StrokeStyle

# Fraction of each axis span added on every side by get_extents().
EXTENTS_TOLERANCE = 0.001


class Extents(NamedTuple):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class BoundsCanvas(Canvas):
    """
    Tracks the axis-aligned box touched by a turtle's path.

    Arcs are not traced; the whole circle they lie on is included instead,
    so the box may be loose but always contains the drawing.
    """

    def __init__(self) -> None:
        self._min_x = 0.0
        self._max_x = 0.0
        self._min_y = 0.0
        self._max_y = 0.0
        # The first point seeds the box; starting from zeros would be wrong
        # for drawings lying entirely on one side of an axis.
        self._initialized = False

    @property
    def is_empty(self) -> bool:
        return not self._initialized

    def bounds(self) -> Extents:
        """The exact accumulated box, without tolerance."""
        return Extents(self._min_x, self._min_y, self._max_x, self._max_y)

    def get_extents(self) -> Extents:
        """The accumulated box grown by EXTENTS_TOLERANCE of its span per side.

        The margin keeps geometry lying on the boundary inside the grid
        once it is rasterized.
        """
        x_tol = (self._max_x - self._min_x) * EXTENTS_TOLERANCE
        y_tol = (self._max_y - self._min_y) * EXTENTS_TOLERANCE
        return Extents(
            self._min_x - x_tol,
            self._min_y - y_tol,
            self._max_x + x_tol,
            self._max_y + y_tol,
        )

    def _update_bounds(self, x: float, y: float) -> None:
        if not self._initialized:
            self._min_x = self._max_x = x
            self._min_y = self._max_y = y
            self._initialized = True
            return
        if x < self._min_x:
            self._min_x = x
        if x > self._max_x:
            self._max_x = x
        if y < self._min_y:
            self._min_y = y
        if y > self._max_y:
            self._max_y = y

    def set_style(self, style: StrokeStyle) -> None:
        pass

    def draw_line(self, x: float, y: float, angle: float, length: float) -> None:
        self._update_bounds(x, y)
        self._update_bounds(*move_degrees(x, y, angle, length))

    def draw_arc(
        self, x: float, y: float, angle: float, radius: float, degrees: float
    ) -> None:
        cx, cy = move_degrees(x, y, angle + 90.0, radius)
        self._update_bounds(cx, cy + radius)
        self._update_bounds(cx, cy - radius)
        self._update_bounds(cx + radius, cy)
        self._update_bounds(cx - radius, cy)
