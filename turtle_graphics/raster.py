"""A canvas that rasterizes the turtle's path into an RGBA pixel buffer."""

from __future__ import annotations

import logging
import math
from collections.abc import Generator

import numpy as np
from numpy.typing import NDArray

from turtle_graphics.canvas import Canvas
from turtle_graphics.errors import ValidationError, _require
from turtle_graphics.geometry import move_degrees
from turtle_graphics.style import BLACK, WHITE, Color, ColorStyle, StrokeStyle

logger = logging.getLogger(__name__)

# Arc samples per pixel of radius. About 2*pi reach every pixel of the
# circumference.
ARC_SAMPLES_PER_RADIUS_PIXEL = 7

Pixel = tuple[int, int]


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> Generator[Pixel, None, None]:
    """Yield every pixel on the line from (x0, y0) to (x1, y1), both included.

    Integer-only Bresenham, stepping one pixel at a time along the major
    axis and accumulating error to decide when to step the minor one.
    """
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    # Halves truncate toward zero.
    err = dx // 2 if dx > dy else -(dy // 2)

    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            return
        e2 = err
        if e2 > -dx:
            err -= dy
            x0 += sx
        if e2 < dy:
            err += dx
            y0 += sy


def fold_arc_degrees(degrees: float) -> float:
    """Map an arc length in degrees into [0, 360] for rasterizing.

    Direction and repeated laps don't matter once pixels are set:
    negative values become ``360 - degrees`` and anything past a full
    circle is clamped to 360.
    """
    if degrees < 0:
        degrees = 360.0 - degrees
    if degrees > 360:
        degrees = 360.0
    return degrees


class RasterCanvas(Canvas):
    """
    Maps a rectangle of turtle space onto a fixed pixel grid.

    Row 0 is the top of the image; increasing Y in turtle space moves up.
    Anything falling outside the rectangle is clipped.

    Args:
        pixels_wide: Image width in pixels, an int > 0.
        pixels_tall: Image height in pixels, an int > 0.
        min_x, min_y, max_x, max_y: The turtle-space rectangle covered by
            the image. Requires min < max on both axes.
        background: RGBA fill for the initial image.

    Raises:
        ValidationError: For non-positive sizes or an empty rectangle.
    """

    def __init__(
        self,
        pixels_wide: int,
        pixels_tall: int,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
        background: Color = WHITE,
    ) -> None:
        _require(
            isinstance(pixels_wide, int)
            and not isinstance(pixels_wide, bool)
            and pixels_wide > 0,
            f"Pixels wide must be a positive integer. Got {pixels_wide!r}",
            ValidationError,
        )
        _require(
            isinstance(pixels_tall, int)
            and not isinstance(pixels_tall, bool)
            and pixels_tall > 0,
            f"Pixels tall must be a positive integer. Got {pixels_tall!r}",
            ValidationError,
        )
        _require(
            max_x > min_x,
            f"Min X boundary ({min_x}) must be less than the max X boundary ({max_x})",
            ValidationError,
        )
        _require(
            max_y > min_y,
            f"Min Y boundary ({min_y}) must be less than the max Y boundary ({max_y})",
            ValidationError,
        )

        self.pixels_wide = pixels_wide
        self.pixels_tall = pixels_tall
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y
        # Turtle units per pixel on each axis.
        self.dx = (max_x - min_x) / self.pixels_wide
        self.dy = (max_y - min_y) / self.pixels_tall

        self._style: StrokeStyle = ColorStyle(BLACK)
        self._pic: NDArray[np.uint8] = np.empty(
            (self.pixels_tall, self.pixels_wide, 4), dtype=np.uint8
        )
        self._pic[:, :] = background

        logger.debug(
            "raster canvas %dx%d over x=[%g, %g] y=[%g, %g] (%g x %g units/pixel)",
            self.pixels_wide,
            self.pixels_tall,
            min_x,
            max_x,
            min_y,
            max_y,
            self.dx,
            self.dy,
        )

    # -------------------------
    # Output
    # -------------------------

    @property
    def size(self) -> tuple[int, int]:
        return (self.pixels_wide, self.pixels_tall)

    @property
    def style(self) -> StrokeStyle:
        return self._style

    @property
    def pixels(self) -> NDArray[np.uint8]:
        """Read-only (rows, cols, RGBA) view of the image."""
        view = self._pic.view()
        view.flags.writeable = False
        return view

    def pixel_at(self, col: int, row: int) -> Color:
        if not (0 <= col < self.pixels_wide and 0 <= row < self.pixels_tall):
            raise IndexError(f"Pixel ({col}, {row}) is outside the image")
        r, g, b, a = (int(v) for v in self._pic[row, col])
        return (r, g, b, a)

    # -------------------------
    # Coordinate mapping
    # -------------------------

    def point_to_pixel(self, x: float, y: float) -> Pixel:
        """Return the (col, row) a turtle-space point falls in.

        The result may lie outside the image.
        """
        col = math.floor((x - self.min_x) / self.dx)
        row = math.floor((y - self.min_y) / self.dy)
        # Flip so that larger Y is drawn higher up.
        return col, (self.pixels_tall - 1) - row

    def _plot(self, col: int, row: int, color: Color) -> None:
        if 0 <= col < self.pixels_wide and 0 <= row < self.pixels_tall:
            self._pic[row, col] = color

    # -------------------------
    # Canvas
    # -------------------------

    def set_style(self, style: StrokeStyle) -> None:
        self._style = style

    def draw_line(self, x: float, y: float, angle: float, length: float) -> None:
        x0, y0 = self.point_to_pixel(x, y)
        x1, y1 = self.point_to_pixel(*move_degrees(x, y, angle, length))
        color = self._style.color
        for col, row in bresenham_line(x0, y0, x1, y1):
            self._plot(col, row, color)

    def arc_sample_count(self, radius: float) -> int:
        """Number of points sampled for an arc of the given radius.

        Scales with the radius in pixels, measured on both axes since
        pixels need not be square.
        """
        r = abs(radius)
        radius_pixels_x = math.ceil(r / self.dx) + 1
        radius_pixels_y = math.ceil(r / self.dy) + 1
        return max(radius_pixels_x, radius_pixels_y) * ARC_SAMPLES_PER_RADIUS_PIXEL

    def draw_arc(
        self, x: float, y: float, angle: float, radius: float, degrees: float
    ) -> None:
        # Samples the circle rather than computing exact coverage; very large
        # radii can leave gaps.
        cx, cy = move_degrees(x, y, angle + 90.0, radius)
        degrees = fold_arc_degrees(degrees)
        count = self.arc_sample_count(radius)
        step = degrees / count

        # Direction from the center to the turtle.
        current = angle - 90.0
        color = self._style.color
        for _ in range(count):
            col, row = self.point_to_pixel(*move_degrees(cx, cy, current, radius))
            self._plot(col, row, color)
            current += step
