"""Two-pass rendering: measure a turtle's drawing, then rasterize it."""

from __future__ import annotations

import logging

from turtle_graphics.bounds import BoundsCanvas, Extents
from turtle_graphics.errors import ValidationError, _require
from turtle_graphics.raster import RasterCanvas
from turtle_graphics.style import WHITE, Color
from turtle_graphics.turtle import Turtle

logger = logging.getLogger(__name__)


def measure(turtle: Turtle) -> Extents:
    """Replay ``turtle`` on a BoundsCanvas and return its padded extents."""
    canvas = BoundsCanvas()
    turtle.render_to_canvas(canvas)
    return canvas.get_extents()


def render_turtle(
    turtle: Turtle, height: int = 1000, background: Color = WHITE
) -> RasterCanvas:
    """Rasterize ``turtle`` into an image ``height`` pixels tall.

    The width follows the drawing's aspect ratio.

    Raises:
        ValidationError: If the drawing has no extent along an axis (for
            example a single horizontal line), or the resulting size is
            not positive.
        ReplayError: If an instruction fails on either pass.
    """
    _require(height > 0, f"Image height must be positive. Got {height}", ValidationError)
    ext = measure(turtle)
    _require(
        ext.width > 0,
        "Drawing has no horizontal extent; can't size the image",
        ValidationError,
    )
    _require(
        ext.height > 0,
        "Drawing has no vertical extent; can't size the image",
        ValidationError,
    )

    width = int(height * (ext.width / ext.height))
    logger.debug("rendering %dx%d image for extents %s", width, height, ext)

    canvas = RasterCanvas(
        width,
        height,
        ext.min_x,
        ext.min_y,
        ext.max_x,
        ext.max_y,
        background=background,
    )
    turtle.render_to_canvas(canvas)
    return canvas
