"""The interface every drawing backend implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from turtle_graphics.style import StrokeStyle


class Canvas(ABC):
    """
    A drawing target working in the turtle's floating-point coordinates.

    The usual flow is to replay a turtle on a BoundsCanvas to learn the
    extents of the drawing, then replay it on a RasterCanvas sized from
    those extents.

    All methods receive the turtle's pose *before* the move they draw.
    They return nothing and raise on failure.
    """

    @abstractmethod
    def set_style(self, style: StrokeStyle) -> None:
        """Set the style used for subsequent strokes."""
        raise NotImplementedError

    @abstractmethod
    def draw_line(self, x: float, y: float, angle: float, length: float) -> None:
        """Draw ``length`` units from (x, y) heading ``angle`` degrees."""
        raise NotImplementedError

    @abstractmethod
    def draw_arc(
        self, x: float, y: float, angle: float, radius: float, degrees: float
    ) -> None:
        """
        Draw an arc starting at the turtle's position.

        Args:
            x, y: The turtle's position.
            angle: The turtle's heading, in degrees.
            radius: Distance to the turtle's left of the circle's center.
                A negative radius puts the center on the right.
            degrees: How far around the circle the turtle travels.
        """
        raise NotImplementedError
