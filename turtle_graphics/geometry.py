"""Angle helpers shared by the instructions and every canvas.

Angles are in degrees, measured counter-clockwise from +X
(0 = +X, 90 = +Y).
"""

from __future__ import annotations

import math

Point = tuple[float, float]


def move_degrees(x: float, y: float, angle_deg: float, distance: float) -> Point:
    """Return the point ``distance`` units from (x, y) along ``angle_deg``."""
    rad = math.radians(angle_deg)
    return (x + math.cos(rad) * distance, y + math.sin(rad) * distance)


def normalize_degrees(angle: float) -> float:
    """Fold an angle into [0, 360).

    Python's float ``%`` takes the sign of the divisor, so negative angles
    come back positive: -90 -> 270. A tiny negative value rounds up to
    360.0 and is reported as 0.0.
    """
    angle %= 360.0
    if angle >= 360.0:
        return 0.0
    return angle
