"""The recorded actions a turtle replays.

Instructions are plain immutable records; the turtle's replay loop decides
what each one does (see ``Turtle._apply``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from turtle_graphics.style import StrokeStyle


@dataclass(frozen=True)
class MoveForward:
    distance: float

    def __str__(self) -> str:
        return f"Move forward by {self.distance:f} units"


@dataclass(frozen=True)
class Turn:
    """Add ``degrees`` to the heading (positive turns left)."""

    degrees: float

    def __str__(self) -> str:
        return f"Turn by {self.degrees:f} degrees"


@dataclass(frozen=True)
class SetStyle:
    style: StrokeStyle

    def __str__(self) -> str:
        return f"Set style ({self.style})"


@dataclass(frozen=True)
class MoveArc:
    """Travel ``degrees`` around a circle whose center is ``radius`` to the left.

    A negative radius puts the center on the turtle's right.
    """

    radius: float
    degrees: float

    def __str__(self) -> str:
        return f"Move {self.degrees:f} degrees along arc radius {self.radius:f}"


@dataclass(frozen=True)
class PushPosition:
    def __str__(self) -> str:
        return "Push position"


@dataclass(frozen=True)
class PopPosition:
    def __str__(self) -> str:
        return "Pop position"


Instruction = Union[MoveForward, Turn, SetStyle, MoveArc, PushPosition, PopPosition]

INSTRUCTION_TYPES: tuple[type, ...] = (
    MoveForward,
    Turn,
    SetStyle,
    MoveArc,
    PushPosition,
    PopPosition,
)
