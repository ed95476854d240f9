"""The turtle: a recorded list of instructions plus the state to replay them.

Build a path with the ``move_forward``/``turn``/... methods, then call
``render_to_canvas`` once per canvas. Every replay starts from (0, 0)
facing +X with an empty position stack.

A Turtle is not safe to replay from several threads at once; its pose is
updated in place during a replay.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from turtle_graphics.canvas import Canvas
from turtle_graphics.errors import ReplayError, StackUnderflowError
from turtle_graphics.geometry import move_degrees, normalize_degrees
from turtle_graphics.instructions import (
    INSTRUCTION_TYPES,
    Instruction,
    MoveArc,
    MoveForward,
    PopPosition,
    PushPosition,
    SetStyle,
    Turn,
)
from turtle_graphics.style import StrokeStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0

    def __str__(self) -> str:
        return (
            f"Turtle position: ({self.x:f}, {self.y:f}), "
            f"facing {self.angle:f} degrees"
        )


ORIGIN = Position()


class Turtle:
    def __init__(self) -> None:
        self._position = ORIGIN
        self._stack: list[Position] = []
        self._instructions: list[Instruction] = []

    def __len__(self) -> int:
        return len(self._instructions)

    def __repr__(self) -> str:
        return f"<Turtle instructions={len(self._instructions)} {self._position}>"

    @property
    def position(self) -> Position:
        return self._position

    @property
    def stack_depth(self) -> int:
        return len(self._stack)

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        return tuple(self._instructions)

    # -------------------------
    # Building
    # -------------------------

    def move_forward(self, distance: float) -> None:
        self._instructions.append(MoveForward(float(distance)))

    def turn(self, degrees: float) -> None:
        """Turn left by ``degrees`` (negative turns right)."""
        self._instructions.append(Turn(float(degrees)))

    def set_style(self, style: StrokeStyle) -> None:
        self._instructions.append(SetStyle(style))

    def move_arc(self, radius: float, degrees: float) -> None:
        """Move ``degrees`` along a circle centered ``radius`` to the left."""
        self._instructions.append(MoveArc(float(radius), float(degrees)))

    def push_position(self) -> None:
        """Save the current position and heading on the position stack."""
        self._instructions.append(PushPosition())

    def pop_position(self) -> None:
        """Restore the most recently pushed position and heading."""
        self._instructions.append(PopPosition())

    def extend(self, instructions: Iterable[Instruction]) -> None:
        for n in instructions:
            if not isinstance(n, INSTRUCTION_TYPES):
                raise TypeError(f"Not a turtle instruction: {n!r}")
            self._instructions.append(n)

    # -------------------------
    # Replay
    # -------------------------

    def reset(self) -> None:
        self._position = ORIGIN
        self._stack.clear()

    def render_to_canvas(self, canvas: Canvas) -> None:
        """Replay every instruction onto ``canvas``.

        Raises:
            ReplayError: On the first instruction that fails. Whatever was
                already drawn stays on the canvas.
        """
        self.reset()
        total = len(self._instructions)
        logger.debug("replaying %d instructions on %s", total, type(canvas).__name__)
        for i, n in enumerate(self._instructions, start=1):
            try:
                self._apply(n, canvas)
            except Exception as e:
                raise ReplayError(i, total, n) from e
        logger.debug("replay finished at %s", self._position)

    def _apply(self, n: Instruction, canvas: Canvas) -> None:
        p = self._position

        if isinstance(n, MoveForward):
            canvas.draw_line(p.x, p.y, p.angle, n.distance)
            x, y = move_degrees(p.x, p.y, p.angle, n.distance)
            self._position = Position(x, y, p.angle)
            return

        if isinstance(n, Turn):
            self._position = Position(p.x, p.y, normalize_degrees(p.angle + n.degrees))
            return

        if isinstance(n, SetStyle):
            canvas.set_style(n.style)
            return

        if isinstance(n, MoveArc):
            canvas.draw_arc(p.x, p.y, p.angle, n.radius, n.degrees)
            # Seen from the circle's center the turtle starts at angle - 90;
            # travelling `degrees` around it puts it at degrees + angle - 90.
            # Its heading turns by the same amount.
            cx, cy = move_degrees(p.x, p.y, p.angle + 90.0, n.radius)
            x, y = move_degrees(cx, cy, n.degrees + (p.angle - 90.0), n.radius)
            self._position = Position(x, y, normalize_degrees(p.angle + n.degrees))
            return

        if isinstance(n, PushPosition):
            self._stack.append(p)
            return

        if isinstance(n, PopPosition):
            if not self._stack:
                raise StackUnderflowError(
                    "Can't pop the turtle's position: empty stack"
                )
            self._position = self._stack.pop()
            return

        raise TypeError(f"Unknown instruction type {type(n).__name__}")
