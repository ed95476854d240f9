"""Turtle graphics: record a path once, replay it on any canvas.

    t = Turtle()
    t.turn(90)
    t.move_forward(1)
    t.move_arc(0.25, 180)
    image = render_turtle(t, height=500).pixels
"""

from turtle_graphics.bounds import BoundsCanvas, Extents
from turtle_graphics.canvas import Canvas
from turtle_graphics.errors import (
    ConfigError,
    ReplayError,
    StackUnderflowError,
    TurtleGraphicsError,
    ValidationError,
)
from turtle_graphics.geometry import move_degrees, normalize_degrees
from turtle_graphics.instructions import (
    Instruction,
    MoveArc,
    MoveForward,
    PopPosition,
    PushPosition,
    SetStyle,
    Turn,
)
from turtle_graphics.program import Program, load_program, parse_program
from turtle_graphics.raster import RasterCanvas, bresenham_line
from turtle_graphics.render import measure, render_turtle
from turtle_graphics.style import BLACK, WHITE, ColorStyle, StrokeStyle, color_style
from turtle_graphics.turtle import Position, Turtle

__all__ = [
    "BLACK",
    "BoundsCanvas",
    "Canvas",
    "ColorStyle",
    "ConfigError",
    "Extents",
    "Instruction",
    "MoveArc",
    "MoveForward",
    "PopPosition",
    "Position",
    "Program",
    "PushPosition",
    "RasterCanvas",
    "ReplayError",
    "SetStyle",
    "StackUnderflowError",
    "StrokeStyle",
    "Turn",
    "Turtle",
    "TurtleGraphicsError",
    "ValidationError",
    "WHITE",
    "bresenham_line",
    "color_style",
    "load_program",
    "measure",
    "move_degrees",
    "normalize_degrees",
    "parse_program",
    "render_turtle",
]
