"""Loading turtle programs from JSON.

A program file lists the instructions to record plus optional render
settings:

    {
      "name": "basic Y",
      "instructions": [
        {"type": "turn", "degrees": 90},
        {"type": "forward", "distance": 1},
        {"type": "push"},
        {"type": "arc", "radius": 0.25, "degrees": 180},
        {"type": "pop"},
        {"type": "style", "color": "#ff0000"}
      ],
      "render": {"height": 1000, "background": "#ffffff"}
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, cast

from turtle_graphics.errors import ConfigError, _require
from turtle_graphics.instructions import (
    Instruction,
    MoveArc,
    MoveForward,
    PopPosition,
    PushPosition,
    SetStyle,
    Turn,
)
from turtle_graphics.style import WHITE, Color, ColorStyle, parse_color
from turtle_graphics.turtle import Turtle

DEFAULT_HEIGHT = 1000


# -------------------------
# Validation helpers
# -------------------------


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    return float(x)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


def _as_list(x: Any, path: str) -> list[Any]:
    _require(isinstance(x, list), f"{path} must be an array")
    return cast(list[Any], x)


# -------------------------
# Program model
# -------------------------


@dataclass(frozen=True)
class Program:
    name: str
    instructions: tuple[Instruction, ...]
    height: int = DEFAULT_HEIGHT
    background: Color = WHITE

    def build_turtle(self) -> Turtle:
        t = Turtle()
        t.extend(self.instructions)
        return t


def parse_instruction(obj: Any, path: str) -> Instruction:
    obj = _as_dict(obj, path)
    itype = obj.get("type")
    _require(isinstance(itype, str), f"{path} must have string field 'type'")

    if itype == "forward":
        return MoveForward(_as_float(obj.get("distance"), f"{path}.distance"))
    if itype == "turn":
        return Turn(_as_float(obj.get("degrees"), f"{path}.degrees"))
    if itype == "arc":
        return MoveArc(
            radius=_as_float(obj.get("radius"), f"{path}.radius"),
            degrees=_as_float(obj.get("degrees"), f"{path}.degrees"),
        )
    if itype == "style":
        _require("color" in obj, f"{path} must have field 'color'")
        return SetStyle(ColorStyle(parse_color(obj["color"], f"{path}.color")))
    if itype == "push":
        return PushPosition()
    if itype == "pop":
        return PopPosition()

    raise ConfigError(f"Unknown instruction type '{itype}' at {path}")


def parse_program(obj: Any) -> Program:
    obj = _as_dict(obj, "root")

    name = _as_str(obj.get("name", "Turtle"), "name")

    _require("instructions" in obj, "instructions is required")
    raw = _as_list(obj["instructions"], "instructions")
    instructions = tuple(
        parse_instruction(item, f"instructions[{i}]") for i, item in enumerate(raw)
    )

    render = _as_dict(obj.get("render", {}), "render")
    height = _as_int(render.get("height", DEFAULT_HEIGHT), "render.height")
    _require(height > 0, "render.height must be > 0")
    background = WHITE
    if "background" in render:
        background = parse_color(render["background"], "render.background")

    return Program(
        name=name,
        instructions=instructions,
        height=height,
        background=background,
    )


def load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def load_program(path: str) -> Program:
    return parse_program(load_json(path))
