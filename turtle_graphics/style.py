"""Stroke styles.

Every canvas accepts any object with a ``color`` attribute. Backends that
understand more (stroke width, dashes, ...) can accept richer objects
without the core contract changing.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from turtle_graphics.errors import ConfigError, _require

# RGBA, each channel 0..255.
Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)


class StrokeStyle(Protocol):
    @property
    def color(self) -> Color: ...


@dataclass(frozen=True)
class ColorStyle:
    color: Color = BLACK

    def __str__(self) -> str:
        return "color " + format_color(self.color)


def color_style(color: Color | str | Sequence[int]) -> ColorStyle:
    """Return a basic style that only sets the stroke color."""
    return ColorStyle(color=parse_color(color, "color"))


def format_color(c: Color) -> str:
    r, g, b, a = c
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def parse_color(x: Any, path: str) -> Color:
    """Parse ``#rgb``, ``#rrggbb``, ``#rrggbbaa`` or a 3/4 item int list."""
    if isinstance(x, str):
        s = x.strip()
        _require(s.startswith("#"), f"{path} must start with '#'")
        digits = s[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        _require(
            len(digits) in (6, 8),
            f"{path} must look like #rgb, #rrggbb or #rrggbbaa; got {x!r}",
        )
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ConfigError(f"{path} has invalid hex digits: {x!r}") from e
    elif isinstance(x, (list, tuple)):
        _require(len(x) in (3, 4), f"{path} must have 3 or 4 components")
        channels = []
        for i, v in enumerate(x):
            _require(
                isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255,
                f"{path}[{i}] must be an integer in 0..255",
            )
            channels.append(int(v))
    else:
        raise ConfigError(f"{path} must be a color string or list")

    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)
