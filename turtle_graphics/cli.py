"""Command-line access to turtle programs.

Run:
  turtle-graphics validate program.json
  turtle-graphics extents program.json
  turtle-graphics preview program.json --height 24
  turtle-graphics --help
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

import numpy as np

from turtle_graphics.bounds import BoundsCanvas
from turtle_graphics.errors import ConfigError, TurtleGraphicsError
from turtle_graphics.program import load_program
from turtle_graphics.render import render_turtle

DEFAULT_PREVIEW_HEIGHT = 24

HELP_EPILOG = r"""
PROGRAM FILES

A program is a JSON object:

  name: string (optional)
      A human-readable title.

  instructions: array (required)
      The turtle's instructions, in order. Each is an object with a "type":

        {"type": "forward", "distance": <number>}
            Draw a line forward.
        {"type": "turn", "degrees": <number>}
            Turn left (negative turns right).
        {"type": "arc", "radius": <number>, "degrees": <number>}
            Travel along a circle whose center is radius units to the left
            (negative radius: to the right).
        {"type": "style", "color": "#rrggbb" | [r, g, b] | [r, g, b, a]}
            Change the stroke color.
        {"type": "push"}
        {"type": "pop"}
            Save / restore position and heading.

  render: object (optional)
      render.height: integer > 0 (default 1000)
      render.background: color (default "#ffffff")

The turtle starts at (0, 0) facing +X; +Y is up.

Example

    {
      "name": "Y",
      "instructions": [
        {"type": "turn", "degrees": 90},
        {"type": "forward", "distance": 1},
        {"type": "turn", "degrees": -30},
        {"type": "push"},
        {"type": "forward", "distance": 1},
        {"type": "pop"},
        {"type": "turn", "degrees": 60},
        {"type": "forward", "distance": 1}
      ]
    }
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="turtle-graphics",
        description="Measure and rasterize turtle-graphics programs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    pv = sub.add_parser(
        "validate",
        help="Validate a program and print a brief summary.",
    )
    pv.add_argument("program", help="Path to the program JSON.")

    pe = sub.add_parser(
        "extents",
        help="Print the program's extents as: min_x min_y max_x max_y.",
    )
    pe.add_argument("program", help="Path to the program JSON.")

    pp = sub.add_parser(
        "preview",
        help="Rasterize the program at a small size and print it as text.",
    )
    pp.add_argument("program", help="Path to the program JSON.")
    pp.add_argument(
        "--height",
        type=int,
        default=DEFAULT_PREVIEW_HEIGHT,
        help=f"Rows of output (default {DEFAULT_PREVIEW_HEIGHT}).",
    )
    pp.add_argument("--fill", default="#", help="Character for drawn pixels.")
    pp.add_argument("--empty", default=".", help="Character for background.")

    return p


# -------------------------
# Commands
# -------------------------


def cmd_validate(program_path: str) -> None:
    program = load_program(program_path)
    turtle = program.build_turtle()

    canvas = BoundsCanvas()
    turtle.render_to_canvas(canvas)

    kinds = Counter(type(n).__name__ for n in program.instructions)
    print(f"name: {program.name}")
    print(f"instructions: {len(program.instructions)}")
    for kind, count in sorted(kinds.items()):
        print(f"  {kind}: {count}")
    if canvas.is_empty:
        print("extents: (nothing drawn)")
    else:
        b = canvas.bounds()
        print(f"extents: x=[{b.min_x:g}, {b.max_x:g}] y=[{b.min_y:g}, {b.max_y:g}]")
    print(f"final {turtle.position}")


def cmd_extents(program_path: str) -> None:
    program = load_program(program_path)
    canvas = BoundsCanvas()
    program.build_turtle().render_to_canvas(canvas)
    print(" ".join(f"{v:g}" for v in canvas.get_extents()))


def cmd_preview(program_path: str, height: int, fill: str, empty: str) -> None:
    program = load_program(program_path)
    canvas = render_turtle(
        program.build_turtle(), height=height, background=program.background
    )
    drawn = np.any(canvas.pixels != np.asarray(program.background, np.uint8), axis=2)
    for row in drawn:
        print("".join(fill if cell else empty for cell in row))


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "validate":
            cmd_validate(args.program)
        elif args.cmd == "extents":
            cmd_extents(args.program)
        elif args.cmd == "preview":
            cmd_preview(args.program, args.height, args.fill, args.empty)
        else:
            raise AssertionError("unreachable")
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    except TurtleGraphicsError as e:
        print(f"Drawing error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
