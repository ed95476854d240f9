#!/usr/bin/env python3
import math

import pytest

from turtle_graphics import (
    BoundsCanvas,
    MoveArc,
    MoveForward,
    PopPosition,
    Position,
    PushPosition,
    ReplayError,
    SetStyle,
    StackUnderflowError,
    Turn,
    Turtle,
    color_style,
    move_degrees,
    normalize_degrees,
)


def _angle_diff(a: float, b: float) -> float:
    """Smallest signed difference between two headings, in degrees."""
    return (a - b + 180.0) % 360.0 - 180.0


def _replay(t: Turtle) -> Position:
    t.render_to_canvas(BoundsCanvas())
    return t.position


class TestGeometry:
    def test_move_along_axes(self) -> None:
        x, y = move_degrees(0, 0, 0, 2)
        assert x == pytest.approx(2)
        assert y == pytest.approx(0)

        x, y = move_degrees(1, 1, 90, 3)
        assert x == pytest.approx(1, abs=1e-12)
        assert y == pytest.approx(4)

        x, y = move_degrees(0, 0, 180, 1)
        assert x == pytest.approx(-1)
        assert y == pytest.approx(0, abs=1e-12)

    def test_move_diagonal(self) -> None:
        x, y = move_degrees(0, 0, 45, math.sqrt(2))
        assert x == pytest.approx(1)
        assert y == pytest.approx(1)

    def test_negative_distance_moves_backwards(self) -> None:
        x, y = move_degrees(0, 0, 0, -2)
        assert x == pytest.approx(-2)

    def test_normalize_is_non_negative(self) -> None:
        # Python's % takes the sign of the divisor.
        assert normalize_degrees(-90) == pytest.approx(270)
        assert normalize_degrees(-450) == pytest.approx(270)
        assert normalize_degrees(725) == pytest.approx(5)
        assert normalize_degrees(360) == 0
        assert normalize_degrees(0) == 0

    def test_normalize_never_reaches_360(self) -> None:
        # -1e-17 % 360 rounds to 360.0.
        assert normalize_degrees(-1e-17) == 0.0
        for angle in (-1e-17, -1e-300, -360.0, 359.999999):
            assert 0 <= normalize_degrees(angle) < 360


class TestBuilding:
    def test_builder_records_in_order(self) -> None:
        style = color_style("#ff0000")
        t = Turtle()
        t.move_forward(1)
        t.turn(90)
        t.set_style(style)
        t.move_arc(0.5, 180)
        t.push_position()
        t.pop_position()

        assert len(t) == 6
        assert t.instructions == (
            MoveForward(1.0),
            Turn(90.0),
            SetStyle(style),
            MoveArc(0.5, 180.0),
            PushPosition(),
            PopPosition(),
        )

    def test_building_never_fails(self) -> None:
        # Unbalanced pops only fail once replayed.
        t = Turtle()
        t.pop_position()
        t.pop_position()
        assert len(t) == 2

    def test_instructions_view_is_immutable(self) -> None:
        t = Turtle()
        t.move_forward(1)
        assert isinstance(t.instructions, tuple)

    def test_extend(self) -> None:
        t = Turtle()
        t.extend([Turn(45), MoveForward(2)])
        assert t.instructions == (Turn(45), MoveForward(2))

    def test_extend_rejects_non_instructions(self) -> None:
        t = Turtle()
        with pytest.raises(TypeError):
            t.extend([Turn(45), "F"])  # type: ignore[list-item]

    def test_descriptions(self) -> None:
        assert str(MoveForward(1)) == "Move forward by 1.000000 units"
        assert str(Turn(-30)) == "Turn by -30.000000 degrees"
        assert str(MoveArc(0.25, 90)) == (
            "Move 90.000000 degrees along arc radius 0.250000"
        )
        assert str(PushPosition()) == "Push position"
        assert str(PopPosition()) == "Pop position"
        assert "#ff0000" in str(SetStyle(color_style("#ff0000")))


class TestMovement:
    def test_turn_then_forward(self) -> None:
        t = Turtle()
        t.turn(90)
        t.move_forward(1)
        p = _replay(t)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(1)
        assert p.angle == pytest.approx(90)

    def test_forward_keeps_heading(self) -> None:
        t = Turtle()
        t.turn(30)
        t.move_forward(5)
        p = _replay(t)
        assert p.angle == pytest.approx(30)
        assert p.x == pytest.approx(5 * math.cos(math.radians(30)))
        assert p.y == pytest.approx(2.5)

    def test_negative_turn_wraps_positive(self) -> None:
        t = Turtle()
        t.turn(-90)
        assert _replay(t).angle == pytest.approx(270)

    def test_tiny_negative_turn_stays_below_360(self) -> None:
        t = Turtle()
        t.turn(-1e-17)
        angle = _replay(t).angle
        assert 0 <= angle < 360

    @pytest.mark.parametrize(
        "d1,d2",
        [
            (30, 45),
            (-90, 45),
            (350, 20),
            (-400, 10),
            (720.5, -0.25),
            (123.4, 567.8),
            (-1000, -1000),
        ],
    )
    def test_turns_compose(self, d1: float, d2: float) -> None:
        a = Turtle()
        a.turn(d1)
        a.turn(d2)
        b = Turtle()
        b.turn(d1 + d2)
        assert _angle_diff(_replay(a).angle, _replay(b).angle) == pytest.approx(
            0, abs=1e-9
        )

    def test_set_style_does_not_move(self) -> None:
        t = Turtle()
        t.turn(10)
        t.move_forward(1)
        before = _replay(t)
        t.set_style(color_style("#123456"))
        assert _replay(t) == before


class TestArcs:
    def test_quarter_arc_left(self) -> None:
        # Center is one unit to the left, at (0, 1).
        t = Turtle()
        t.move_arc(1, 90)
        p = _replay(t)
        assert p.x == pytest.approx(1)
        assert p.y == pytest.approx(1)
        assert p.angle == pytest.approx(90)

    def test_half_arc_left(self) -> None:
        t = Turtle()
        t.move_arc(1, 180)
        p = _replay(t)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(2)
        assert p.angle == pytest.approx(180)

    def test_half_arc_negative_radius(self) -> None:
        # Center is one unit to the right, at (0, -1).
        t = Turtle()
        t.move_arc(-1, 180)
        p = _replay(t)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(-2)
        assert p.angle == pytest.approx(180)

    def test_arc_from_rotated_heading(self) -> None:
        # Facing +Y the left-hand center is at (-1, 0); a quarter turn ends
        # at (-1, 1) facing -X.
        t = Turtle()
        t.turn(90)
        t.move_arc(1, 90)
        p = _replay(t)
        assert p.x == pytest.approx(-1)
        assert p.y == pytest.approx(1)
        assert p.angle == pytest.approx(180)

    @pytest.mark.parametrize("radius", [0.25, -0.25, 3.0, -7.5, 1e-3])
    def test_full_circle_returns_home(self, radius: float) -> None:
        t = Turtle()
        t.turn(37)
        t.move_forward(2)
        start = _replay(t)

        t.move_arc(radius, 360)
        end = _replay(t)
        assert end.x == pytest.approx(start.x, abs=1e-9)
        assert end.y == pytest.approx(start.y, abs=1e-9)
        assert _angle_diff(end.angle, start.angle) == pytest.approx(0, abs=1e-9)


class TestPositionStack:
    def test_push_pop_round_trip(self) -> None:
        t = Turtle()
        t.turn(30)
        t.move_forward(2)
        before = _replay(t)

        t.push_position()
        t.pop_position()
        assert _replay(t) == before

    def test_pop_restores_after_moves(self) -> None:
        t = Turtle()
        t.move_forward(1)
        t.push_position()
        t.turn(90)
        t.move_forward(3)
        t.move_arc(0.5, 45)
        t.pop_position()
        p = _replay(t)
        assert p == Position(1.0, 0.0, 0.0)

    def test_nested_branches(self) -> None:
        t = Turtle()
        t.push_position()
        t.move_forward(1)
        t.push_position()
        t.turn(90)
        t.pop_position()
        t.pop_position()
        assert _replay(t) == Position()
        assert t.stack_depth == 0

    def test_pop_on_empty_stack_fails(self) -> None:
        t = Turtle()
        t.pop_position()
        with pytest.raises(ReplayError) as excinfo:
            t.render_to_canvas(BoundsCanvas())
        assert isinstance(excinfo.value.__cause__, StackUnderflowError)
        assert t.position == Position(0.0, 0.0, 0.0)

    def test_failed_pop_leaves_pose_unchanged(self) -> None:
        t = Turtle()
        t.turn(45)
        t.move_forward(1)
        t.pop_position()
        with pytest.raises(ReplayError):
            t.render_to_canvas(BoundsCanvas())
        assert t.position.angle == pytest.approx(45)
        assert t.position.x == pytest.approx(math.sqrt(0.5))
        assert t.stack_depth == 0


class _ArcFailsCanvas(BoundsCanvas):
    def draw_arc(
        self, x: float, y: float, angle: float, radius: float, degrees: float
    ) -> None:
        raise RuntimeError("no arcs here")


class TestReplay:
    def test_replay_error_identifies_instruction(self) -> None:
        t = Turtle()
        t.move_forward(1)
        t.turn(90)
        t.pop_position()
        t.move_forward(1)
        with pytest.raises(ReplayError) as excinfo:
            t.render_to_canvas(BoundsCanvas())
        err = excinfo.value
        assert err.index == 3
        assert err.total == 4
        assert err.instruction == PopPosition()
        assert "3/4" in str(err)
        assert "Pop position" in str(err)
        assert "empty stack" in str(err)

    def test_canvas_errors_are_wrapped(self) -> None:
        t = Turtle()
        t.move_forward(2)
        t.move_arc(1, 90)
        t.move_forward(5)
        canvas = _ArcFailsCanvas()
        with pytest.raises(ReplayError) as excinfo:
            t.render_to_canvas(canvas)
        assert excinfo.value.index == 2
        assert isinstance(excinfo.value.__cause__, RuntimeError)
        # Already-drawn geometry is kept; the line after the arc never ran.
        assert canvas.bounds().max_x == pytest.approx(2)

    def test_replay_resets_state(self) -> None:
        t = Turtle()
        t.push_position()
        t.turn(90)
        t.move_forward(1)
        first = _replay(t)
        assert t.stack_depth == 1

        second = _replay(t)
        assert second == first
        assert t.stack_depth == 1

    def test_replay_is_repeatable_on_canvases(self) -> None:
        t = Turtle()
        t.move_arc(-0.5, 270)
        t.move_forward(3)
        a = BoundsCanvas()
        b = BoundsCanvas()
        t.render_to_canvas(a)
        t.render_to_canvas(b)
        assert a.get_extents() == b.get_extents()

    def test_empty_turtle_replays(self) -> None:
        t = Turtle()
        canvas = BoundsCanvas()
        t.render_to_canvas(canvas)
        assert canvas.is_empty
        assert t.position == Position()
