from __future__ import annotations

from math import isnan

import pytest

from turtletrace.core.commands import (
    Color,
    EndFill,
    Pen,
    SetHeading,
    SetXY,
    StartFill,
    Translate,
)
from turtletrace.core.errors import InvalidArgument
from turtletrace.core.recorder import (
    DEFAULT_TURTLE,
    back,
    clean,
    color,
    default_turtle,
    end_fill,
    forward,
    home,
    left,
    pendown,
    penup,
    right,
    setheading,
    setxy,
    start_fill,
)
from turtletrace.core.state import TurtleState

EPS = 1e-9


def test_fresh_state_is_home(turtle: TurtleState) -> None:
    assert turtle.position() == (0.0, 0.0)
    assert turtle.heading() == 90.0
    assert turtle.isdown() is True
    assert turtle.filling() is False
    assert turtle.color == (0, 0, 0)
    assert turtle.commands == []


def test_square_walk_scenario(turtle: TurtleState) -> None:
    forward(100, turtle)
    right(90, turtle)
    forward(100, turtle)
    color([255, 0, 0], turtle)

    assert abs(turtle.x - 100.0) < EPS
    assert abs(turtle.y - 100.0) < EPS
    assert turtle.angle == 0.0
    assert turtle.color == (255, 0, 0)

    c0, c1, c2, c3 = turtle.commands
    assert isinstance(c0, Translate)
    assert abs(c0.dx) < EPS and abs(c0.dy - 100.0) < EPS
    assert c1 == SetHeading(0.0)
    assert isinstance(c2, Translate)
    assert abs(c2.dx - 100.0) < EPS and abs(c2.dy) < EPS
    assert c3 == Color((255, 0, 0))


def test_first_move_goes_up(turtle: TurtleState) -> None:
    forward(100, turtle)
    assert abs(turtle.x) < EPS
    assert abs(turtle.y - 100.0) < EPS


def test_operations_return_same_handle(turtle: TurtleState) -> None:
    assert forward(5, turtle) is turtle
    assert right(10, turtle) is turtle
    assert penup(turtle) is turtle
    assert home(turtle) is turtle
    assert clean(turtle) is turtle
    assert forward(1, left(90, forward(1, turtle))) is turtle


@pytest.mark.parametrize(
    "turn, expected",
    [(360, 90.0), (-90, 180.0), (90, 0.0), (180, 270.0), (450, 0.0), (-630, 0.0)],
)
def test_right_normalizes(turtle: TurtleState, turn: float, expected: float) -> None:
    right(turn, turtle)
    assert turtle.angle == expected
    assert turtle.commands == [SetHeading(expected)]


def test_left_is_negated_right(turtle: TurtleState) -> None:
    left(90, turtle)
    assert turtle.angle == 180.0
    assert turtle.commands == [SetHeading(180.0)]


def test_back_moves_opposite(turtle: TurtleState) -> None:
    back(10, turtle)
    assert abs(turtle.x) < EPS
    assert abs(turtle.y + 10.0) < EPS
    (cmd,) = turtle.commands
    assert isinstance(cmd, Translate)
    assert abs(cmd.dy + 10.0) < EPS


def test_setheading_stores_value_unnormalized(turtle: TurtleState) -> None:
    setheading(725.0, turtle)
    assert turtle.angle == 725.0
    assert turtle.commands == [SetHeading(725.0)]


def test_setxy_keeps_heading(turtle: TurtleState) -> None:
    right(45, turtle)
    setxy(3.0, -4.0, turtle)
    assert turtle.position() == (3.0, -4.0)
    assert turtle.angle == 45.0
    assert turtle.commands[-1] == SetXY(3.0, -4.0)


def test_pen_toggles_are_logged(turtle: TurtleState) -> None:
    penup(turtle)
    assert turtle.pen is False
    pendown(turtle)
    assert turtle.pen is True
    assert turtle.commands == [Pen(False), Pen(True)]


def test_fill_commands_append_without_dedup(turtle: TurtleState) -> None:
    start_fill(turtle)
    start_fill(turtle)
    end_fill(turtle)
    end_fill(turtle)
    assert turtle.fill is False
    assert turtle.commands == [StartFill(), StartFill(), EndFill(), EndFill()]


def test_home_appends_setxy_then_setheading(turtle: TurtleState) -> None:
    forward(50, right(30, turtle))
    home(turtle)
    assert turtle.position() == (0.0, 0.0)
    assert turtle.angle == 90.0
    assert turtle.commands[-2:] == [SetXY(0.0, 0.0), SetHeading(90.0)]


def test_clean_only_drops_log(turtle: TurtleState) -> None:
    forward(10, right(30, turtle))
    penup(turtle)
    start_fill(turtle)
    color((1, 2, 3), turtle)
    before = turtle.snapshot()
    old_log = turtle.commands

    clean(turtle)
    assert turtle.commands == []
    assert turtle.snapshot() == before
    # a previously obtained log is not mutated by clean
    assert len(old_log) == 5

    clean(turtle)
    assert turtle.commands == []
    assert turtle.snapshot() == before


@pytest.mark.parametrize(
    "bad",
    [
        (1, 2),
        [1, 2, 3, 4],
        [],
        "abc",
        7,
        None,
        {1, 2, 3},
        ("r", "g", "b"),
        (None, None, None),
        (1.5, 2, 3),
        (True, 0, 0),
        (0, 0, 256),
        (-1, 0, 0),
    ],
)
def test_color_rejects_bad_input(turtle: TurtleState, bad: object) -> None:
    forward(1, turtle)
    before = turtle.snapshot()
    log_before = list(turtle.commands)
    with pytest.raises(InvalidArgument):
        color(bad, turtle)  # type: ignore[arg-type]
    assert turtle.snapshot() == before
    assert turtle.commands == log_before
    assert turtle.snapshot().color == (0, 0, 0)


def test_color_accepts_channel_bounds(turtle: TurtleState) -> None:
    color([0, 255, 128], turtle)
    assert turtle.color == (0, 255, 128)
    assert turtle.snapshot().color == (0, 255, 128)


def test_invalid_argument_is_value_error() -> None:
    assert issubclass(InvalidArgument, ValueError)


def test_nan_propagates_until_reset(turtle: TurtleState) -> None:
    forward(float("nan"), turtle)
    assert isnan(turtle.x) and isnan(turtle.y)
    right(float("nan"), turtle)
    assert isnan(turtle.angle)
    setxy(1.0, 2.0, setheading(90.0, turtle))
    assert turtle.position() == (1.0, 2.0)
    assert turtle.angle == 90.0


def test_default_turtle_is_used_when_omitted() -> None:
    assert default_turtle() is DEFAULT_TURTLE
    n = len(DEFAULT_TURTLE.commands)
    assert penup() is DEFAULT_TURTLE
    assert pendown() is DEFAULT_TURTLE
    assert DEFAULT_TURTLE.commands[n:] == [Pen(False), Pen(True)]
    clean()
    assert DEFAULT_TURTLE.commands == []
