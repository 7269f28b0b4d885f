import random

from colorlines.fiveballs.ball import Ball
from colorlines.fiveballs.grid import Grid
from colorlines.fiveballs.solver import Solver


def board(placements):
    grid = Grid(random.Random(0))
    for n, ((x, y), color) in enumerate(placements, start=1):
        assert grid.place_ball(x, y, Ball(color, n))
    return grid


def line(points, color="red"):
    return [(p, color) for p in points]


def test_horizontal_line_of_five():
    points = [(x, 0) for x in range(5)]
    solver = Solver(board(line(points)))
    assert solver.check_for_lines(2, 0) == sorted(points)
    assert solver.check_for_lines(0, 0) == sorted(points)


def test_vertical_line_of_six():
    points = [(3, y) for y in range(2, 8)]
    assert Solver(board(line(points))).check_for_lines(3, 7) == sorted(points)


def test_down_right_diagonal():
    points = [(i, i) for i in range(1, 6)]
    assert Solver(board(line(points))).check_for_lines(3, 3) == sorted(points)


def test_up_right_diagonal():
    points = [(i, 4 - i) for i in range(5)]
    assert Solver(board(line(points))).check_for_lines(0, 4) == sorted(points)


def test_four_in_a_row_is_not_a_line():
    points = [(x, 4) for x in range(4)]
    assert Solver(board(line(points))).check_for_lines(1, 4) == []


def test_other_colour_breaks_the_line():
    placements = line([(0, 0), (1, 0), (3, 0), (4, 0), (5, 0)]) + [((2, 0), "blue")]
    assert Solver(board(placements)).check_for_lines(4, 0) == []


def test_crossing_lines_are_merged():
    horizontal = [(x, 4) for x in range(2, 7)]
    vertical = [(4, y) for y in range(2, 7) if y != 4]
    expected = sorted(set(horizontal) | set(vertical))
    result = Solver(board(line(horizontal + vertical))).check_for_lines(4, 4)
    assert result == expected
    assert len(result) == len(set(result))


def test_line_not_through_checked_ball_is_ignored():
    placements = line([(x, 0) for x in range(5)]) + [((0, 8), "red")]
    assert Solver(board(placements)).check_for_lines(0, 8) == []


def test_empty_cell_gives_nothing():
    points = [(x, 0) for x in range(5)]
    assert Solver(board(line(points))).check_for_lines(5, 5) == []