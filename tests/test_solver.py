import pytest

from colorlines.classic.ball import BallColor
from colorlines.classic.grid import GameGrid
from colorlines.classic.solver import Solver


def fill(grid, cells, color=BallColor.RED):
    for r, c in cells:
        grid.place_ball(r, c, color)


def test_empty_grid_has_no_lines():
    assert Solver(GameGrid()).find_lines() == []


@pytest.mark.parametrize(
    "cells",
    [
        [(0, c) for c in range(2, 7)],
        [(r, 3) for r in range(4, 9)],
        [(i, i) for i in range(5)],
        [(8 - i, i) for i in range(5)],
    ],
)
def test_five_in_a_row_found(cells):
    grid = GameGrid()
    fill(grid, cells)
    assert Solver(grid).find_lines() == sorted(cells)


def test_four_in_a_row_is_not_a_line():
    grid = GameGrid()
    fill(grid, [(2, c) for c in range(4)])
    assert Solver(grid).find_lines() == []


def test_longer_line_found_whole():
    grid = GameGrid()
    cells = [(5, c) for c in range(9)]
    fill(grid, cells)
    assert Solver(grid).find_lines() == cells


def test_different_colour_breaks_line():
    grid = GameGrid()
    fill(grid, [(1, c) for c in range(6)])
    grid.place_ball(1, 2, BallColor.BLUE)
    assert Solver(grid).find_lines() == []


def test_crossing_lines_are_merged_without_duplicates():
    grid = GameGrid()
    row = [(4, c) for c in range(2, 7)]
    col = [(r, 4) for r in range(2, 7)]
    fill(grid, row + col)
    result = Solver(grid).find_lines()
    assert result == sorted(set(row) | set(col))
    assert len(result) == len(set(result))


def test_custom_min_length():
    grid = GameGrid()
    cells = [(0, c) for c in range(3)]
    fill(grid, cells)
    solver = Solver(grid)
    assert solver.find_lines(3) == cells
    assert solver.find_lines(4) == []


def test_only_lines_of_one_colour_counted():
    grid = GameGrid()
    reds = [(7, c) for c in range(5)]
    fill(grid, reds)
    fill(grid, [(0, c) for c in range(4)], BallColor.YELLOW)
    assert Solver(grid).find_lines() == reds