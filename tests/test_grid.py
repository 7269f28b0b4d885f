import random

import pytest

from colorlines.classic.ball import BallColor
from colorlines.classic.grid import GameGrid


def make_grid(seed=1, width=9, height=9):
    return GameGrid(width, height, random.Random(seed))


def test_default_size_and_empty():
    grid = GameGrid()
    assert (grid.width, grid.height) == (9, 9)
    assert all(
        grid.is_cell_empty(r, c) for r in range(grid.height) for c in range(grid.width)
    )
    assert grid.is_full() is False


def test_place_and_remove_ball():
    grid = make_grid()
    grid.place_ball(2, 3, BallColor.GREEN)
    assert grid.ball(2, 3).color is BallColor.GREEN
    assert grid.is_cell_empty(2, 3) is False
    grid.remove_ball(2, 3)
    assert grid.is_cell_empty(2, 3) is True


def test_out_of_bounds_raises():
    grid = make_grid(width=4, height=3)
    with pytest.raises(IndexError):
        grid.ball(3, 0)
    with pytest.raises(IndexError):
        grid.place_ball(0, 4, BallColor.RED)
    with pytest.raises(IndexError):
        grid.is_cell_empty(-1, 0)


def test_add_random_balls_places_distinct_coloured_balls():
    grid = make_grid()
    added = grid.add_random_balls(5)
    assert len(added) == 5
    assert len(set(added)) == 5
    for r, c in added:
        assert grid.ball(r, c).color is not BallColor.EMPTY
    occupied = [
        (r, c)
        for r in range(grid.height)
        for c in range(grid.width)
        if not grid.is_cell_empty(r, c)
    ]
    assert sorted(occupied) == sorted(added)


def test_add_random_balls_only_uses_empty_cells():
    grid = make_grid(width=3, height=3)
    grid.place_ball(0, 0, BallColor.RED)
    added = grid.add_random_balls(20)
    assert (0, 0) not in added
    assert len(added) == 8
    assert grid.ball(0, 0).color is BallColor.RED
    assert grid.is_full() is True


def test_add_random_balls_on_full_grid_adds_nothing():
    grid = make_grid(width=2, height=2)
    grid.add_random_balls(4)
    assert grid.is_full() is True
    assert grid.add_random_balls(3) == []


def test_same_seed_same_result():
    a = make_grid(seed=42)
    b = make_grid(seed=42)
    added_a = a.add_random_balls(7)
    added_b = b.add_random_balls(7)
    assert added_a == added_b
    assert [a.ball(r, c).color for r, c in added_a] == [
        b.ball(r, c).color for r, c in added_b
    ]


def test_reset_empties_grid():
    grid = make_grid(width=3, height=3)
    grid.add_random_balls(9)
    grid.reset()
    assert grid.is_full() is False
    assert all(grid.is_cell_empty(r, c) for r in range(3) for c in range(3))