import pytest

from colorlines.fiveballs.app import CELL_SIZE, ball_style, cell_from_point
from colorlines.fiveballs.grid import GRID_SIZE


def test_cell_from_point_origin():
    assert cell_from_point(0, 0, CELL_SIZE, GRID_SIZE) == (0, 0)


def test_cell_from_point_cell_boundaries():
    assert cell_from_point(CELL_SIZE - 1, 0, CELL_SIZE, GRID_SIZE) == (0, 0)
    assert cell_from_point(CELL_SIZE, 0, CELL_SIZE, GRID_SIZE) == (1, 0)
    assert cell_from_point(0, 2 * CELL_SIZE + 3, CELL_SIZE, GRID_SIZE) == (0, 2)


def test_cell_from_point_fractional_coordinates():
    assert cell_from_point(
        3 * CELL_SIZE + 0.9, 4 * CELL_SIZE + 0.2, CELL_SIZE, GRID_SIZE
    ) == (3, 4)


@pytest.mark.parametrize(
    "x, y",
    [
        (GRID_SIZE * CELL_SIZE, 0),
        (0, GRID_SIZE * CELL_SIZE),
        (-CELL_SIZE, 0),
    ],
)
def test_cell_from_point_outside(x, y):
    assert cell_from_point(x, y, CELL_SIZE, GRID_SIZE) is None


def test_cell_from_point_last_cell():
    last = GRID_SIZE * CELL_SIZE - 1
    assert cell_from_point(last, last, CELL_SIZE, GRID_SIZE) == (
        GRID_SIZE - 1,
        GRID_SIZE - 1,
    )


def test_ball_style_highlighted():
    style = ball_style(True)
    assert style.opacity == 0.7
    assert style.scale == 1.1
    assert style.z == 1


def test_ball_style_normal():
    style = ball_style(False)
    assert (style.opacity, style.scale, style.z) == (1.0, 1.0, 0)


def test_highlighted_ball_is_drawn_above():
    assert ball_style(True).z > ball_style(False).z