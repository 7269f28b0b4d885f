"""The square board of the five-balls game, addressed by (x, y)."""

from __future__ import annotations

import logging
import random

from colorlines.fiveballs.ball import Ball

log = logging.getLogger(__name__)

GRID_SIZE = 9
COLORS: tuple[str, ...] = (
    "red",
    "blue",
    "green",
    "yellow",
    "purple",
    "pink",
    "brown",
    "turquoise",
)

Point = tuple[int, int]


class Grid:
    """A ``GRID_SIZE`` x ``GRID_SIZE`` board holding :class:`Ball` objects."""

    GRID_SIZE = GRID_SIZE

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._colors = list(COLORS)
        self._cells: list[list[Ball | None]] = []
        self._last_id = 0
        self.initialize()

    @property
    def size(self) -> int:
        """Number of cells along each side."""
        return GRID_SIZE

    def initialize(self) -> None:
        """Empty the board and restart ball numbering."""
        self._cells = [[None] * GRID_SIZE for _ in range(GRID_SIZE)]
        self._last_id = 0

    @staticmethod
    def _inside(x: int, y: int) -> bool:
        return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

    def ball_at(self, x: int, y: int) -> Ball | None:
        """Return the ball at (x, y), or None if the cell is empty or outside."""
        if not self._inside(x, y):
            return None
        return self._cells[x][y]

    def is_cell_empty(self, x: int, y: int) -> bool:
        """Return True for an empty cell inside the board."""
        return self._inside(x, y) and self._cells[x][y] is None

    def place_ball(self, x: int, y: int, ball: Ball | None) -> bool:
        """Put ``ball`` on an empty cell; return False if that is not possible."""
        if ball is None or not self.is_cell_empty(x, y):
            return False
        self._cells[x][y] = ball
        return True

    def remove_ball(self, x: int, y: int) -> Ball | None:
        """Take the ball off (x, y) and return it, or None if there was none."""
        if not self._inside(x, y):
            return None
        ball = self._cells[x][y]
        self._cells[x][y] = None
        return ball

    def empty_cells(self) -> list[Point]:
        """Return every empty cell, column by column."""
        return [
            (x, y)
            for x, column in enumerate(self._cells)
            for y, ball in enumerate(column)
            if ball is None
        ]

    def random_color(self) -> str:
        """Return one of the available colours at random."""
        return self._rng.choice(self._colors)

    def place_random_ball(self, color: str) -> Point | None:
        """Put a new ball of ``color`` on a random empty cell.

        Returns the cell used, or None when the board is full.
        """
        empty = self.empty_cells()
        if not empty:
            return None
        x, y = self._rng.choice(empty)
        self._last_id += 1
        self._cells[x][y] = Ball(color, self._last_id)
        return x, y

    def place_initial_balls(self, count: int) -> None:
        """Drop ``count`` random balls, stopping early if the board fills up."""
        for _ in range(count):
            if self.place_random_ball(self.random_color()) is None:
                log.warning("could not place initial ball, grid might be full")
                break

    def ball_count(self) -> int:
        """Return the number of balls on the board."""
        return sum(ball is not None for column in self._cells for ball in column)

    def available_colors(self) -> list[str]:
        """Return the colours balls can have."""
        return list(self._colors)