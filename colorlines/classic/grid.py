"""The rectangular playing field of the classic game."""

from __future__ import annotations

import random

from colorlines.classic.ball import Ball, BallColor

PLAYABLE_COLORS: tuple[BallColor, ...] = (
    BallColor.RED,
    BallColor.GREEN,
    BallColor.BLUE,
    BallColor.YELLOW,
    BallColor.PURPLE,
)

Cell = tuple[int, int]


class GameGrid:
    """A ``height`` x ``width`` grid of balls addressed by (row, column)."""

    def __init__(
        self,
        width: int = 9,
        height: int = 9,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._balls = [[Ball() for _ in range(width)] for _ in range(height)]

    def _cell(self, row: int, col: int) -> Ball:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self._balls[row][col]

    def ball(self, row: int, col: int) -> Ball:
        """Return the ball stored at the given cell."""
        return self._cell(row, col)

    def place_ball(self, row: int, col: int, color: BallColor) -> None:
        """Put a ball of ``color`` into the cell, replacing what was there."""
        self._cell(row, col).color = color

    def remove_ball(self, row: int, col: int) -> None:
        """Empty the cell."""
        self._cell(row, col).color = BallColor.EMPTY

    def is_cell_empty(self, row: int, col: int) -> bool:
        """Return True when the cell holds no ball."""
        return self._cell(row, col).is_empty()

    def _empty_cells(self) -> list[Cell]:
        return [
            (r, c)
            for r, line in enumerate(self._balls)
            for c, ball in enumerate(line)
            if ball.is_empty()
        ]

    def add_random_balls(self, count: int) -> list[Cell]:
        """Drop up to ``count`` random balls on random empty cells.

        Returns the cells that received a ball.
        """
        empty = self._empty_cells()
        self._rng.shuffle(empty)
        added = empty[: max(0, min(count, len(empty)))]
        for row, col in added:
            self.place_ball(row, col, self._rng.choice(PLAYABLE_COLORS))
        return added

    def is_full(self) -> bool:
        """Return True when no cell is empty."""
        return not any(ball.is_empty() for line in self._balls for ball in line)

    def reset(self) -> None:
        """Empty every cell."""
        for line in self._balls:
            for ball in line:
                ball.color = BallColor.EMPTY