"""Detection of straight lines of same-coloured balls."""

from __future__ import annotations

from colorlines.classic.ball import BallColor
from colorlines.classic.grid import Cell, GameGrid

# Right, down, down-right and up-right: every line is found from one end.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


class Solver:
    """Finds every ball that is part of a long enough line."""

    def __init__(self, grid: GameGrid) -> None:
        self.grid = grid

    def _run(self, row: int, col: int, dr: int, dc: int, color: BallColor) -> list[Cell]:
        run = [(row, col)]
        r, c = row + dr, col + dc
        while (
            0 <= r < self.grid.height
            and 0 <= c < self.grid.width
            and self.grid.ball(r, c).color is color
        ):
            run.append((r, c))
            r += dr
            c += dc
        return run

    def find_lines(self, min_length: int = 5) -> list[Cell]:
        """Return the sorted cells of all lines of at least ``min_length`` balls."""
        found: set[Cell] = set()
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                color = self.grid.ball(row, col).color
                if color is BallColor.EMPTY:
                    continue
                for dr, dc in _DIRECTIONS:
                    run = self._run(row, col, dr, dc, color)
                    if len(run) >= min_length:
                        found.update(run)
        return sorted(found)