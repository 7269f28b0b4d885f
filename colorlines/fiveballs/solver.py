"""Detection of lines of five or more through a given ball."""

from __future__ import annotations

from colorlines.fiveballs.grid import GRID_SIZE, Grid, Point

MIN_LINE = 5
# Horizontal, vertical and the two diagonals.
_AXES = ((1, 0), (0, 1), (1, 1), (1, -1))


class Solver:
    """Finds the balls in lines that pass through a particular cell."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def _walk(self, x: int, y: int, dx: int, dy: int, color: str) -> list[Point]:
        points: list[Point] = []
        x, y = x + dx, y + dy
        while 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE:
            ball = self.grid.ball_at(x, y)
            if ball is None or ball.color != color:
                break
            points.append((x, y))
            x, y = x + dx, y + dy
        return points

    def _scan_axis(self, x: int, y: int, dx: int, dy: int, color: str) -> list[Point]:
        line = [(x, y)]
        line += self._walk(x, y, dx, dy, color)
        line += self._walk(x, y, -dx, -dy, color)
        return line if len(line) >= MIN_LINE else []

    def check_for_lines(self, x: int, y: int) -> list[Point]:
        """Return the sorted cells of every line of five or more through (x, y)."""
        ball = self.grid.ball_at(x, y)
        if ball is None:
            return []
        found: set[Point] = set()
        for dx, dy in _AXES:
            found.update(self._scan_axis(x, y, dx, dy, ball.color))
        return sorted(found)