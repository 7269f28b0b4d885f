"""Reachability of a target cell through empty cells."""

from __future__ import annotations

from collections import deque

from colorlines.classic.grid import GameGrid

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Pathfinder:
    """Breadth-first search over the empty cells of a grid."""

    def __init__(self, grid: GameGrid) -> None:
        self.grid = grid

    def can_reach(self, start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
        """Return True if the end cell can be reached from the start cell.

        Intermediate cells must be empty; the start and end cells themselves
        are not checked (the caller makes sure the end cell is empty).
        """
        if (start_row, start_col) == (end_row, end_col):
            return True

        height, width = self.grid.height, self.grid.width
        if not (0 <= start_row < height and 0 <= start_col < width):
            return False
        if not (0 <= end_row < height and 0 <= end_col < width):
            return False

        end = (end_row, end_col)
        visited = {(start_row, start_col)}
        queue = deque([(start_row, start_col)])
        while queue:
            row, col = queue.popleft()
            for dr, dc in _STEPS:
                nxt = (row + dr, col + dc)
                if nxt == end:
                    return True
                nr, nc = nxt
                if (
                    0 <= nr < height
                    and 0 <= nc < width
                    and nxt not in visited
                    and self.grid.is_cell_empty(nr, nc)
                ):
                    visited.add(nxt)
                    queue.append(nxt)
        return False