"""Rules of the classic game: selecting, moving, clearing lines and scoring."""

from __future__ import annotations

import logging
import random

from colorlines.classic.grid import Cell, GameGrid
from colorlines.classic.pathfinder import Pathfinder
from colorlines.classic.solver import Solver

log = logging.getLogger(__name__)

INITIAL_BALLS = 5
BALLS_PER_TURN = 3

GRID_FULL = "Game Over! Grid Full!"
NO_SPACE = "Game Over! No Space!"
FULL_ON_START = "Game Over! Grid Full on Start!"


def calculate_score(balls_in_line: int) -> int:
    """Return the points for clearing ``balls_in_line`` balls at once."""
    if balls_in_line < 5:
        return 0
    return 10 + (balls_in_line - 5) * 5


class Game:
    """State of one classic game, driven by cell clicks."""

    def __init__(
        self,
        width: int = 9,
        height: int = 9,
        rng: random.Random | None = None,
    ) -> None:
        self.grid = GameGrid(width, height, rng)
        self.pathfinder = Pathfinder(self.grid)
        self.solver = Solver(self.grid)
        self.selected: Cell | None = None
        self.score = 0
        self.game_over = False
        self.message = ""
        self.new_game()

    def new_game(self) -> None:
        """Clear the board and start over with a handful of random balls."""
        log.debug("starting a new game")
        self.grid.reset()
        self.score = 0
        self.game_over = False
        self.selected = None
        self.message = ""
        self.grid.add_random_balls(INITIAL_BALLS)
        self.check_lines_and_score(False)

    def _end(self, message: str) -> None:
        self.game_over = True
        self.message = message
        log.debug("%s", message)

    def click_cell(self, row: int, col: int) -> None:
        """Handle a click on a cell: select a ball, switch selection or move."""
        if self.game_over:
            log.debug("game is over; click ignored")
            return

        if self.selected is None:
            if not self.grid.is_cell_empty(row, col):
                self.selected = (row, col)
            return

        if not self.grid.is_cell_empty(row, col):
            self.selected = None if self.selected == (row, col) else (row, col)
            return

        from_row, from_col = self.selected
        self.selected = None
        if not self.pathfinder.can_reach(from_row, from_col, row, col):
            log.debug("no path from %s to %s", (from_row, from_col), (row, col))
            return

        color = self.grid.ball(from_row, from_col).color
        self.grid.remove_ball(from_row, from_col)
        self.grid.place_ball(row, col, color)
        self.check_lines_and_score(True)

    def check_lines_and_score(self, balls_moved: bool) -> None:
        """Clear finished lines and, after a move that cleared none, add new balls."""
        if self.game_over:
            return

        lines = self.solver.find_lines()
        if lines:
            for row, col in lines:
                self.grid.remove_ball(row, col)
            self.score += calculate_score(len(lines))
            if self.grid.is_full():
                self._end(GRID_FULL)
            return

        if balls_moved:
            added = self.grid.add_random_balls(BALLS_PER_TURN)
            if not added and self.grid.is_full():
                self._end(NO_SPACE)
                return
            new_lines = self.solver.find_lines()
            if new_lines:
                # Lines completed by the dropped balls are cleared but not scored.
                for row, col in new_lines:
                    self.grid.remove_ball(row, col)
                if self.grid.is_full():
                    self._end(GRID_FULL)
        elif self.grid.is_full():
            self._end(FULL_ON_START)