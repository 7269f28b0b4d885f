"""Rules of the five-balls game: selection, moves, line clearing and scoring."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from colorlines.fiveballs.ball import Ball
from colorlines.fiveballs.grid import GRID_SIZE, Grid, Point
from colorlines.fiveballs.pathfinder import Pathfinder
from colorlines.fiveballs.solver import MIN_LINE, Solver

log = logging.getLogger(__name__)

INITIAL_BALLS = 5
UPCOMING_COUNT = 3


@dataclass(frozen=True)
class Move:
    """A move that has been started and waits for :meth:`FiveBallsGame.complete_move`."""

    ball: Ball
    start: Point
    target: Point
    path: tuple[Point, ...]


def _player_score(cleared: int) -> int:
    score = cleared * 2
    if cleared >= MIN_LINE:
        score += (cleared - 4) * cleared
    return score


class FiveBallsGame:
    """State of one game, driven by clicks on board cells."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.grid = Grid(rng)
        self.pathfinder = Pathfinder(self.grid)
        self.solver = Solver(self.grid)
        self.score = 0
        self.selected: Point | None = None
        self.pending: Move | None = None
        self.game_over = False
        self.upcoming: list[str] = []

        self.grid.initialize()
        self.grid.place_initial_balls(INITIAL_BALLS)
        self.generate_upcoming_balls()

    def click(self, x: int, y: int) -> Move | None:
        """Handle a click on cell (x, y).

        Selects, deselects or switches the selected ball, or starts a move
        towards an empty cell. Returns the started :class:`Move`, if any.
        Clicks are ignored while a move is pending and after the game ends.
        """
        if self.game_over or self.pending is not None:
            return None
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            return None

        clicked = (x, y)
        ball = self.grid.ball_at(x, y)

        if self.selected is None:
            if ball is not None:
                self.selected = clicked
            return None

        if clicked == self.selected:
            self.selected = None
            return None
        if ball is not None:
            self.selected = clicked
            return None

        if not self.grid.is_cell_empty(x, y):
            self.selected = None
            return None

        path = self.pathfinder.find_path(self.selected, clicked)
        if not path:
            log.debug("no path from %s to %s", self.selected, clicked)
            self.selected = None
            return None

        moving = self.grid.ball_at(*self.selected)
        self.pending = Move(moving, self.selected, clicked, tuple(path))
        return self.pending

    def complete_move(self) -> list[Point]:
        """Finish the pending move and play out the rest of the turn.

        Returns the sorted cells cleared this turn.
        """
        move = self.pending
        if move is None:
            raise RuntimeError("no move is in progress")

        self.grid.remove_ball(*move.start)
        self.grid.place_ball(*move.target, move.ball)

        cleared = set(self.solver.check_for_lines(*move.target))
        if cleared:
            for point in cleared:
                self.grid.remove_ball(*point)
            self.score += _player_score(len(cleared))
        else:
            placed: list[Point] = []
            for color in self.upcoming:
                point = self.grid.place_random_ball(color)
                if point is None:
                    break
                placed.append(point)
            for point in placed:
                cleared.update(self.solver.check_for_lines(*point))
            for point in cleared:
                if self.grid.remove_ball(*point) is not None:
                    self.score += 1

        self.generate_upcoming_balls()
        self.pending = None
        self.selected = None
        if self.is_game_over():
            self.game_over = True
            log.debug("the grid is full; final score %d", self.score)
        return sorted(cleared)

    def generate_upcoming_balls(self) -> list[str]:
        """Pick the colours of the balls that arrive after the next move."""
        self.upcoming = [self.grid.random_color() for _ in range(UPCOMING_COUNT)]
        return list(self.upcoming)

    def is_game_over(self) -> bool:
        """Return True when no empty cell is left."""
        return not self.grid.empty_cells()