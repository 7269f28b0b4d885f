"""Window for the five-balls game, drawn on a Tk canvas."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from colorlines.fiveballs.game import FiveBallsGame, Move
from colorlines.fiveballs.grid import GRID_SIZE, Point

CELL_SIZE = 50
ANIMATION_MS = 300
ANIMATION_FRAMES = 15
BALL_INSET = 4
CELL_FILL = "lightgray"
CELL_OUTLINE = "darkgray"


@dataclass(frozen=True)
class BallStyle:
    """How a ball is drawn: its opacity, scale and stacking order."""

    opacity: float
    scale: float
    z: int


def cell_from_point(x: float, y: float, cell_size: int, grid_size: int) -> Point | None:
    """Map a point on the board to its (x, y) cell, or None outside the board."""
    gx = int(int(x) / cell_size)
    gy = int(int(y) / cell_size)
    if not (0 <= gx < grid_size and 0 <= gy < grid_size):
        return None
    return gx, gy


def ball_style(highlighted: bool) -> BallStyle:
    """Return the look of a selected or an ordinary ball."""
    if highlighted:
        return BallStyle(opacity=0.7, scale=1.1, z=1)
    return BallStyle(opacity=1.0, scale=1.0, z=0)


class FiveBallsWindow:
    """Score, upcoming balls and the board canvas for one game."""

    def __init__(self, root, game: FiveBallsGame | None = None) -> None:
        import tkinter as tk

        self.root = root
        self.game = game if game is not None else FiveBallsGame()
        self._move: Move | None = None
        self._frame = 0
        self._announced = False

        root.title("Five Balls Game")
        board = GRID_SIZE * CELL_SIZE

        main_frame = tk.Frame(root, padx=10, pady=10)
        main_frame.pack(fill=tk.BOTH, expand=True)

        top = tk.Frame(main_frame)
        top.pack(fill=tk.X, pady=5)
        self.score_label = tk.Label(top, text="Score: 0")
        self.score_label.pack(side=tk.LEFT)
        self.upcoming_canvases = []
        for _ in range(3):
            swatch = tk.Canvas(
                top,
                width=CELL_SIZE,
                height=CELL_SIZE,
                relief=tk.SUNKEN,
                borderwidth=1,
                highlightthickness=0,
            )
            self.upcoming_canvases.append(swatch)
        for swatch in reversed(self.upcoming_canvases):
            swatch.pack(side=tk.RIGHT, padx=2)
        tk.Label(top, text="Upcoming:").pack(side=tk.RIGHT)

        self.canvas = tk.Canvas(
            main_frame, width=board, height=board, highlightthickness=0
        )
        self.canvas.pack(pady=5)
        self.canvas.bind("<Button-1>", self.on_click)

        self.redraw()

    def _draw_ball(self, px: float, py: float, color: str, highlighted: bool) -> None:
        style = ball_style(highlighted)
        radius = (CELL_SIZE / 2 - BALL_INSET) * style.scale
        cx = px + CELL_SIZE / 2
        cy = py + CELL_SIZE / 2
        self.canvas.create_oval(
            cx - radius,
            cy - radius,
            cx + radius,
            cy + radius,
            fill=color,
            outline="",
            stipple="gray75" if style.opacity < 1.0 else "",
        )

    def _animated_position(self) -> tuple[float, float]:
        move = self._move
        t = min(1.0, self._frame / ANIMATION_FRAMES)
        sx, sy = move.start[0] * CELL_SIZE, move.start[1] * CELL_SIZE
        tx, ty = move.target[0] * CELL_SIZE, move.target[1] * CELL_SIZE
        return sx + (tx - sx) * t, sy + (ty - sy) * t

    def redraw(self) -> None:
        """Repaint the board, the score and the upcoming balls."""
        self.score_label.config(text=f"Score: {self.game.score}")
        for swatch, color in zip(self.upcoming_canvases, self.game.upcoming):
            swatch.delete("all")
            swatch.create_oval(
                BALL_INSET,
                BALL_INSET,
                CELL_SIZE - BALL_INSET,
                CELL_SIZE - BALL_INSET,
                fill=color,
                outline="",
            )

        self.canvas.delete("all")
        for x in range(GRID_SIZE):
            for y in range(GRID_SIZE):
                self.canvas.create_rectangle(
                    x * CELL_SIZE,
                    y * CELL_SIZE,
                    (x + 1) * CELL_SIZE,
                    (y + 1) * CELL_SIZE,
                    fill=CELL_FILL,
                    outline=CELL_OUTLINE,
                )

        moving = self._move.start if self._move is not None else None
        highlighted = None if self._move is not None else self.game.selected
        balls = [
            (x, y, ball)
            for x in range(GRID_SIZE)
            for y in range(GRID_SIZE)
            if (ball := self.game.grid.ball_at(x, y)) is not None and (x, y) != moving
        ]
        balls.sort(key=lambda item: ball_style((item[0], item[1]) == highlighted).z)
        for x, y, ball in balls:
            self._draw_ball(
                x * CELL_SIZE, y * CELL_SIZE, ball.color, (x, y) == highlighted
            )
        if self._move is not None:
            px, py = self._animated_position()
            self._draw_ball(px, py, self._move.ball.color, False)

    def on_click(self, event) -> None:
        """Translate a canvas click into a cell click."""
        if self._move is not None:
            return
        cell = cell_from_point(
            self.canvas.canvasx(event.x),
            self.canvas.canvasy(event.y),
            CELL_SIZE,
            GRID_SIZE,
        )
        if cell is None:
            return
        move = self.game.click(*cell)
        if move is not None:
            self._move = move
            self._frame = 0
            self.root.after(ANIMATION_MS // ANIMATION_FRAMES, self._step)
        self.redraw()

    def _step(self) -> None:
        self._frame += 1
        if self._frame < ANIMATION_FRAMES:
            self.redraw()
            self.root.after(ANIMATION_MS // ANIMATION_FRAMES, self._step)
            return
        self._move = None
        self.game.complete_move()
        self.redraw()
        if self.game.game_over and not self._announced:
            from tkinter import messagebox

            self._announced = True
            messagebox.showinfo(
                "Game Over", f"The grid is full! Final Score: {self.game.score}"
            )


def main(argv: list[str] | None = None) -> int:
    """Open the five-balls game window."""
    parser = argparse.ArgumentParser(
        prog="fiveballs", description="Line up five balls of one colour."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    FiveBallsWindow(root, FiveBallsGame(rng=random.Random(args.seed)))
    root.mainloop()
    return 0