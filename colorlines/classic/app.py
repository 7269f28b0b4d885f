"""Window for the classic game, drawn on a Tk canvas."""

from __future__ import annotations

import argparse
import random

from colorlines.classic.ball import BallColor
from colorlines.classic.game import Game

BOARD_SIZE = 360
GRID_LINE_COLOR = "black"
CELL_BG_COLOR = "white"
SELECTED_CELL_COLOR = "lightgray"


def cell_at(
    x: float, y: float, width: float, height: float, rows: int, cols: int
) -> tuple[int, int] | None:
    """Map a point on a ``width`` x ``height`` area to a (row, col) cell.

    The board is a square centred in the area; points outside it give None.
    """
    if rows == 0 or cols == 0:
        return None
    size = min(width, height)
    adjusted_x = x - (width - size) / 2.0
    adjusted_y = y - (height - size) / 2.0
    cell_w = size / cols
    cell_h = size / rows
    if cell_w <= 0 or cell_h <= 0:
        return None
    if not (0 <= adjusted_x < size and 0 <= adjusted_y < size):
        return None
    col = int(adjusted_x / cell_w)
    row = int(adjusted_y / cell_h)
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None


class ClassicWindow:
    """Buttons, labels and the board canvas for one game."""

    def __init__(self, root, game: Game | None = None) -> None:
        import tkinter as tk

        self.root = root
        self.game = game if game is not None else Game()

        root.title("Color Lines")
        root.geometry("450x600")

        frame = tk.Frame(root, padx=10, pady=10)
        frame.pack(fill=tk.BOTH, expand=True)

        self.new_game_button = tk.Button(frame, text="New Game", command=self.on_new_game)
        self.new_game_button.pack(pady=5)

        self.score_label = tk.Label(frame, text="Score: 0")
        self.score_label.pack(pady=5)

        self.canvas = tk.Canvas(
            frame, width=BOARD_SIZE, height=BOARD_SIZE, highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True, pady=5)
        self.canvas.bind("<Button-1>", self.on_click)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())

        self.game_over_label = tk.Label(
            frame, text="", fg="red", font=("Sans", 14, "bold")
        )
        self.game_over_label.pack(pady=5)

        self.redraw()

    def _canvas_size(self) -> tuple[int, int]:
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            width = int(self.canvas["width"])
            height = int(self.canvas["height"])
        return width, height

    def redraw(self) -> None:
        """Repaint the board and refresh the labels."""
        self.score_label.config(text=f"Score: {self.game.score}")
        self.game_over_label.config(text=self.game.message)

        self.canvas.delete("all")
        grid = self.game.grid
        if grid.height == 0 or grid.width == 0:
            return
        width, height = self._canvas_size()
        size = min(width, height)
        cell_w = size / grid.width
        cell_h = size / grid.height
        off_x = (width - size) / 2.0
        off_y = (height - size) / 2.0
        radius = min(cell_w, cell_h) / 2.8

        for row in range(grid.height):
            for col in range(grid.width):
                x0 = off_x + col * cell_w
                y0 = off_y + row * cell_h
                fill = (
                    SELECTED_CELL_COLOR
                    if self.game.selected == (row, col)
                    else CELL_BG_COLOR
                )
                self.canvas.create_rectangle(
                    x0, y0, x0 + cell_w, y0 + cell_h, fill=fill, outline=GRID_LINE_COLOR
                )
                color = grid.ball(row, col).color
                if color is not BallColor.EMPTY:
                    cx = x0 + cell_w / 2.0
                    cy = y0 + cell_h / 2.0
                    self.canvas.create_oval(
                        cx - radius,
                        cy - radius,
                        cx + radius,
                        cy + radius,
                        fill=color.value,
                        outline="",
                    )

    def on_click(self, event) -> None:
        """Translate a canvas click into a cell click."""
        width, height = self._canvas_size()
        cell = cell_at(
            event.x, event.y, width, height, self.game.grid.height, self.game.grid.width
        )
        if cell is not None:
            self.game.click_cell(*cell)
        self.redraw()

    def on_new_game(self) -> None:
        """Start a fresh game."""
        self.game.new_game()
        self.redraw()


def main(argv: list[str] | None = None) -> int:
    """Open the classic game window."""
    parser = argparse.ArgumentParser(
        prog="colorlines", description="Line up five balls of one colour."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    ClassicWindow(root, Game(rng=random.Random(args.seed)))
    root.mainloop()
    return 0