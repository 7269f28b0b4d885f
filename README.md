# colorlines

Two variants of the Color Lines puzzle game, each with a small desktop
window built on the standard library's tkinter.

Balls of several colours sit on a 9×9 board. Select a ball, then click an
empty cell: the ball moves there if a path of empty cells connects the two
cells horizontally and vertically. Five or more balls of one colour in a row,
column or diagonal are cleared and score points. A move that clears nothing
brings three new balls onto the board. The game ends when the board is full.

## Installing

```
pip install .
```

tkinter must be available in your Python installation to open the game
windows. The game logic itself needs nothing beyond the standard library.

## Playing

Classic variant: five colours, a New Game button, and a line scores
10 points for five balls plus 5 for each extra ball. Lines that the newly
dropped balls happen to complete are cleared without scoring.

```
colorlines-classic
```

Five-balls variant: eight colours, the three upcoming balls are shown ahead
of time, the selected ball is highlighted and moves with a short animation.
A cleared line scores 2 points per ball plus `(n - 4) * n` for `n` balls;
each ball cleared by a line the dropped balls complete scores 1 point. When
the board fills up, a message shows the final score.

```
colorlines-fiveballs
```

Both commands take `--seed N` to make the random ball placement repeatable.

## Using the game logic

The rules are plain Python classes that can be driven without a window,
which is handy for tests or for writing your own front end.

Classic variant (`colorlines.classic`), cells addressed by `(row, col)`:

```python
import random

from colorlines.classic.ball import BallColor
from colorlines.classic.grid import GameGrid
from colorlines.classic.pathfinder import Pathfinder
from colorlines.classic.solver import Solver

grid = GameGrid(9, 9, random.Random(1))
for col in range(5):
    grid.place_ball(0, col, BallColor.RED)

print(Solver(grid).find_lines(5))              # the five cells of row 0, sorted
print(Pathfinder(grid).can_reach(0, 0, 8, 8))  # True
```

- `GameGrid` stores `Ball` objects; `add_random_balls(count)` drops random
  balls on random empty cells and returns the cells used; `is_full()` and
  `reset()` do what their names say.
- `colorlines.classic.game.Game` holds a whole game: `new_game()` starts one,
  `click_cell(row, col)` selects, switches or moves a ball, and `score`,
  `selected`, `game_over` and `message` describe the current state.
  `calculate_score(balls_in_line)` gives the points for a cleared line.

Five-balls variant (`colorlines.fiveballs`), cells addressed by `(x, y)`:

- `Grid` stores `Ball(color, id)` objects and places random balls in empty
  cells with `place_random_ball(color)` and `place_initial_balls(count)`.
- `Pathfinder.find_path(start, end)` returns the cells an A* search walks
  from `start` to `end` inclusive, or an empty list when there is no way
  through or the end cell is occupied.
- `Solver.check_for_lines(x, y)` returns the sorted cells of every line of
  five or more that passes through the ball at `(x, y)`.
- `FiveBallsGame` ties them together: `click(x, y)` selects a ball or starts
  a move and returns the `Move`; `complete_move()` finishes it, clears lines,
  adds the upcoming balls and returns the cleared cells (it raises
  `RuntimeError` when no move is pending); `is_game_over()` reports a full
  board.

## What it does not do

There are no saved games and no high-score table. The five-balls window has
no New Game button: once the board is full, start the command again.

## Running the tests

```
pip install .[test]
pytest
```