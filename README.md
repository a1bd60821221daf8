# noughts

Tic-tac-toe against the computer. You play `X`, the computer plays `O`.
You can play in the terminal against one of several opponents, or in a
window with the mouse.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing in the terminal

```
noughts
```

Each turn, type a row and a column, both 0 to 2, separated by a space
(for example `1 1` for the centre). Anything that is not two numbers,
or names a cell off the board or already taken, prints
"Invalid move, try again." and asks again. After each move the board
is drawn:

```
 X | O |   
---+---+---
   | X |   
---+---+---
   |   | O 
```

The game ends with "You win!", "Computer wins!" or "It's a draw!". If
the input ends before the game is decided, the command exits with
status 1.

`noughts --opponent NAME` chooses the computer's strategy (the default
is `minimax`):

- **minimax**: searches the whole game tree and never loses.
- **blocking**: blocks any line where you have two, otherwise takes the
  centre, otherwise the first free cell in row order.
- **heuristic**: wins if it can, blocks if it must, otherwise plays a
  random free cell.
- **magic**: maps the board onto the 3x3 magic square (8 1 6 / 3 5 7 /
  4 9 2), where a line is any three cells whose numbers sum to 15; it
  wins, then blocks, then takes the centre, then the first free corner
  (numbers 2, 4, 6, 8), then the first free edge (1, 3, 7, 9).

## Playing in a window

```
noughts-gui
```

Click a cell to place your `X`; the computer replies at once with a
minimax move that prefers quicker wins and slower losses. Press `R` to
start over and `Esc` to quit. Clicks, cells and the computer's choices
are also printed to the terminal.

The window loads `background.png`, `X.png` and `O.png` from the
directory given by `--assets`, which defaults to `assests` in the
current working directory. No images ship with the package; if one is
missing the command prints an error and exits with status 1.

## Using the library

```python
from noughts.board import Board, Mark
from noughts.minimax import find_best_move

board = Board()
board.place(0, 0, Mark.X)
row, col = find_best_move(board)   # places Mark.O and returns its cell
print(board.render())
print(board.winner())              # Mark.X, Mark.O or None
```

`Board` raises `InvalidMove` (a `ValueError`) for a cell off the board or
already taken. `noughts.minimax` also has `evaluate(board)` and
`minimax(board, depth, maximizing, depth_penalty)`.

The other opponents each have a `find_best_move` that places the
computer's mark and returns the cell, or `None` on a full board:

- `noughts.blocking.find_best_move(board)`, with `block_move(board)`;
- `noughts.heuristic.find_best_move(board, rng)`, where `rng` is an
  optional `random.Random`, with `winning_move(board, mark)` and
  `random_move(board, rng)`;
- `noughts.magic.MagicSquareGame`, whose `play_cell(row, col)` makes the
  player's move and whose `find_best_move()` returns the magic number
  taken. The module also has `magic_value(row, col)`,
  `coordinates(value)` and `is_winning_set(values)`.

`noughts.console.play(opponent, lines, out)` runs one terminal game
from any iterable of input lines and returns an `Outcome`.