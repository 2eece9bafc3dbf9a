# twentyfortyeight

The 2048 sliding-tile puzzle. Slide the tiles up, down, left or right;
equal tiles that meet merge into one holding their sum, and the merged value
is added to your score. Each tile merges at most once per move. After every
move that changes the board, a new tile (2 nine times in ten, otherwise 4)
appears in a random empty cell. The game ends when no move can change the
board.

## Playing in the terminal

```
pip install .
twentyfortyeight
```

Options:

- `--size N` – side length of the board (default 4, at least 2)
- `--seed N` – seed for the random tile placement, for repeatable games

The score and board are printed after every move. Type `w` (up), `s` (down),
`a` (left) or `d` (right) and press Enter. Several keys may be typed on one
line; each non-blank character counts as one move. Any other key does
nothing. "Game Over!" is printed when no move is left; the game also stops
at the end of input.

## Using the engine

```python
from twentyfortyeight.game import Game2048, Option

game = Game2048(4, seed=1)
game.reset()              # clear the board and place two starting tiles

moved = game.step(Option.LEFT)   # True if the board changed
print(game.score, game.done)
print(game.tile(0, 0))           # value at row 0, column 0 (IndexError if off the board)
print(game[0, 0])                # the same
print(game[5])                   # value at flat index 5
print(game.data)                 # all tiles as a flat tuple, row by row
for row in game.rows():
    print(row)

snapshot = game.copy()           # independent copy, random state included
```

`Option` has the members `UP`, `DOWN`, `LEFT`, `RIGHT` and `NULL`;
`step(Option.NULL)` never changes the board. `size` is the side length and
`full_size` the number of cells.

A game can also be started from a given position:

```python
board = [2, 2, 0, 0,
         0, 0, 0, 0,
         0, 0, 0, 0,
         0, 0, 0, 4]
game = Game2048(4, data=board, score=0, done=False)
```

`ValueError` is raised for a side length below 2, a board of the wrong
length, negative tiles or a negative score. A fresh `Game2048(side_size)`
counts as finished until `reset()` is called.

The terminal front end is in `twentyfortyeight.cli`: `option_for_key`
maps a key to an `Option`, `render` formats a board as text, and `play`
runs a whole game with a supplied input function and output stream and
returns the game when it ends.

## What it does not do

Games are not saved, there is no undo, and no high scores are kept. The
terminal front end reads whole lines of input; it does not react to single
key presses or arrow keys.

## Tests

```
pip install .[test]
pytest
```