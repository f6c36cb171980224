# minefield

A minesweeper board with its rules, plus a pygame window that draws it
and takes mouse clicks.

The board is 16 rows by 32 columns and holds 60 mines. Mines are laid
only on the first click that opens a tile, and never on that tile or
next to it, so the first move is always safe.

## Installing

```
pip install .
```

## Starting the window

```
minefield
```

The command looks for `resources/arial.ttf` relative to the directory
it is started from. If the font is missing it prints
`Error loading font: resources/arial.ttf` and exits with status 1.
The tile images `GroundWhite.jpg`, `Flag2.png`, `Mine.jpg` and
`Boom.jpg` are read from the same `resources` directory; any that
cannot be loaded is reported on standard error and drawn as a plain
coloured square instead.

The window opens on the main menu, with the title and three buttons:
Easy, Normal and Difficult.

## What it does not do

The difficulty buttons on the main menu only print `easy`, `normal` or
`difficult` to standard output. They do not change the board and do
not start a game, and the main menu has no other way into play, so the
window by itself never leaves the main menu. Difficulty levels are not
implemented: every board is 16 × 32 with 60 mines.

A game is started from code with `Game.reset_game()` (see below).

## Rules once a game is running

- **Left click** on a tile opens it. A tile with no neighbouring mines
  opens its neighbours too, and the opening spreads until it reaches
  numbered tiles. Flagged tiles are never opened, neither directly nor
  by the spreading.
- **Right click** sets or clears a flag on a tile that is still closed.
- **Menu** in the top bar pauses the game. On the pause screen,
  **CONTINUE** goes back to the board and **FINISH** goes to the main
  menu.
- Opening a mine ends the game and shows every mine. Opening every safe
  tile wins it. After either, **RESTART** in the top bar starts a new
  board.

Numbers are drawn in blue for 1, green for 2 and red for 3 or more.

## Using the package in code

`minefield.field.Field` holds the board rules and needs no display:

```python
import random
from minefield.field import Field

field = Field(rows=16, cols=32, mine_count=60, rng=random.Random(1))
field.place_mines(8, 16)
opened = field.auto_release(8, 16)
print(opened, field.count(8, 16))
```

`Field` also offers `is_mined`, `open`, `is_opened`, `toggle_flag`,
`is_flagged` and the `safe_cells` property. Cell queries outside the
board raise `IndexError`; `place_mines` raises `ValueError` if the mines
do not fit outside the protected 3 × 3 area.

`minefield.game.Game` is one session. `reset_game()` starts a fresh
board in the playing state, `handle_left_click(pos)` and
`handle_right_click(pos)` take positions in window pixels (the board
starts 70 pixels down, tiles are 50 pixels square), and `state` holds a
`minefield.constants.GameState`. `run()` opens the window and plays
until it is closed.

```python
import random
from minefield.constants import GameState
from minefield.game import Game

game = Game(random.Random(1))
game.reset_game()
game.handle_left_click((825, 470))   # row 8, column 16
print(game.state is GameState.PLAYING, game.open_count)
```

`minefield.ui.GameUI` and `minefield.renderer.GameRenderer` draw the
menus and the board onto a pygame surface.

## Testing

```
pip install .[test]
pytest
```