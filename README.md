# xonix

This package holds the game logic of a Xonix-style arcade game. It does
not depend on any graphics library.

The playfield is a grid 80 cells wide and 50 cells high (`COLUMNS` and
`ROWS` in `xonix.cell`). A two-cell border around the edge starts out
occupied, and the rest of the grid is unoccupied. Each step moves the
player one cell. When the player enters unoccupied ground, that cell
becomes part of its trail. When the player reaches occupied ground
again, the whole trail becomes occupied. The board then looks at the
cells right of, below, left of and above the player, in that order, and
captures the first free region that no enemy touches. Enemies move
diagonally and bounce off occupied cells. An enemy about to enter a
trail cell makes the player lose a life. So does the player stepping
onto its own trail.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from xonix.board import Board
from xonix.cell import CellType

board = Board(16, 16, 2)      # cell width, cell height, number of enemies

board.player.direction = (1, 0)
for _ in range(5):
    board.handle_collisions()
    board.update(1 / 60)

print(board.cell_type(2, 2) is CellType.OCCUPIED)
print(board.render_text())    # a plain-text picture of the grid
```

To advance a game, call `handle_collisions()` and then
`update(elapsed)`. `handle_collisions()` deals with whatever the enemies
and the player are about to move into. `update(elapsed)` moves every
enemy one cell along its direction, then moves the player one cell.
After each move the player's direction goes back to `(0, 0)`, so set
`board.player.direction` again before each step. If the player's next
cell would be outside the grid, its direction is set to `(0, 0)`.

The cell width and height must be positive. Grid positions are worked
out by dividing pixel positions by them, so a board built with the
default size of zero can be created but not stepped.

Enemies start at pseudo-random cells from a fixed seed, so a given
number of enemies always starts in the same places.

`render_text()` returns one line per row:

- `#` for an occupied cell
- `.` for an unoccupied cell
- `*` for a trail cell
- `E` for an enemy
- `P` for the player

`Board` also exposes `player`, `enemies`, `is_in_grid(point)` and
`cell_type(x, y)`.

### Levels

`xonix.levels` reads level definitions. The text is a list of integers
separated by whitespace. The first three are width, height and lives.
Each pair after them describes one level: the percentage of area to
occupy, then the number of enemies. Reading stops at the first token
that is not an integer, and a single value left over at the end is
ignored.

```python
from xonix.levels import ResourceManager, parse_levels

config = parse_levels("800 600 3\n80 1\n85 2\n")
config.levels            # [Level(area_to_occupy=80, enemy_num=1), ...]

manager = ResourceManager("levels.txt")
manager.width, manager.height, manager.life
manager.level_count()
manager.area_to_occupy(0)
manager.enemy_num(0)
```

`parse_levels` raises `ValueError` if the text does not start with
three integers. `ResourceManager` raises `FileNotFoundError` if the file
cannot be read. The per-level lookups raise `IndexError` for a level
number that does not exist.

## Modules

- `xonix.cell`: grid size, `CellType`, and `Cell`. `Cell.color()` gives
  the cell's RGB fill colour: red for trail, blue for occupied, black
  for unoccupied.
- `xonix.objects`: `GameObject` and `MovingObject`, rectangles placed
  at pixel positions, with `contains`, `intersects`, `grid_pos` and
  `next_grid_pos`.
- `xonix.player`: `Player`. It has lives, a trail, and the
  `is_occupying` flag.
- `xonix.enemy`: `Enemy` and `CollisionType`.
- `xonix.levels`: `Level`, `GameConfig`, `ResourceManager` and
  `parse_levels`.
- `xonix.board`: `Board`, which brings the pieces together.

## What this package does not do

The package has no window, no drawing and no keyboard handling. There
is no game loop or command to start a game. It does not move the game
from one level to the next, keep score, or decide when a level is won
or lost. `Board` stores `required_percent_win` but never checks it.
Players keep a `life` count, but running out of lives ends nothing. To
get a playable game, you must supply rendering, input handling and the
game loop yourself.