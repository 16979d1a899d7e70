# solong

A small tile-based puzzle game on `.ber` map files. A map is a walled
grid holding one player, one exit and some coins. The package reads and
validates maps, keeps the game state, and shows the map in a pygame
window.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window. For the tests:

```
pip install .[test]
pytest
```

## Running

```
solong path/to/level.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber` (the text from the last `.` must be exactly `.ber`). It then:

1. reads and validates the map;
2. prints the map between `----- MAP CONTENT -----` lines;
3. opens a window titled `CrackHead`, 64 pixels per tile;
4. prints the player's position;
5. prints `Key hooks : <code>` for every key pressed, until the window
   is closed.

The tile pictures are loaded from an `assets` directory in the current
working directory, which must hold `coin1.xpm`, `wall.xpm`, `floor.xpm`,
`exit.xpm` and `player.xpm`. Each cell is drawn with the floor picture,
then its own picture on top.

With a wrong number of arguments, a wrong extension, an unreadable or
empty file, an invalid map or a missing picture, a message is printed
and the command exits with status 1.

## Map format

One row per line, made of these characters:

| Character | Meaning |
|-----------|---------|
| `1`       | wall    |
| `0`       | floor   |
| `C`       | coin    |
| `P`       | player  |
| `E`       | exit    |

Checks are made in this order, and the first failure is reported:

- every row has the same length and the map is not square;
- the first and last rows and columns are all walls;
- no character other than `0`, `1`, `C`, `P` and `E` appears
  (a carriage return left by Windows line endings counts as invalid);
- at least one coin;
- exactly one exit;
- exactly one player.

Example:

```
1111111111
1P0C000001
100001C0E1
1111111111
```

## Using it as a library

The map and game logic need no window:

```python
from solong.mapfile import read_map, MapError
from solong.validate import validate_map
from solong.game import Game, MoveResult

grid = read_map("level.ber")      # list of rows, raises MapError
validate_map(grid)                # raises MapError on the first problem
game = Game.from_grid(grid)
print(game.format_map())

result = game.move_player(game.player_y, game.player_x + 1)
```

`Game.move_player(new_y, new_x)` returns a `MoveResult`:

- `BLOCKED` when the target is a wall;
- `WON` when the target is the exit and no coins are left;
- `MOVED` otherwise: the player steps onto the tile, picking up a coin
  if there is one (the exit is stepped onto while coins remain).

`Game.handle_key(key)` moves the player up for key code 13 and returns
None for every other key. `Game.count`, `Game.tile_at` and `Game.rows`
inspect the current grid. `solong.cli.load_game(path)` does the
extension check, reading, validation and `Game.from_grid` in one call.

`solong.display` holds the pygame side: `load_images`, `window_size`
and `render_map`.

The package also carries small helper modules used by the above:
`solong.strings`, `solong.chars`, `solong.memory` (C-library-style
string, character and byte-buffer functions), `solong.printf`
(`sprintf`/`printf` with `%c %s %d %i %u %x %X %p %%`), `solong.output`,
`solong.linkedlist` (`LinkedList`) and `solong.lines` (`LineReader`,
which reads a stream line by line through a fixed-size buffer).

## What it does not do

The window shows the map but is not playable: key presses are only
printed, and the player never moves on screen. Movement exists only
through `Game.move_player` and `Game.handle_key`, and the only key
`handle_key` acts on is code 13 (up). There is no move counter, no
check that the coins and exit can be reached, and the window is drawn
once and not redrawn.