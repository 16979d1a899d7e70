"""Game state: the tile grid, the player's position and movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

KEY_UP = 13
WIN_MESSAGE = "Bravo Champion"

_MAP_HEADER = "\n----- MAP CONTENT -----\n"
_MAP_FOOTER = "-----------------------\n"


class Tile(str, Enum):
    """The kinds of tile a map is made of."""

    FLOOR = "0"
    WALL = "1"
    COIN = "C"
    PLAYER = "P"
    EXIT = "E"


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


@dataclass
class Game:
    """A map being played, with the counts and position taken from it."""

    grid: list[list[str]]
    width: int
    height: int
    coins: int
    players: int
    exits: int
    player_x: int
    player_y: int

    @classmethod
    def from_grid(cls, grid: Sequence[str]) -> "Game":
        """Build a game from map rows; the first 'P' found is the player.

        Raises ValueError for an empty map or one without a player.
        """
        if not grid:
            raise ValueError("map is empty")
        cells = [list(row) for row in grid]
        position = next(
            ((x, y) for y, row in enumerate(cells) for x, ch in enumerate(row)
             if ch == Tile.PLAYER.value),
            None,
        )
        if position is None:
            raise ValueError("map has no player")
        game = cls(
            grid=cells,
            width=len(cells[0]),
            height=len(cells),
            coins=0,
            players=0,
            exits=0,
            player_x=position[0],
            player_y=position[1],
        )
        game.coins = game.count(Tile.COIN)
        game.players = game.count(Tile.PLAYER)
        game.exits = game.count(Tile.EXIT)
        return game

    @property
    def rows(self) -> list[str]:
        """The current map as a list of strings."""
        return ["".join(row) for row in self.grid]

    def count(self, tile: Tile | str) -> int:
        """Return how many cells of the current map hold ``tile``."""
        value = tile.value if isinstance(tile, Tile) else tile
        return sum(row.count(value) for row in self.grid)

    def tile_at(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``."""
        if not 0 <= y < len(self.grid) or not 0 <= x < len(self.grid[y]):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def move_player(self, new_y: int, new_x: int) -> MoveResult:
        """Move the player to (``new_x``, ``new_y``) if the tile allows it.

        Walls block the move. Reaching the exit with every coin collected
        wins; otherwise the player steps onto the tile, picking up a coin
        if there is one.
        """
        target = self.tile_at(new_x, new_y)
        if target == Tile.WALL.value:
            return MoveResult.BLOCKED
        if target == Tile.EXIT.value and self.coins == 0:
            return MoveResult.WON
        if target == Tile.COIN.value:
            self.coins -= 1
        self.grid[self.player_y][self.player_x] = Tile.FLOOR.value
        self.grid[new_y][new_x] = Tile.PLAYER.value
        self.player_y = new_y
        self.player_x = new_x
        return MoveResult.MOVED

    def handle_key(self, key: int) -> MoveResult | None:
        """React to a key code; returns None for keys that do nothing."""
        if key == KEY_UP:
            return self.move_player(self.player_y - 1, self.player_x)
        return None

    def format_map(self) -> str:
        """Return the map framed by header and footer lines, for display."""
        body = "".join(f"{row}\n" for row in self.rows)
        return f"{_MAP_HEADER}{body}{_MAP_FOOTER}"