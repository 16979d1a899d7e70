"""Drawing a game onto a pygame surface."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import Game, Tile

TILE_SIZE = 64

_IMAGE_FILES = {
    "coin": "coin1.xpm",
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "exit": "exit.xpm",
    "player": "player.xpm",
}


@dataclass
class TileImages:
    """The picture used for each kind of tile."""

    wall: pygame.Surface
    coin: pygame.Surface
    player: pygame.Surface
    exit: pygame.Surface
    floor: pygame.Surface

    def _overlay(self, tile: str) -> pygame.Surface | None:
        return {
            Tile.COIN.value: self.coin,
            Tile.WALL.value: self.wall,
            Tile.EXIT.value: self.exit,
            Tile.PLAYER.value: self.player,
        }.get(tile)


def load_images(assets_dir: str | os.PathLike[str] = "assets") -> TileImages:
    """Load the tile pictures from ``assets_dir``.

    Raises FileNotFoundError when one of them is missing.
    """
    base = Path(assets_dir)
    surfaces = {}
    for field, name in _IMAGE_FILES.items():
        path = base / name
        if not path.is_file():
            raise FileNotFoundError(f"missing image {path}")
        surfaces[field] = pygame.image.load(str(path))
    return TileImages(**surfaces)


def window_size(game: Game) -> tuple[int, int]:
    """Return the pixel size of a window that shows the whole map."""
    return game.width * TILE_SIZE, game.height * TILE_SIZE


def render_map(surface: pygame.Surface, game: Game, images: TileImages) -> None:
    """Draw every cell: the floor first, then the tile's own picture on top."""
    for y, row in enumerate(game.grid):
        for x, tile in enumerate(row):
            position = (x * TILE_SIZE, y * TILE_SIZE)
            surface.blit(images.floor, position)
            overlay = images._overlay(tile)
            if overlay is not None:
                surface.blit(overlay, position)