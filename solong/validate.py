"""Checks that a map grid has a valid shape, border and content."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from solong.mapfile import MapError

ALLOWED_TILES = frozenset("01CPE")
WALL = "1"


def is_rectangular(grid: Sequence[str]) -> bool:
    """True when all rows share one length and the map is not square."""
    if not grid:
        return False
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        return False
    return width != len(grid)


def has_closed_walls(grid: Sequence[str]) -> bool:
    """True when the first and last rows and columns are all walls."""
    if not grid or any(not row for row in grid):
        return False
    if set(grid[0]) != {WALL} or set(grid[-1]) != {WALL}:
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in grid)


def check_wall_and_shape(grid: Sequence[str]) -> tuple[int, int]:
    """Check the shape then the border; return (width, height).

    Raises MapError describing the first problem found.
    """
    if not is_rectangular(grid):
        raise MapError("Map non valide!\nN'est pas réctangulaire")
    if not has_closed_walls(grid):
        raise MapError("Map non valide!\nLes murs sont pas bon!")
    return len(grid[0]), len(grid)


def check_content(grid: Sequence[str]) -> Counter[str]:
    """Check tiles and their counts; return how many of each tile there are.

    Every tile must be one of 0 1 C P E, with at least one C, exactly one E
    and exactly one P. Raises MapError for the first rule broken.
    """
    counts = Counter("".join(grid))
    if any(tile not in ALLOWED_TILES for tile in counts):
        raise MapError("Caractère invalide!")
    if counts["C"] < 1:
        raise MapError("Nombres de coins")
    if counts["E"] != 1:
        raise MapError("Nombre de sorties")
    if counts["P"] != 1:
        raise MapError("Nombre de joueurs")
    return counts


def validate_map(grid: Sequence[str]) -> Sequence[str]:
    """Run every check on ``grid`` and return it unchanged if it is valid."""
    check_wall_and_shape(grid)
    check_content(grid)
    return grid