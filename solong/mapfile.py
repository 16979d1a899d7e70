"""Loading map files and checking their file name."""

from __future__ import annotations

import os

from solong.lines import LineReader
from solong.strings import strncmp, strrchr

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file cannot be read or the map it holds is invalid."""


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into a list of rows with their newlines removed.

    Raises MapError if the file cannot be opened or holds no lines.
    """
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            grid = [line.strip("\n") for line in LineReader(stream)]
    except OSError as exc:
        raise MapError("Fichier non conforme") from exc
    if not grid:
        raise MapError("Fichier non conforme")
    return grid


def check_extension(filename: str) -> bool:
    """True when the part of ``filename`` from its last '.' is exactly '.ber'."""
    dot = strrchr(filename, ".")
    if dot is None:
        return False
    return strncmp(filename[dot:], MAP_EXTENSION, len(MAP_EXTENSION) + 1) == 0