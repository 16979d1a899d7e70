"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from solong.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int is taken as a byte value modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of an integer."""
    put_str(itoa(n), stream)