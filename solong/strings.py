"""String helpers that follow the C library's semantics over Python strings.

Positions are returned as indices (or None when nothing is found). The
``strl*`` functions return the resulting text together with the length the
C functions report, so truncation can be detected by comparing that length
with the buffer size.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    _check_size(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing side is treated as absent."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return s1 + s2


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    if not charset:
        return strdup(s)
    return s.strip(charset)


def split(s: str | None, sep: int | str) -> list[str] | None:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if s is None:
        return None
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``func(index, char)`` applied to every character."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the resulting text and ``len(src)``. With ``size`` 0 the
    destination is left as it was.
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dst`` as at most ``size`` characters long.
    """
    _check_size(size, "size")
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    return dst + src[:size - used - 1], used + len(src)