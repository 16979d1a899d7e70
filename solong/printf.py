"""A small formatted-output facility with the conversions c s d i u x X p %."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _as_int(value: Any) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    return chr(_as_int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_signed32(_as_int(v))),
    "i": lambda v: str(_signed32(_as_int(v))),
    "u": lambda v: str(_as_int(v) & _UINT_MASK),
    "x": lambda v: format(_as_int(v) & _UINT_MASK, "x"),
    "X": lambda v: format(_as_int(v) & _UINT_MASK, "X"),
    "p": _pointer,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone '%'
    at the end of the format is dropped. Too few arguments raise TypeError.
    """
    remaining = iter(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        out.append(convert(value))
    return "".join(out)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)