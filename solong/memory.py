"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(length: int, available: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what} length must not be negative")
    if length > available:
        raise ValueError(f"{what} length {length} exceeds buffer size {available}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(length, len(buf), "memset")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return memset(buf, 0, length)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dst``."""
    _check_length(n, len(src), "source")
    _check_length(n, len(dst), "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buf) - src, "source")
    _check_length(length, len(buf) - dst, "destination")
    if length and dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_length(n, len(data), "memchr")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, len(a), "first")
    _check_length(n, len(b), "second")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total would exceed SIZE_MAX.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("requested size overflows SIZE_MAX")
    return bytearray(count * size)