"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 200


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, each with its newline kept.

    The stream is read ``buffer_size`` characters (or bytes) at a time; data
    read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, ending in a newline unless it is the last one.

        Returns None once the stream is exhausted. If reading fails, the
        pending data is discarded and the error propagates.
        """
        while True:
            stash = self._stash
            if stash is not None:
                newline = b"\n" if isinstance(stash, bytes) else "\n"
                index = stash.find(newline)
                if index >= 0:
                    line, rest = stash[:index + 1], stash[index + 1:]
                    self._stash = rest if rest else None
                    return line
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                self._stash = None
                return stash if stash else None
            self._stash = chunk if stash is None else stash + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> str | bytes | None:
    """Return the next line from ``reader``, or None at the end of the stream."""
    return reader.read_line()