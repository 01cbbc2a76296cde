"""Reading a source line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 10

Chunk = Union[bytes, str]


def _newline_index(stash: Chunk) -> int:
    """Return the position of the first newline in ``stash``, or -1."""
    newline = b"\n" if isinstance(stash, (bytes, bytearray)) else "\n"
    return stash.find(newline)


class LineReader:
    """Return successive lines, newline included, from a file descriptor or stream.

    ``source`` is either a non-negative file descriptor, read with ``os.read``,
    or any object with a ``read(size)`` method. Lines come back as bytes or str,
    whichever the source produces.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
        elif not callable(getattr(source, "read", None)):
            raise TypeError("source must be a file descriptor or have a read method")
        self.source = source
        self.buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def _read_chunk(self) -> Chunk:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        return self.source.read(self.buffer_size)

    def _fill(self) -> None:
        while self._stash is None or _newline_index(self._stash) < 0:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._stash = None
                raise
            if self._stash is None:
                self._stash = chunk
            else:
                self._stash += chunk
            if not chunk:
                break

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None when nothing is left."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = _newline_index(stash)
        if index < 0:
            self._stash = None
            return stash
        self._stash = stash[index + 1:] or None
        return stash[: index + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line