"""Buffered line-by-line reading from a file descriptor."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Union

DEFAULT_BUFFER_SIZE = 5

Source = Union[int, BinaryIO]


class LineReader:
    """Read newline-terminated lines from a descriptor in fixed-size chunks.

    Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, fd: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, int) and fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._buffer = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._fd, int):
            return os.read(self._fd, self._buffer_size)
        return self._fd.read(self._buffer_size) or b""

    def next_line(self) -> bytes | None:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._buffer:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._buffer += chunk
        if not self._buffer:
            return None
        newline = self._buffer.find(b"\n")
        end = len(self._buffer) if newline < 0 else newline + 1
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(fd: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line from ``fd``."""
    yield from LineReader(fd, buffer_size)