"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition(b"\n")
        self._pending = rest
        return (line + newline).decode(_ENCODING, _ERRORS)

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, keeping separate state per descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line