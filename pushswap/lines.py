"""Reading a text stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, TextIO

BUFF_SIZE = 100


class LineReader:
    """Read lines from a stream in fixed-size chunks, keeping what is left over."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFF_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending = ""

    def _fill(self) -> None:
        while "\n" not in self._pending:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input.

        A final piece of text without a newline is returned as a line; a
        newline at the very end of the input yields no extra empty line.
        """
        self._fill()
        line, sep, rest = self._pending.partition("\n")
        if sep:
            self._pending = rest
            return line
        if not self._pending:
            return None
        self._pending = ""
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield every line of stream, without newlines."""
    yield from LineReader(stream)