"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character to stream."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putchar(c: str) -> None:
    """Write a single character to standard output."""
    putchar_fd(c, sys.stdout)


def putstr_fd(text: Optional[str], stream: TextIO) -> None:
    """Write text to stream up to its first NUL; None writes nothing."""
    if text is None:
        return
    end = text.find("\0")
    stream.write(text if end < 0 else text[:end])


def putstr(text: Optional[str]) -> None:
    """Write text to standard output."""
    putstr_fd(text, sys.stdout)


def putendl_fd(text: Optional[str], stream: TextIO) -> None:
    """Write text and a newline to stream."""
    putstr_fd(text, stream)
    putchar_fd("\n", stream)


def putendl(text: Optional[str]) -> None:
    """Write text and a newline to standard output."""
    putendl_fd(text, sys.stdout)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write a signed 32-bit integer in decimal to stream."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    stream.write(str(n))


def putnbr(n: int) -> None:
    """Write a signed 32-bit integer in decimal to standard output."""
    putnbr_fd(n, sys.stdout)