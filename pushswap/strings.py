"""NUL-terminated string buffers: length, creation, copying and concatenation."""

from __future__ import annotations

from typing import Union

ByteSource = Union[bytes, bytearray, memoryview]


def _cstring(data: ByteSource) -> bytes:
    """Return the bytes of data up to, not including, the first NUL."""
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _require(buffer: bytearray, needed: int) -> None:
    if needed > len(buffer):
        raise ValueError(f"{needed} bytes needed but the buffer holds only {len(buffer)}")


def strlen(data: ByteSource) -> int:
    """Number of bytes before the first NUL, or the whole length when there is none."""
    return len(_cstring(data))


def strnew(size: int) -> bytearray:
    """Return a zeroed buffer with room for size bytes and a terminator."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size + 1)


def strclr(buffer: bytearray) -> None:
    """Zero every byte of the string held in buffer."""
    length = strlen(buffer)
    buffer[:length] = bytes(length)


def strcpy(dst: bytearray, src: ByteSource) -> bytearray:
    """Copy the string in src, terminator included, to the start of dst."""
    text = _cstring(src)
    _require(dst, len(text) + 1)
    dst[:len(text) + 1] = text + b"\0"
    return dst


def strncpy(dst: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy at most n bytes of src into dst, padding with NULs up to n."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    text = _cstring(src)[:n]
    _require(dst, n)
    dst[:n] = text + bytes(n - len(text))
    return dst


def strdup(text: ByteSource) -> bytearray:
    """Return a new terminated buffer holding a copy of the string in text."""
    return strcpy(strnew(strlen(text)), text)


def strndup(text: ByteSource, n: int) -> bytearray:
    """Return a new buffer of n + 1 bytes holding at most n bytes of text."""
    buffer = strnew(n)
    head = _cstring(text)[:n]
    buffer[:len(head)] = head
    return buffer


def strncat(dst: bytearray, src: ByteSource, n: int) -> bytearray:
    """Append at most n bytes of the string in src to the string in dst."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    start = strlen(dst)
    tail = _cstring(src)[:n]
    _require(dst, start + len(tail) + 1)
    dst[start:start + len(tail) + 1] = tail + b"\0"
    return dst


def strcat(dst: bytearray, src: ByteSource) -> bytearray:
    """Append the whole string in src to the string in dst."""
    return strncat(dst, src, strlen(src))


def strlcat(dst: bytearray, src: ByteSource, size: int) -> int:
    """Append src to dst so the result, terminator included, fits in size bytes.

    Returns the length of the string that would have been made without
    truncation: min(size, strlen(dst)) + strlen(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    start = strlen(dst)
    tail = _cstring(src)
    room = max(size - 1 - start, 0) if size > 0 else 0
    copied = tail[:room]
    _require(dst, start + len(copied) + 1)
    dst[start:start + len(copied) + 1] = copied + b"\0"
    return min(size, start) + len(tail)