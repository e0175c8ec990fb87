"""Byte-buffer primitives: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ByteSource = Union[bytes, bytearray, memoryview]


def _check_span(data: ByteSource, n: int, what: str = "buffer") -> None:
    """Reject a negative length or one reaching past the end of data."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{n} bytes requested but the {what} holds only {len(data)}")


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first length bytes of buffer with the low byte of value."""
    _check_span(buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Set the first length bytes of buffer to zero."""
    memset(buffer, 0, length)


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of size bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def memcpy(dest: Buffer, src: ByteSource, n: int) -> Buffer:
    """Copy the first n bytes of src into the start of dest."""
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: Buffer, src: ByteSource, c: int, n: int) -> int | None:
    """Copy bytes from src to dest, stopping after the first byte equal to c.

    At most n bytes are copied. Returns the offset in dest just past the copied
    c, or None when c was not among the first n bytes.
    """
    _check_span(src, n, "source")
    found = memchr(src, c, n)
    count = n if found is None else found + 1
    _check_span(dest, count, "destination")
    dest[:count] = bytes(src[:count])
    return None if found is None else count


def memmove(buffer: Buffer, dest_offset: int, src_offset: int, n: int) -> Buffer:
    """Copy n bytes within buffer from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(buffer, src_offset + n)
    _check_span(buffer, dest_offset + n)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: ByteSource, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to the low byte of c among the first n, or None."""
    _check_span(data, n)
    offset = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if offset < 0 else offset


def memcmp(first: ByteSource, second: ByteSource, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_span(first, n, "first buffer")
    _check_span(second, n, "second buffer")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0