"""Building new strings from old: mapping, slicing, joining, trimming, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from .chars import is_whitespace

_WHITESPACE = " \t\n\v\r\f"


def _cstr(text: str) -> str:
    """Return text up to, not including, its first NUL."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == "\0"


def _check_sep(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def striter(buffer: MutableSequence, f: Callable[[Any], Any] | None) -> None:
    """Call f on each item of buffer up to a terminator.

    When f returns something other than None, that value replaces the item.
    """
    if f is None:
        return
    for index, item in enumerate(list(buffer)):
        if _is_terminator(item):
            break
        result = f(item)
        if result is not None:
            buffer[index] = result


def striteri(buffer: MutableSequence, f: Callable[[int, Any], Any] | None) -> None:
    """Like striter, but f also receives each item's index."""
    if f is None:
        return
    for index, item in enumerate(list(buffer)):
        if _is_terminator(item):
            break
        result = f(index, item)
        if result is not None:
            buffer[index] = result


def strmap(text: str, f: Callable[[str], str]) -> str:
    """Return a new string made of f applied to each character."""
    return "".join(f(ch) for ch in _cstr(text))


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f applied to each index and character."""
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(text)))


def strsub(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    body = _cstr(text)
    if not 0 <= start <= len(body):
        raise IndexError(f"start {start} lies outside a string of length {len(body)}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined end to end."""
    return _cstr(first) + _cstr(second)


def strtrim(text: str) -> str:
    """Return text without leading and trailing whitespace."""
    body = _cstr(text)
    trimmed = body.strip(_WHITESPACE)
    assert all(not is_whitespace(ch) for ch in trimmed[:1] + trimmed[-1:])
    return trimmed


def strsplit(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    _check_sep(sep)
    return [word for word in _cstr(text).split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Number of non-empty pieces text splits into on sep."""
    return len(strsplit(text, sep))


def remnchars(text: str, n: int) -> str:
    """Return text without its first n characters."""
    body = _cstr(text)
    if not 0 <= n <= len(body):
        raise ValueError(f"cannot remove {n} characters from a string of length {len(body)}")
    return body[n:]