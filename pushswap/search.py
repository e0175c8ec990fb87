"""Searching and comparing strings, with C string semantics.

A string ends at its first NUL character, if it has one. Positions are
returned as indices. A search for NUL finds the terminator, which sits at
index len(text).
"""

from __future__ import annotations


def _cstr(text: str) -> str:
    """Return text up to, not including, its first NUL."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(text: str, c: str) -> int | None:
    """Index of the first c in text, len(text) for NUL, or None."""
    _check_char(c)
    body = _cstr(text)
    if c == "\0":
        return len(body)
    index = body.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last c in text, len(text) for NUL, or None."""
    _check_char(c)
    body = _cstr(text)
    if c == "\0":
        return len(body)
    index = body.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of the first needle lying wholly within the first n characters.

    An empty needle is found at index 0.
    """
    body = _cstr(haystack)
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = body[:max(n, 0)].find(wanted)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first needle in haystack, 0 for an empty needle, or None."""
    return strnstr(haystack, needle, len(_cstr(haystack)))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters, the terminator included.

    Returns the code-point difference of the first unequal pair, or 0.
    """
    if n <= 0:
        return 0
    left = _cstr(first) + "\0"
    right = _cstr(second) + "\0"
    for a, b, _ in zip(left, right, range(n)):
        diff = ord(a) - ord(b)
        if diff or a == "\0":
            return diff
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two whole strings; negative, zero or positive."""
    return strncmp(first, second, len(_cstr(first)) + 1)


def strequ(first: str, second: str) -> bool:
    """True when the two strings are equal."""
    if first is None or second is None:
        raise TypeError("strings to compare must not be None")
    return strcmp(first, second) == 0


def strnequ(first: str, second: str, n: int) -> bool:
    """True when the first n characters of the two strings are equal."""
    if first is None or second is None:
        raise TypeError("strings to compare must not be None")
    return strncmp(first, second, n) == 0


def replacechr(text: str, find: str, replacement: str) -> str | None:
    """Return text with its first find replaced by replacement, or None if absent."""
    _check_char(replacement)
    index = strchr(text, find)
    if index is None:
        return None
    return text[:index] + replacement + text[index + 1:]