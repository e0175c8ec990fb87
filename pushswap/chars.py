"""Character classification and case conversion for ASCII text."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\r\f")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(c, int):
        return c
    return ord(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_whitespace(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, carriage return or form feed."""
    if isinstance(c, int):
        return 0 <= c < 0x110000 and chr(c) in _WHITESPACE
    return c in _WHITESPACE


def is_number(text: str) -> bool:
    """True when text is an optional leading '-' followed only by digits.

    An empty string, or a lone '-', counts as a number.
    """
    body = text[1:] if text.startswith("-") else text
    return all(is_digit(ch) for ch in body)


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; leave anything else unchanged."""
    if "a" <= c <= "z" and len(c) == 1:
        return chr(ord(c) - ord("a") + ord("A"))
    return c


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; leave anything else unchanged."""
    if "A" <= c <= "Z" and len(c) == 1:
        return chr(ord(c) - ord("A") + ord("a"))
    return c


def make_upper(text: str) -> str:
    """Return text with every ASCII lower-case letter upper-cased."""
    return "".join(to_upper(ch) for ch in text)