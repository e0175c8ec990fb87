"""Conversions between integers and their decimal or based text forms."""

from __future__ import annotations

from .chars import is_digit, is_whitespace

_DIGITS = "0123456789abcdef"
_INTMAX_MIN = -(2**63)
_INTMAX_MAX = 2**63 - 1
_UINTMAX_MODULUS = 2**64
_UINT_MODULUS = 2**32


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up to
    the first non-digit. Text with no digits parses as 0.
    """
    pos = 0
    while pos < len(text) and is_whitespace(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal form of a signed 64-bit integer."""
    if not _INTMAX_MIN <= n <= _INTMAX_MAX:
        raise OverflowError(f"{n} does not fit in a signed 64-bit integer")
    return str(n)


def itoa_base(n: int, base: int) -> str:
    """Return n as an unsigned 64-bit value written in base 2 to 16.

    Digits above nine are lower-case letters; negative values wrap modulo 2**64.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    value = n % _UINTMAX_MODULUS
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def itoa_unsigned(n: int) -> str:
    """Return the decimal form of n taken as an unsigned 32-bit value."""
    return str(n % _UINT_MODULUS)


def utoa(n: int) -> str:
    """Return the decimal form of n taken as an unsigned 64-bit value."""
    return str(n % _UINTMAX_MODULUS)


def make_unsigned(n: int) -> int:
    """Reinterpret a 32-bit signed integer's bits as an unsigned value."""
    return n % _UINT_MODULUS