"""Turning command-line arguments into the numbers for stack a."""

from __future__ import annotations

from collections.abc import Iterable

from .chars import is_number
from .convert import atoi
from .transform import strsplit

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """Raised for a malformed, out-of-range or repeated number."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_token(token: str) -> int:
    """Return the number a token stands for.

    A token is an optional '-' followed by digits and must fit in a signed
    32-bit integer.
    """
    if not is_number(token):
        raise InputError()
    value = atoi(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def add_number(numbers: list[int], value: int) -> None:
    """Append value to numbers; raise InputError if it is already there or out of range."""
    if not INT_MIN <= value <= INT_MAX or value in numbers:
        raise InputError()
    numbers.append(value)


def parse_numbers(arguments: Iterable[str]) -> list[int]:
    """Return the numbers of every argument, each split on spaces, in order."""
    numbers: list[int] = []
    for argument in arguments:
        for token in strsplit(argument, " "):
            add_number(numbers, parse_token(token))
    return numbers