"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(Enum):
    """One move of the puzzle, named as it is written in an instruction list."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Return the operation named by text; raise ValueError for an unknown name."""
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation {text!r}") from None


def swap(stack: deque) -> None:
    """Exchange the two top items; do nothing when there are fewer than two."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(source: deque, destination: deque) -> None:
    """Move the top item of source onto destination.

    Raises IndexError when source is empty.
    """
    if not source:
        raise IndexError("cannot push from an empty stack")
    destination.appendleft(source.popleft())


def rotate(stack: deque) -> None:
    """Move the top item to the bottom."""
    if len(stack) >= 2:
        stack.rotate(-1)


def reverse_rotate(stack: deque) -> None:
    """Move the bottom item to the top."""
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stack a, filled from the given numbers top first, and an empty stack b."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation, given as an Operation or its name."""
        if not isinstance(operation, Operation):
            operation = parse_operation(operation)
        if operation in (Operation.SA, Operation.SS):
            swap(self.a)
        if operation in (Operation.SB, Operation.SS):
            swap(self.b)
        if operation is Operation.PA:
            push(self.b, self.a)
        if operation is Operation.PB:
            push(self.a, self.b)
        if operation in (Operation.RA, Operation.RR):
            rotate(self.a)
        if operation in (Operation.RB, Operation.RR):
            rotate(self.b)
        if operation in (Operation.RRA, Operation.RRR):
            reverse_rotate(self.a)
        if operation in (Operation.RRB, Operation.RRR):
            reverse_rotate(self.b)

    def is_sorted(self) -> bool:
        """True when b is empty and a rises from top to bottom."""
        if self.b:
            return False
        items = list(self.a)
        return all(x <= y for x, y in zip(items, items[1:]))

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"