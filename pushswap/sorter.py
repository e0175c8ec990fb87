"""Working out an instruction list that sorts stack a."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from .parsing import InputError, parse_numbers
from .stacks import Operation, Stacks

Compare = Callable[[int, int], bool]

CHUNK = 44
SMALL_LIMIT = 4
MEDIUM_LIMIT = 100

_MOVES = {
    "a": {
        "swap": Operation.SA,
        "rotate": Operation.RA,
        "reverse": Operation.RRA,
        "push": Operation.PB,
    },
    "b": {
        "swap": Operation.SB,
        "rotate": Operation.RB,
        "reverse": Operation.RRB,
        "push": Operation.PA,
    },
}


def ascending(x: int, y: int) -> bool:
    """True when x and y are out of order for an ascending stack."""
    return x > y


def descending(x: int, y: int) -> bool:
    """True when x and y are out of order for a descending stack."""
    return y > x


def is_out_of_order(stack: Iterable[int], compare: Compare) -> bool:
    """True when some neighbouring pair, top to bottom, is out of order."""
    items = list(stack)
    return any(compare(x, y) for x, y in zip(items, items[1:]))


def find_extreme(stack: Iterable[int], compare: Compare) -> tuple[int, int]:
    """Return the value that compare ranks first, and its position from the top.

    With ascending this is the smallest value; with descending the largest.
    The earliest of equal candidates wins.
    """
    items = iter(stack)
    try:
        best = next(items)
    except StopIteration:
        raise ValueError("cannot search an empty stack") from None
    place = 0
    for position, value in enumerate(items, start=1):
        if compare(best, value):
            best, place = value, position
    return best, place


def next_greater(stack: Sequence[int], num: int) -> int:
    """Smallest value in stack greater than num, or -1 when there is none."""
    if not stack:
        raise ValueError("cannot search an empty stack")
    greater = [value for value in stack if value > num]
    return min(greater) if greater else -1


def median(stack: Sequence[int]) -> int:
    """The (len // 2)-th smallest value, counting from one; the minimum for short stacks."""
    value, _ = find_extreme(stack, ascending)
    for _ in range(len(stack) // 2 - 1):
        value = next_greater(stack, value)
    return value


def ranks(stack: Iterable[int]) -> list[int]:
    """Rank of each value, in stack order: 1 for the smallest, len for the largest."""
    items = list(stack)
    size = len(items)
    return [size - sum(1 for other in items if value < other) for value in items]


class Sorter:
    """Sorts stack a with the puzzle's operations, recording each one it makes."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.stacks = Stacks(numbers)
        self.operations: list[Operation] = []

    def _stack(self, name: str):
        if name == "a":
            return self.stacks.a
        if name == "b":
            return self.stacks.b
        raise ValueError(f"unknown stack {name!r}")

    def _do(self, operation: Operation) -> None:
        self.stacks.apply(operation)
        self.operations.append(operation)

    def _swap(self, name: str) -> None:
        self._stack(name)
        self._do(_MOVES[name]["swap"])

    def _rotate(self, name: str) -> None:
        if len(self._stack(name)) >= 2:
            self._do(_MOVES[name]["rotate"])

    def _reverse(self, name: str) -> None:
        if len(self._stack(name)) >= 2:
            self._do(_MOVES[name]["reverse"])

    def _push(self, name: str) -> None:
        """Move the top of the named stack onto the other one."""
        self._stack(name)
        self._do(_MOVES[name]["push"])

    def sort_three(self, name: str, compare: Compare) -> None:
        """Order a stack of up to three items with swaps and a reverse rotation."""
        stack = self._stack(name)
        if len(stack) >= 2 and compare(stack[0], stack[1]):
            self._swap(name)
        if len(stack) >= 3:
            if is_out_of_order(stack, compare):
                self._reverse(name)
            if is_out_of_order(stack, compare):
                self._swap(name)

    def push_extreme(self, name: str, compare: Compare) -> None:
        """Bring the extreme item to the top by the shorter way round, then push it."""
        stack = self._stack(name)
        _, place = find_extreme(stack, compare)
        size = len(stack)
        if place <= size // 2:
            for _ in range(place):
                self._rotate(name)
        else:
            for _ in range(size - place):
                self._reverse(name)
        self._push(name)

    def sort_small(self, name: str, compare: Compare) -> None:
        """Push extremes away until three remain, order those, and for a push them back."""
        extra = len(self._stack(name)) - 3
        for _ in range(extra):
            self.push_extreme(name, compare)
        self.sort_three(name, compare)
        if name == "a":
            for _ in range(extra):
                self._push("b")

    def sort_medium(self) -> None:
        """Split a around its median, sort both halves, then merge b back onto a."""
        a, b = self.stacks.a, self.stacks.b
        half = len(a) // 2
        pivot = median(a)
        while len(b) < half:
            if a[0] <= pivot:
                self._push("a")
            else:
                self._rotate("a")
        self.sort_small("a", ascending)
        self.sort_small("b", descending)
        while b:
            self._push("b")

    def sort_large(self) -> None:
        """Move a to b in rank chunks, then pull the largest of b back each time."""
        a, b = self.stacks.a, self.stacks.b
        rank_of = dict(zip(a, ranks(a)))
        limit = 0
        pushed = 1
        while a:
            limit += CHUNK
            while pushed < limit and a:
                if rank_of[a[0]] <= limit:
                    pushed += 1
                    self._push("a")
                else:
                    self._rotate("a")
        while b:
            self.push_extreme("b", descending)

    def run(self) -> list[Operation]:
        """Sort a when it is out of order and return the operations made."""
        a = self.stacks.a
        if not a or not is_out_of_order(a, ascending):
            return list(self.operations)
        size = len(a)
        if size <= SMALL_LIMIT:
            self.sort_three("a", ascending)
        elif size <= MEDIUM_LIMIT:
            self.sort_medium()
        else:
            self.sort_large()
        return list(self.operations)


def sort_operations(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given numbers, top of a first."""
    return Sorter(numbers).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for operation in sort_operations(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())