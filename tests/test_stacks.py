from collections import deque

import pytest

from pushswap.stacks import (
    Operation,
    Stacks,
    parse_operation,
    push,
    reverse_rotate,
    rotate,
    swap,
)

ALL_NAMES = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_parse_operation_round_trip(name):
    assert str(parse_operation(name)) == name


@pytest.mark.parametrize("name", ["", "s", "SA", "rrrr", "finish", " sa"])
def test_parse_operation_rejects_unknown(name):
    with pytest.raises(ValueError):
        parse_operation(name)


def test_swap_exchanges_top_two():
    stack = deque([1, 2, 3])
    swap(stack)
    assert list(stack) == [2, 1, 3]


def test_swap_short_stack_unchanged():
    stack = deque([7])
    swap(stack)
    assert list(stack) == [7]


def test_push_moves_top():
    src, dst = deque([1, 2]), deque([9])
    push(src, dst)
    assert list(src) == [2]
    assert list(dst) == [1, 9]


def test_push_from_empty_raises():
    with pytest.raises(IndexError):
        push(deque(), deque([1]))


def test_rotate_and_reverse_are_inverse():
    stack = deque([1, 2, 3, 4])
    rotate(stack)
    assert list(stack) == [2, 3, 4, 1]
    reverse_rotate(stack)
    assert list(stack) == [1, 2, 3, 4]


def test_reverse_rotate_moves_bottom_to_top():
    stack = deque([1, 2, 3])
    reverse_rotate(stack)
    assert list(stack) == [3, 1, 2]


def test_apply_push_and_back():
    stacks = Stacks([3, 1, 2])
    stacks.apply("pb")
    assert list(stacks.a) == [1, 2]
    assert list(stacks.b) == [3]
    stacks.apply(Operation.PA)
    assert list(stacks.a) == [3, 1, 2]
    assert not stacks.b


def test_apply_combined_operations_affect_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("pb")
    stacks.apply("pb")
    stacks.apply("ss")
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]
    stacks.apply("rr")
    assert list(stacks.a) == [3, 4]
    assert list(stacks.b) == [2, 1]
    stacks.apply("rrr")
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]


def test_apply_unknown_raises():
    with pytest.raises(ValueError):
        Stacks([1, 2]).apply("xx")


def test_is_sorted():
    assert Stacks([1, 2, 3]).is_sorted()
    assert not Stacks([2, 1, 3]).is_sorted()


def test_is_sorted_false_when_b_not_empty():
    stacks = Stacks([1, 2, 3])
    stacks.apply("pb")
    assert not stacks.is_sorted()


def test_sequence_sorts_small_stack():
    stacks = Stacks([2, 1, 3])
    stacks.apply("sa")
    assert stacks.is_sorted()