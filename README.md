# pushswap

Two command-line tools for the push-swap sorting puzzle, and the small
string, memory and I/O helpers they are built on.

The puzzle has two stacks, **a** and **b**. Stack **a** starts with a list of
distinct integers and stack **b** starts empty. The goal is to leave every
number in **a**, in ascending order from the top, using only these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down by one (bottom goes to top) |

## Installation

```
pip install .
```

## Finding a sequence of operations

`push-swap` reads the numbers from its arguments and prints one operation per
line:

```
push-swap 3 2 1
```

Numbers can be given as separate arguments or several per argument, separated
by spaces (`push-swap "4 67 3" 87 23`). Each must be an optional `-` followed by
digits, fit in a signed 32-bit integer, and appear only once. Any other input
makes the program print `Error` on standard error. Input that is already in
order produces no operations.

The strategy depends on how many numbers there are:

- up to 4: a few swaps and one reverse rotation (with four numbers this does
  not always reach sorted order);
- up to 100: the smaller half goes to **b** around the median, each half is
  sorted, then **b** is pushed back;
- more: numbers move to **b** in chunks of 44 by rank, and the largest of **b**
  is pulled back each time.

## Checking a sequence

`push-swap-checker` takes the same numbers, reads operations from standard
input, one per line, and prints `OK` if they leave the numbers sorted in **a**
with **b** empty, or `KO` otherwise:

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

An unknown operation, a push from an empty stack, or bad numbers make it print
`Error` on standard error. With fewer than two numbers it prints nothing.

Options come before the numbers and can be combined (`-pc`); unknown letters
are ignored:

- `-p` print both stacks once the operations are done
- `-d` step mode: show the stacks and prompt for each operation; type
  `finish` (or end the input) to stop
- `-c` colour the `OK` / `KO` verdict
- `-s` slow mode: show the stacks and the last move after each operation,
  pausing five seconds each time
- `-l` print the number of operations after `OK`
- `-h` show usage and exit

Both commands always exit with status 0.

## Using it from Python

```python
from pushswap.sorter import sort_operations
from pushswap.stacks import Stacks

numbers = [5, 1, 4, 2, 3]
operations = sort_operations(numbers)

stacks = Stacks(numbers)
for operation in operations:
    stacks.apply(operation)
assert stacks.is_sorted()
```

- `pushswap.stacks` — the `Operation` enum, `parse_operation`, and `Stacks`
  with `apply` and `is_sorted`.
- `pushswap.parsing` — `parse_numbers` checks command-line style arguments and
  raises `InputError` for anything the tools would reject.
- `pushswap.sorter` — `Sorter` and `sort_operations`.
- `pushswap.checker` — `parse_options`, `run_commands`, `format_stacks` and
  `verdict`.

The remaining modules are general helpers: `chars` (character classes and
case), `convert` (`atoi`, `itoa`, based and unsigned forms), `memory` and
`strings` (byte buffers and NUL-terminated strings), `search` and `transform`
(finding, comparing, splitting and trimming text), `linked` (a singly linked
list), `output` (writing text and numbers to streams) and `lines` (a chunked
line reader).

## Running the tests

```
pip install .[test]
pytest
```