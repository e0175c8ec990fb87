"""Checking that a list of operations read from input sorts the given numbers."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional, TextIO

from .lines import read_lines
from .parsing import InputError, parse_numbers
from .stacks import Stacks, parse_operation

SLOW_DELAY = 5
OK_COLOUR = "\x1b[01;32m"
KO_COLOUR = "\x1b[01;31m"

_FLAGS = {
    "p": "print_stacks",
    "d": "debug",
    "c": "color",
    "s": "slow",
    "l": "count_steps",
    "h": "show_help",
}


@dataclass
class Options:
    """Switches given on the command line, and the number of steps taken."""

    print_stacks: bool = False
    debug: bool = False
    color: bool = False
    slow: bool = False
    count_steps: bool = False
    show_help: bool = False
    steps: int = 0


def parse_options(argv: Sequence[str]) -> tuple[Options, list[str]]:
    """Read leading arguments that begin with '-' as option letters.

    Returns the options and the arguments left after them. Unknown letters
    are ignored.
    """
    options = Options()
    index = 0
    while index < len(argv) and argv[index].startswith("-"):
        for flag in argv[index][1:]:
            name = _FLAGS.get(flag)
            if name is not None:
                setattr(options, name, True)
        index += 1
    return options, list(argv[index:])


def usage() -> str:
    """The help text."""
    return (
        "usage: checker [-pdcslh] [Numbers...]\n"
        "Options:\n"
        "\t-p: prints the numbers when operations are complete.\n"
        "\t-d: Debugger mode you can go step by step and prints out "
        "the stacks as you go on\n"
        "\t-c: Enables colour\n"
        "\t-s: Slow mode\n"
    )


def format_stacks(stacks: Stacks) -> str:
    """Both stacks side by side, a then b, top row first, with a footer."""
    rows = zip_longest(stacks.a, stacks.b, fillvalue="")
    body = "".join(f"{left}\t{right}\n" for left, right in rows)
    return body + "-\t-\nA\tB\n"


def _do_command(stacks: Stacks, command: str, options: Options) -> None:
    if options.count_steps:
        options.steps += 1
    try:
        stacks.apply(parse_operation(command))
    except (ValueError, IndexError) as exc:
        raise InputError() from exc


def run_commands(
    stacks: Stacks, lines: Iterable[str], options: Options, output: TextIO
) -> None:
    """Apply each command line to the stacks.

    In debug mode the stacks and a prompt are written before each command,
    and 'finish' ends the run. Raises InputError for a bad command.
    """
    if options.debug:
        commands = iter(lines)
        while True:
            output.write(format_stacks(stacks))
            output.write("Type operation or finish: ")
            output.flush()
            command = next(commands, None)
            if command is None or command == "finish":
                break
            _do_command(stacks, command, options)
    else:
        for command in lines:
            _do_command(stacks, command, options)
            if options.slow:
                output.write(format_stacks(stacks))
                output.write(f"---------------------\nLast Move: {command}\n")
                output.flush()
                time.sleep(SLOW_DELAY)
    if options.print_stacks:
        output.write(format_stacks(stacks))


def verdict(stacks: Stacks, options: Options) -> str:
    """'OK' when a is sorted and b empty, otherwise 'KO', as output lines."""
    if not stacks.is_sorted():
        return f"{KO_COLOUR if options.color else ''}KO\n"
    text = f"{OK_COLOUR if options.color else ''}OK\n"
    if options.count_steps:
        text += f"Number of steps: {options.steps}\n"
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and report whether they sort the numbers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    options, rest = parse_options(args)
    if options.show_help:
        sys.stdout.write(usage())
        return 0
    try:
        numbers = parse_numbers(rest)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if len(numbers) < 2:
        return 0
    stacks = Stacks(numbers)
    try:
        run_commands(stacks, read_lines(sys.stdin), options, sys.stdout)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(verdict(stacks, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())