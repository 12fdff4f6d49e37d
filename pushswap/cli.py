"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .parsing import InputError, build_stack, check_args
from .sorter import sort_stacks
from .stack import Stacks, is_sorted


def run(args: Sequence[str], out: TextIO) -> int:
    """Write to ``out`` the operations that sort ``args``; return the exit status.

    Nothing is written when there are no arguments, when the first one is
    empty or when the numbers are already in order. Invalid input writes
    ``Error`` on a line of its own.
    """
    if not args or args[0] == "":
        return 0
    try:
        check_args(args)
    except InputError:
        out.write("Error\n")
        return 0
    stacks = Stacks(build_stack(args), emit=lambda name: out.write(name + "\n"))
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run with the process arguments (or ``argv``) and print to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    return run(list(argv), sys.stdout)


if __name__ == "__main__":
    sys.exit(main())