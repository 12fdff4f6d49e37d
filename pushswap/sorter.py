"""Choosing the operations that sort stack a."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .parsing import assign_indices
from .stack import Item, Stacks, is_sorted


def three_case(values: Sequence[int]) -> int:
    """Classify the order of three values; 0 means already in order."""
    first, second, third = values[:3]
    if first > second and third > first:
        return 1
    if first > second and second > third:
        return 2
    if first > second and first > third:
        return 3
    if second > third and third > first:
        return 4
    if second > first and first > third:
        return 5
    return 0


def sort_three(stacks: Stacks) -> None:
    """Sort the three items of a."""
    case = three_case(stacks.values_a())
    if case == 1:
        stacks.sa()
    elif case == 2:
        stacks.sa()
        stacks.rra()
    elif case == 3:
        stacks.ra()
    elif case == 4:
        stacks.sa()
        stacks.ra()
    elif case == 5:
        stacks.rra()


def _position(stacks: Stacks, index: int) -> int:
    """1-based position in a of the item with this rank, or len + 1."""
    return next(
        (pos for pos, item in enumerate(stacks.a, start=1) if item.index == index),
        len(stacks.a) + 1,
    )


def bring_to_top_four(stacks: Stacks, index: int) -> None:
    """Move the item of the given rank to the top of a four-item stack a."""
    position = _position(stacks, index)
    if position == 2:
        stacks.sa()
    elif position == 3:
        stacks.rra()
        stacks.rra()
    elif position == 4:
        stacks.rra()


def bring_to_top_five(stacks: Stacks, index: int) -> None:
    """Move rank 0 (of five items) or rank 1 (of four) to the top of a."""
    position = _position(stacks, index)
    if position == 1:
        return
    if position == 2:
        stacks.sa()
    elif position == 3:
        stacks.ra()
        stacks.ra()
    elif index == 0 and position == 4:
        stacks.rra()
        stacks.rra()
    elif (position == 4 and index == 1) or (position == 5 and index == 0):
        stacks.rra()


def _sort_four(stacks: Stacks) -> None:
    bring_to_top_four(stacks, 0)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def _sort_five(stacks: Stacks) -> None:
    bring_to_top_five(stacks, 0)
    stacks.pb()
    bring_to_top_five(stacks, 1)
    stacks.pb()
    sort_three(stacks)
    if stacks.b[0].data < stacks.b[1].data:
        stacks.sb()
    stacks.pa()
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort a by the bits of each item's rank, lowest bit first."""
    size = len(stacks.a)
    bit = 0
    while not is_sorted(stacks.a):
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
        bit += 1


def sort_stacks(stacks: Stacks) -> None:
    """Sort a, whose items carry their ranks, choosing a method by size."""
    size = len(stacks.a)
    if size > 5:
        radix_sort(stacks)
    elif size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        _sort_four(stacks)
    elif size == 5:
        _sort_five(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Names of the operations that sort the values; none if already sorted."""
    numbers = list(values)
    moves: list[str] = []
    stacks = Stacks(
        (Item(value, rank) for value, rank in zip(numbers, assign_indices(numbers))),
        emit=moves.append,
    )
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return moves