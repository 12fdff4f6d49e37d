"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import pairwise


@dataclass
class Item:
    """A value on a stack with its rank among all values (-1 until assigned)."""

    data: int
    index: int = -1


def _print_line(name: str) -> None:
    sys.stdout.write(name + "\n")


def is_sorted(items: Iterable[Item]) -> bool:
    """Return True if the items' values never decrease from top to bottom."""
    return all(first.data <= second.data for first, second in pairwise(items))


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every operation that changes something reports its name through ``emit``.
    """

    def __init__(
        self,
        items: Iterable[Item | int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a: deque[Item] = deque(
            item if isinstance(item, Item) else Item(item) for item in items
        )
        self.b: deque[Item] = deque()
        self.emit = emit if emit is not None else _print_line

    # Primitive moves; each returns whether the stack changed.

    @staticmethod
    def _swap(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)
        return True

    @staticmethod
    def _rotate(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    @staticmethod
    def _push(to: deque[Item], source: deque[Item]) -> bool:
        if not source:
            return False
        to.appendleft(source.popleft())
        return True

    # Named operations.

    def sa(self) -> None:
        """Swap the two top items of a."""
        if self._swap(self.a):
            self.emit("sa")

    def sb(self) -> None:
        """Swap the two top items of b."""
        if self._swap(self.b):
            self.emit("sb")

    def ss(self) -> None:
        """Swap on a, then on b only if a was swapped; report only if both were."""
        if self._swap(self.a) and self._swap(self.b):
            self.emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self._push(self.a, self.b):
            self.emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self._push(self.b, self.a):
            self.emit("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if self._rotate(self.a):
            self.emit("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        if self._rotate(self.b):
            self.emit("rb")

    def rr(self) -> None:
        """Rotate both stacks where possible; always reported."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.emit("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if self._reverse(self.a):
            self.emit("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        if self._reverse(self.b):
            self.emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate a, then b only if a moved; report only if both did."""
        if self._reverse(self.a) and self._reverse(self.b):
            self.emit("rrr")

    def values_a(self) -> list[int]:
        """Values of a from top to bottom."""
        return [item.data for item in self.a]

    def values_b(self) -> list[int]:
        """Values of b from top to bottom."""
        return [item.data for item in self.b]