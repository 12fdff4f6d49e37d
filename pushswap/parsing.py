"""Reading the numbers given on the command line into a ranked stack."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .stack import Item

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile("[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_PLAIN_NUMBER = re.compile("-?[0-9]*")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _leading_number(text: str) -> int:
    """Value of the optional sign and digits after leading whitespace."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def parse_int(text: str) -> int:
    """Read a leading integer; raise InputError if it does not fit in 32 bits.

    Whitespace before the number and an optional sign are accepted; reading
    stops at the first non-digit, and text without digits reads as 0.
    """
    value = _leading_number(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def split_words(text: str) -> list[str]:
    """Split on spaces only, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def tokens(args: Sequence[str]) -> list[str]:
    """The numbers to read: a single argument is split on spaces."""
    if len(args) == 1:
        return split_words(args[0])
    return list(args)


def _is_number(word: str) -> bool:
    return _PLAIN_NUMBER.fullmatch(word) is not None


def check_args(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return their values.

    Each word must be an optional minus sign followed by digits, fit in a
    32-bit integer and not repeat a later value; otherwise InputError.
    """
    words = tokens(args)
    values = []
    for position, word in enumerate(words):
        current = parse_int(word)
        if not _is_number(word):
            raise InputError()
        if any(parse_int(other) == current for other in words[position + 1:]):
            raise InputError()
        values.append(current)
    return values


def assign_indices(values: Sequence[int]) -> list[int]:
    """Rank of each value among all of them; equal values rank in order."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks


def build_stack(args: Sequence[str]) -> list[Item]:
    """Items for stack a, top first, each carrying its rank."""
    values = [_wrap_int32(_leading_number(word)) for word in tokens(args)]
    return [
        Item(value, rank) for value, rank in zip(values, assign_indices(values))
    ]