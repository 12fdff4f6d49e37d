# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of moves. It prints the moves it makes, one per line.

The moves are:

| move  | effect                                                        |
|-------|---------------------------------------------------------------|
| `sa`  | swap the top two items of `a`                                 |
| `sb`  | swap the top two items of `b`                                 |
| `ss`  | `sa`, then `sb` only if `a` was swapped                       |
| `pa`  | move the top of `b` onto `a`                                  |
| `pb`  | move the top of `a` onto `b`                                  |
| `ra`  | rotate `a` up: the top item goes to the bottom                |
| `rb`  | rotate `b` up                                                 |
| `rr`  | `ra` and `rb` together                                        |
| `rra` | rotate `a` down: the bottom item goes to the top              |
| `rrb` | rotate `b` down                                               |
| `rrr` | `rra`, then `rrb` only if `a` moved                           |

A move that changes nothing is not reported. `rr` is the exception and is
always reported.

## Installing

```
pip install .
```

## Using the command

Pass the numbers as separate arguments, or as one argument with the numbers
separated by spaces. The first number is the top of stack `a`.

```
push_swap 2 1 3
push_swap "3 2 1"
```

The command prints nothing in these cases:

- no arguments are given
- the first argument is empty
- the numbers are already in order

Each number must be an optional minus sign followed by digits, and must fit in
a 32-bit signed integer. No number may repeat another. If any of these rules
is broken, the command writes `Error` on a line of its own to standard output
and sorts nothing.

Up to five numbers are sorted with fixed move sequences. Longer inputs are
sorted with a binary radix sort on each number's rank.

## Using the library

```python
from pushswap.sorter import solve

moves = solve([3, 2, 1])   # ["sa", "rra"]
```

- `pushswap.sorter.solve(values)` returns the list of move names that sorts
  the values. The list is empty if the values are already sorted.
- `pushswap.parsing.check_args(args)` validates command-line style arguments
  and returns their values. It raises `pushswap.parsing.InputError` on bad
  input.
- `pushswap.parsing.build_stack(args)` turns the arguments into
  `pushswap.stack.Item`s that carry their ranks. It does not validate them.
- `pushswap.stack.Stacks(items, emit)` holds both stacks and has one method
  per move (`sa()`, `pb()`, `rra()` and so on). Each move that is reported is
  passed by name to `emit`, which prints to standard output by default. You
  can read the stacks with `values_a()` and `values_b()`.
- `pushswap.cli.run(args, out)` does what the command does and writes to any
  text stream.

## What it does not do

The package only produces moves. It has no command that reads a list of moves
and checks whether they sort a given input.

## Running the tests

```
pip install .[test]
pytest
```