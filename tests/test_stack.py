import pytest

from pushswap.stack import Item, Stacks, is_sorted


def make(values):
    log = []
    return Stacks(values, log.append), log


def test_item_default_index():
    assert Item(7).index == -1
    assert Item(7).data == 7


def test_init_accepts_items_and_ints():
    stacks, _ = make([Item(3, 2), 1])
    assert stacks.values_a() == [3, 1]
    assert stacks.a[0].index == 2
    assert stacks.values_b() == []


def test_sa_swaps_top_two():
    stacks, log = make([1, 2, 3])
    stacks.sa()
    assert stacks.values_a() == [2, 1, 3]
    assert log == ["sa"]


@pytest.mark.parametrize("values", [[], [5]])
def test_sa_does_nothing_on_short_stack(values):
    stacks, log = make(values)
    stacks.sa()
    assert stacks.values_a() == values
    assert log == []


def test_sa_twice_is_identity():
    stacks, log = make([4, 8, 6])
    stacks.sa()
    stacks.sa()
    assert stacks.values_a() == [4, 8, 6]
    assert log == ["sa", "sa"]


def test_pb_and_pa_move_top():
    stacks, log = make([1, 2, 3])
    stacks.pb()
    stacks.pb()
    assert stacks.values_a() == [3]
    assert stacks.values_b() == [2, 1]
    stacks.pa()
    assert stacks.values_a() == [2, 3]
    assert stacks.values_b() == [1]
    assert log == ["pb", "pb", "pa"]


def test_push_from_empty_does_nothing():
    stacks, log = make([1])
    stacks.pa()
    assert stacks.values_a() == [1]
    assert log == []


def test_sb_swaps_b():
    stacks, log = make([1, 2])
    stacks.pb()
    stacks.pb()
    stacks.sb()
    assert stacks.values_b() == [1, 2]
    assert log == ["pb", "pb", "sb"]


def test_ra_moves_top_to_bottom():
    stacks, log = make([1, 2, 3])
    stacks.ra()
    assert stacks.values_a() == [2, 3, 1]
    assert log == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks, log = make([1, 2, 3])
    stacks.rra()
    assert stacks.values_a() == [3, 1, 2]
    assert log == ["rra"]


def test_ra_then_rra_round_trip():
    stacks, _ = make([9, 4, 7, 1])
    stacks.ra()
    stacks.rra()
    assert stacks.values_a() == [9, 4, 7, 1]


def test_rotations_on_short_stack_are_silent():
    stacks, log = make([1])
    stacks.ra()
    stacks.rra()
    stacks.rb()
    stacks.rrb()
    assert stacks.values_a() == [1]
    assert log == []


def test_rb_and_rrb():
    stacks, log = make([1, 2, 3])
    stacks.pb()
    stacks.pb()
    stacks.pb()
    assert stacks.values_b() == [3, 2, 1]
    stacks.rb()
    assert stacks.values_b() == [2, 1, 3]
    stacks.rrb()
    assert stacks.values_b() == [3, 2, 1]
    assert log[-2:] == ["rb", "rrb"]


def test_rr_always_reports():
    stacks, log = make([1, 2])
    stacks.rr()
    assert stacks.values_a() == [2, 1]
    assert log == ["rr"]


def test_ss_needs_both_stacks():
    stacks, log = make([1, 2, 3])
    stacks.ss()
    # a was swapped but b could not be, so nothing is reported
    assert stacks.values_a() == [2, 1, 3]
    assert log == []


def test_ss_swaps_both():
    stacks, log = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.ss()
    assert stacks.values_a() == [4, 3]
    assert stacks.values_b() == [1, 2]
    assert log[-1] == "ss"


def test_rrr_stops_when_a_cannot_move():
    stacks, log = make([1, 2, 3])
    stacks.pb()
    stacks.pb()
    stacks.rrr()
    assert stacks.values_b() == [2, 1]
    assert log == ["pb", "pb"]


def test_rrr_moves_both():
    stacks, log = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.rrr()
    assert stacks.values_a() == [4, 3]
    assert stacks.values_b() == [1, 2]
    assert log[-1] == "rrr"


def test_default_emit_writes_lines(capsys):
    stacks = Stacks([2, 1])
    stacks.sa()
    stacks.ra()
    assert capsys.readouterr().out == "sa\nra\n"


def test_operations_preserve_multiset():
    values = [5, 3, 8, 1, 9]
    stacks, _ = make(values)
    for op in ("pb", "pb", "ss", "rr", "rrr", "pa", "sa", "ra", "pa", "rra"):
        getattr(stacks, op)()
    assert sorted(stacks.values_a() + stacks.values_b()) == sorted(values)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], True),
        ([1, 1, 2], True),
        ([2, 1], False),
        ([1, 3, 2], False),
        ([4], True),
        ([], True),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(Item(v) for v in values) is expected


def test_is_sorted_on_stack_after_ops():
    stacks, _ = make([2, 1, 3])
    assert not is_sorted(stacks.a)
    stacks.sa()
    assert is_sorted(stacks.a)