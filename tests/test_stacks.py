import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import PushSwap, ranks

UNIQUE = st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=20)


def test_sa_swaps_top_two():
    values = [5, 8, 1]
    machine = PushSwap(values)
    machine.sa()
    assert list(machine.a) == [values[1], values[0], values[2]]
    assert machine.operations == ["sa"]


def test_ra_moves_top_to_bottom():
    values = [5, 8, 1]
    machine = PushSwap(values)
    machine.ra()
    assert list(machine.a) == values[1:] + values[:1]
    assert machine.operations == ["ra"]


def test_rra_moves_bottom_to_top():
    values = [5, 8, 1]
    machine = PushSwap(values)
    machine.rra()
    assert list(machine.a) == values[-1:] + values[:-1]
    assert machine.operations == ["rra"]


def test_pb_and_pa_transfer_tops():
    values = [5, 8, 1]
    machine = PushSwap(values)
    machine.pb()
    machine.pb()
    assert list(machine.b) == [values[1], values[0]]
    assert list(machine.a) == values[2:]
    machine.pa()
    assert list(machine.a) == [values[1], values[2]]
    assert machine.operations == ["pb", "pb", "pa"]


@given(UNIQUE)
def test_sa_twice_restores(values):
    machine = PushSwap(values)
    machine.sa()
    machine.sa()
    assert list(machine.a) == values


@given(UNIQUE)
def test_ra_then_rra_restores(values):
    machine = PushSwap(values)
    machine.ra()
    machine.rra()
    assert list(machine.a) == values
    assert machine.operations == ["ra", "rra"]


@given(UNIQUE)
def test_push_round_trip(values):
    machine = PushSwap(values)
    for _ in values:
        machine.pb()
    assert list(machine.b) == values[::-1]
    assert not machine.a
    for _ in values:
        machine.pa()
    assert list(machine.a) == values
    assert not machine.b


@given(UNIQUE)
def test_full_rotation_restores(values):
    machine = PushSwap(values)
    for _ in values:
        machine.ra()
    assert list(machine.a) == values
    assert len(machine) == len(values)


def test_errors_on_too_small_stacks():
    machine = PushSwap([1])
    with pytest.raises(IndexError):
        machine.sa()
    with pytest.raises(IndexError):
        machine.pa()
    with pytest.raises(IndexError):
        PushSwap([]).ra()
    with pytest.raises(IndexError):
        PushSwap([]).pb()
    assert machine.operations == []


def test_ranks_example():
    assert ranks([30, -10, 20]) == [2, 0, 1]


@given(UNIQUE)
def test_ranks_is_permutation_preserving_order(values):
    result = ranks(values)
    assert sorted(result) == list(range(len(values)))
    for x, y, rx, ry in zip(values, values[1:], result, result[1:]):
        assert (x < y) == (rx < ry)