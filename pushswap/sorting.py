"""Strategies that sort stack a using the push-swap operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from itertools import islice, pairwise

from .stacks import PushSwap, ranks

_Move = Callable[[PushSwap], None]


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when no value is greater than the one after it."""
    return all(left <= right for left, right in pairwise(values))


def _require_size(machine: PushSwap, size: int) -> None:
    if len(machine.a) != size:
        raise ValueError(
            f"expected {size} elements on stack a, found {len(machine.a)}"
        )


def sort_three(machine: PushSwap) -> None:
    """Sort a stack a of exactly three elements in at most two moves."""
    _require_size(machine, 3)
    first, second, third = islice(machine.a, 3)
    if first < second > third and third > first:
        machine.rra()
        machine.sa()
    elif first > second < third and third > first:
        machine.sa()
    elif first < second > third and third < first:
        machine.rra()
    elif first > second < third and third < first:
        machine.ra()
    elif first > second > third:
        machine.sa()
        machine.rra()


def _isolate_minimum(
    machine: PushSwap,
    moves: Mapping[int, Sequence[_Move]],
    inner: _Move,
) -> None:
    """Bring the minimum to the top, park it on b, sort the rest, bring it back."""
    position = machine.a.index(min(machine.a))
    for move in moves[position]:
        move(machine)
    machine.pb()
    inner(machine)
    machine.pa()


_FOUR_MOVES: dict[int, tuple[_Move, ...]] = {
    0: (),
    1: (PushSwap.sa,),
    2: (PushSwap.rra, PushSwap.rra),
    3: (PushSwap.rra,),
}

_FIVE_MOVES: dict[int, tuple[_Move, ...]] = {
    0: (),
    1: (PushSwap.sa,),
    2: (PushSwap.ra, PushSwap.ra),
    3: (PushSwap.rra, PushSwap.rra),
    4: (PushSwap.rra,),
}

_SIX_MOVES: dict[int, tuple[_Move, ...]] = {
    0: (),
    1: (PushSwap.sa,),
    2: (PushSwap.ra, PushSwap.ra),
    3: (PushSwap.ra, PushSwap.ra, PushSwap.ra),
    4: (PushSwap.rra, PushSwap.rra),
    5: (PushSwap.rra,),
}


def sort_four(machine: PushSwap) -> None:
    """Sort a stack a of exactly four elements."""
    _require_size(machine, 4)
    _isolate_minimum(machine, _FOUR_MOVES, sort_three)


def sort_five(machine: PushSwap) -> None:
    """Sort a stack a of exactly five elements."""
    _require_size(machine, 5)
    _isolate_minimum(machine, _FIVE_MOVES, sort_four)


def sort_six(machine: PushSwap) -> None:
    """Sort a stack a of exactly six elements."""
    _require_size(machine, 6)
    _isolate_minimum(machine, _SIX_MOVES, sort_five)


def highest_bit(num: int) -> int:
    """Return the position of the most significant set bit of a positive number."""
    if num < 1:
        raise ValueError("highest_bit needs a positive number")
    return num.bit_length() - 1


def radix_sort(machine: PushSwap) -> None:
    """Sort stack a by a binary radix sort on the ranks of its values.

    Every bit up to the highest bit of the largest rank gets one full pass,
    even when the stack is already sorted before the last one.
    """
    size = len(machine.a)
    rank_of = dict(zip(machine.a, ranks(machine.a)))
    for bit in range(highest_bit(size - 1) + 1):
        for _ in range(size):
            if (rank_of[machine.a[0]] >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while machine.b:
            machine.pa()


_SMALL_SORTS: dict[int, _Move] = {
    2: PushSwap.sa,
    3: sort_three,
    4: sort_four,
    5: sort_five,
    6: sort_six,
}


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the values, nothing if already sorted."""
    machine = PushSwap(values)
    if not is_sorted(machine.a):
        strategy = _SMALL_SORTS.get(len(machine), radix_sort)
        strategy(machine)
    return machine.operations