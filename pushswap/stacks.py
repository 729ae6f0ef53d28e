"""The two stacks and the operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class PushSwap:
    """Stacks ``a`` and ``b`` (top at the left) with a log of operations.

    Every operation performed is appended to ``operations`` under the name
    the program prints for it.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __len__(self) -> int:
        return len(self.a)

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)}, b={list(self.b)})"

    def sa(self) -> None:
        """Swap the two top elements of stack a."""
        if len(self.a) < 2:
            raise IndexError("sa needs at least two elements on stack a")
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.appendleft(first)
        self.a.appendleft(second)
        self.operations.append("sa")

    def ra(self) -> None:
        """Move the top of stack a to its bottom."""
        if not self.a:
            raise IndexError("ra on an empty stack a")
        self.a.rotate(-1)
        self.operations.append("ra")

    def rra(self) -> None:
        """Move the bottom of stack a to its top."""
        if len(self.a) < 2:
            raise IndexError("rra needs at least two elements on stack a")
        self.a.rotate(1)
        self.operations.append("rra")

    def pb(self) -> None:
        """Move the top of stack a onto stack b."""
        if not self.a:
            raise IndexError("pb on an empty stack a")
        self.b.appendleft(self.a.popleft())
        self.operations.append("pb")

    def pa(self) -> None:
        """Move the top of stack b onto stack a."""
        if not self.b:
            raise IndexError("pa on an empty stack b")
        self.a.appendleft(self.b.popleft())
        self.operations.append("pa")


def ranks(values: Iterable[int]) -> list[int]:
    """Replace each value by the number of values smaller than it."""
    items = list(values)
    order = {value: rank for rank, value in enumerate(sorted(set(items)))}
    return [order[value] for value in items]