"""The two stacks of the puzzle and the moves allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


def assign_indices(values: Iterable[int]) -> list[int]:
    """Return the rank of every value, 0 for the smallest.

    Equal values are ranked by position, the later one getting the higher rank.
    """
    values = list(values)
    order = sorted(range(len(values)), key=lambda pos: (values[pos], pos))
    ranks = [0] * len(values)
    for rank, pos in enumerate(order):
        ranks[pos] = rank
    return ranks


def _swap(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque[Node], target: deque[Node]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks *a* and *b*, top first, with the list of moves made so far.

    A move that changes nothing is not recorded, except ``rr`` and ``rrr``,
    which are always recorded.
    """

    def __init__(self, values: Iterable[int] = (), indices: Iterable[int] | None = None):
        values = list(values)
        if indices is None:
            ranks = [-1] * len(values)
        else:
            ranks = list(indices)
            if len(ranks) != len(values):
                raise ValueError("values and indices differ in length")
        self.a: deque[Node] = deque(Node(v, i) for v, i in zip(values, ranks))
        self.b: deque[Node] = deque()
        self.operations: list[str] = []

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Build stack *a* from ``values`` with every rank assigned."""
        values = list(values)
        return cls(values, assign_indices(values))

    def __repr__(self) -> str:
        return f"Stacks(a={self.a_values()}, b={self.b_values()})"

    def a_indices(self) -> list[int]:
        return [node.index for node in self.a]

    def b_indices(self) -> list[int]:
        return [node.index for node in self.b]

    def a_values(self) -> list[int]:
        return [node.value for node in self.a]

    def b_values(self) -> list[int]:
        return [node.value for node in self.b]

    def _record(self, done: bool, name: str) -> None:
        if done:
            self.operations.append(name)

    def sa(self) -> None:
        self._record(_swap(self.a), "sa")

    def sb(self) -> None:
        self._record(_swap(self.b), "sb")

    def ss(self) -> None:
        first = _swap(self.a)
        second = _swap(self.b)
        self._record(first or second, "ss")

    def pa(self) -> None:
        self._record(_push(self.b, self.a), "pa")

    def pb(self) -> None:
        self._record(_push(self.a, self.b), "pb")

    def ra(self) -> None:
        self._record(_rotate(self.a), "ra")

    def rb(self) -> None:
        self._record(_rotate(self.b), "rb")

    def rr(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        self._record(_reverse_rotate(self.a), "rra")

    def rrb(self) -> None:
        self._record(_reverse_rotate(self.b), "rrb")

    def rrr(self) -> None:
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append("rrr")