"""Sorting stack *a* with the moves of the puzzle."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Stacks


def get_max_bits(count: int) -> int:
    """Return how many bits are needed to write the largest rank, ``count - 1``."""
    return max(count - 1, 0).bit_length()


def is_sorted(stacks: Stacks) -> bool:
    """Tell whether stack *a* holds the ranks 0, 1, 2, ... from the top down."""
    return stacks.a_indices() == list(range(len(stacks.a)))


def push_back_to_a(stacks: Stacks) -> None:
    """Move every element of *b* onto *a*."""
    while stacks.b:
        stacks.pa()


def radix(stacks: Stacks) -> None:
    """Sort *a* by ranks, one bit at a time, using *b* as the spare stack."""
    max_bits = get_max_bits(len(stacks.a))
    bit = 0
    while bit < max_bits and not is_sorted(stacks):
        for _ in range(len(stacks.a)):
            if is_sorted(stacks):
                break
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        push_back_to_a(stacks)
        bit += 1


def sort_two(stacks: Stacks) -> None:
    """Swap the top two of *a* when the first ranks below the second."""
    if stacks.a[0].index < stacks.a[1].index:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Put the three elements of *a* in order with at most two moves."""
    one, two, three = (node.index for node in list(stacks.a)[:3])
    if two < one < three:
        stacks.sa()
    elif three < one < two:
        stacks.rra()
    elif one < three < two:
        stacks.rra()
        stacks.sa()
    elif two < three < one:
        stacks.ra()
    elif three < two < one:
        stacks.ra()
        stacks.sa()


def sort_up_to_five(stacks: Stacks) -> None:
    """Sort four or five elements: park ranks 0 and 1 on *b*, sort the rest."""
    size = len(stacks.a)
    if size < 3:
        raise ValueError("need at least three elements")
    if sum(1 for index in stacks.a_indices() if index < 2) < size - 3:
        raise ValueError("not enough low ranks to move onto b")
    while size != 3:
        if stacks.a[0].index < 2:
            stacks.pb()
            size -= 1
        else:
            stacks.ra()
    sort_three(stacks)
    push_back_to_a(stacks)
    if stacks.a[0].index > stacks.a[1].index:
        stacks.sa()


def solve(values: Iterable[int]) -> Stacks:
    """Build the stacks from ``values`` and sort them; the moves are recorded."""
    stacks = Stacks.from_values(values)
    if is_sorted(stacks):
        return stacks
    count = len(stacks.a)
    if count == 2:
        sort_two(stacks)
    elif count == 3:
        sort_three(stacks)
    elif count <= 5:
        sort_up_to_five(stacks)
    else:
        radix(stacks)
    return stacks