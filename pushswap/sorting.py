"""Sorting stack ``a`` with the push_swap operations.

Inputs of up to five numbers use hand-written sequences. Longer inputs are
expected to hold the ranks 0..n-1 and are sorted with a binary radix sort.
"""

from __future__ import annotations

from typing import Sequence

from pushswap.stacks import Stacks


def _min_index(values: Sequence[int]) -> int:
    """Index of the smallest value; the first one wins on ties."""
    return min(range(len(values)), key=values.__getitem__)


def sort_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two to five elements; smaller stacks are left alone."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError(f"sort_three needs three elements, got {len(stacks.a)}")
    first, second, third = stacks.a[:3]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third and first > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Rotate the smallest element to the top, park it on ``b``, sort the rest."""
    if not stacks.a:
        raise ValueError("sort_four needs a non-empty stack")
    for _ in range(_min_index(stacks.a)):
        stacks.ra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Bring the smallest element to the top the short way, park it, sort four."""
    if not stacks.a:
        raise ValueError("sort_five needs a non-empty stack")
    min_index = _min_index(stacks.a)
    if min_index <= 2:
        for _ in range(min_index):
            stacks.ra()
    else:
        for _ in range(len(stacks.a) - min_index):
            stacks.rra()
    stacks.pb()
    sort_four(stacks)
    stacks.pa()


def max_bits(n: int) -> int:
    """Number of bits needed to write the non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"max_bits needs a non-negative number, got {n}")
    return n.bit_length()


def _bit(value: int, bit: int) -> int:
    return (value >> bit) & 1


def _radix_sort_b(stacks: Stacks, size: int, bit_size: int, bit: int) -> None:
    """Send back to ``a`` the elements of ``b`` whose ``bit`` is set."""
    while size > 0 and bit <= bit_size and not stacks.is_sorted():
        size -= 1
        if _bit(stacks.b[0], bit) == 0:
            stacks.rb()
        else:
            stacks.pa()
    if stacks.is_sorted():
        while stacks.b:
            stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` bit by bit, from the lowest, pushing zero bits onto ``b``."""
    bit_size = max_bits(max(len(stacks.a) - 1, 0))
    for bit in range(bit_size + 1):
        size = len(stacks.a)
        while size > 0 and not stacks.is_sorted():
            size -= 1
            if _bit(stacks.a[0], bit) == 0:
                stacks.pb()
            else:
                stacks.ra()
        _radix_sort_b(stacks, len(stacks.b), bit_size, bit + 1)
    while stacks.b:
        stacks.pa()