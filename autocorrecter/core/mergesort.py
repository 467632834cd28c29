# mergesort.py
# Top-down merge sort driven by a cmp-style comparator.
# The comparator alone decides the order: equal elements keep their input
# order (left half wins ties), there is no other tie-breaking.

from __future__ import annotations
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")
Comparator = Callable[[T, T], int]


def mergesort(items: Sequence[T], comparator: Comparator) -> List[T]:
    """
    Return a new list with `items` ordered by `comparator`.

    `comparator(a, b)` follows the functools.cmp_to_key convention:
    negative if a goes first, positive if b goes first, 0 if equal.
    The input sequence is not modified.
    """
    if len(items) <= 1:
        return list(items)

    # lower half gets the smaller share on odd lengths
    half = len(items) // 2
    left = mergesort(items[:half], comparator)
    right = mergesort(items[half:], comparator)
    return _merge(left, right, comparator)


def _merge(left: List[T], right: List[T], comparator: Comparator) -> List[T]:
    out: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if comparator(left[i], right[j]) <= 0:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    # one side is exhausted, the other is already in order
    out.extend(left[i:])
    out.extend(right[j:])
    return out
