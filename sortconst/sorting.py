"""Quicksort and shellsort driven by a caller-supplied "comes before" predicate.

Both sorts work in place on anything that supports item assignment: lists,
bytearrays, writable memoryview slices. Any other sequence, such as a tuple,
is copied into a new list, and that list is sorted and returned.
"""

from __future__ import annotations

import operator
from itertools import takewhile
from typing import Any, Callable, Iterable, MutableSequence, Sequence, TypeVar

__all__ = ["A366726", "CapacityError", "quicksort", "shellsort"]

T = TypeVar("T")
Less = Callable[[Any, Any], bool]

DEFAULT_DEPTH = 1024

#: Gap sequence used by :func:`shellsort` unless another is given.
A366726: tuple[int, ...] = (
    1,
    4,
    9,
    20,
    45,
    102,
    230,
    516,
    1158,
    2599,
    5831,
    13082,
    29351,
    65853,
    147748,
    331490,
    743735,
    1668650,
    3743800,
    8399623,
    18845471,
    42281871,
    94863989,
    212837706,
    477524607,
    1071378536,
    2403754591,
    5393085583,
    12099975682,
    27147615084,
    60908635199,
    136655165852,
)


class CapacityError(RuntimeError):
    """Raised when the quicksort work stack outgrows its depth limit."""

    def __init__(self, message: str = "ran out of capacity") -> None:
        super().__init__(message)


def _target(data: Sequence[T]) -> MutableSequence[T]:
    if hasattr(data, "__setitem__"):
        return data  # type: ignore[return-value]
    return list(data)


class _BoundedStack:
    """A stack of index ranges that refuses to grow past ``capacity``."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: list[tuple[int, int]] = []

    def push(self, lo: int, hi: int) -> None:
        if len(self._items) >= self._capacity:
            raise CapacityError()
        self._items.append((lo, hi))

    def __iter__(self):
        while self._items:
            yield self._items.pop()


def quicksort(
    data: Sequence[T],
    less: Less | None = None,
    depth: int = DEFAULT_DEPTH,
) -> MutableSequence[T]:
    """Sort ``data`` so that ``less(a, b)`` means ``a`` comes before ``b``.

    ``depth`` bounds the number of pending sub-ranges; exceeding it raises
    :class:`CapacityError`. The sorted sequence is returned.
    """
    before = operator.lt if less is None else less
    arr = _target(data)
    stack = _BoundedStack(depth)
    stack.push(0, len(arr))

    for lo, hi in stack:
        length = hi - lo
        if length <= 1:
            continue
        if length == 2:
            if not before(arr[lo], arr[lo + 1]):
                arr[lo], arr[lo + 1] = arr[lo + 1], arr[lo]
            continue

        pivot = arr[lo]
        base = lo + 1
        left = 0
        right = length - 2
        while left <= right:
            if before(arr[base + left], pivot):
                left += 1
            elif not before(arr[base + right], pivot):
                if right == 0:
                    break
                right -= 1
            else:
                a, b = base + left, base + right
                arr[a], arr[b] = arr[b], arr[a]
                left += 1
                if right == 0:
                    break
                right -= 1

        split = lo + left
        arr[lo], arr[split] = arr[split], arr[lo]

        left_range = (lo, split)
        right_range = (split + 1, hi)
        if split >= hi:
            stack.push(*left_range)
        elif left_range[1] - left_range[0] >= right_range[1] - right_range[0]:
            stack.push(*left_range)
            stack.push(*right_range)
        else:
            stack.push(*right_range)
            stack.push(*left_range)

    return arr


def shellsort(
    data: Sequence[T],
    less: Less | None = None,
    gaps: Iterable[int] = A366726,
) -> MutableSequence[T]:
    """Sort ``data`` with shellsort over the ascending gap sequence ``gaps``.

    Only the leading gaps smaller than the length of ``data`` are used, from
    the largest down. The sorted sequence is returned.
    """
    before = operator.lt if less is None else less
    arr = _target(data)
    n = len(arr)

    chosen = list(takewhile(lambda g: g < n, gaps))
    if any(gap < 1 for gap in chosen):
        raise ValueError("shellsort gaps must be positive")

    for gap in reversed(chosen):
        for i in range(gap, n):
            temp = arr[i]
            j = i
            while j >= gap and before(temp, arr[j - gap]):
                arr[j] = arr[j - gap]
                j -= gap
            arr[j] = temp

    return arr