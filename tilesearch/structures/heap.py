# -*- coding: utf-8 -*-
"""
Array-backed binary heap driven by a comparator.

`comparator(a, b)` returns a positive number when `a` belongs above `b`,
negative when below, zero when tied. The default gives a max-heap; pass an
inverted comparator for a min-heap. NOT stable: equal elements come out in
no particular order (see StablePriorityQueue for that).
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from ..errors import EmptyCollectionError, InvalidConstructionError

logger = logging.getLogger(__name__)

T = TypeVar("T")
Comparator = Callable[[T, T], int]

INITIAL_CAPACITY = 4


def default_compare(a, b) -> int:
    return (a > b) - (a < b)


def reverse_compare(a, b) -> int:
    return (b > a) - (b < a)


class BinaryHeap(Generic[T]):
    def __init__(self, capacity: int = INITIAL_CAPACITY,
                 comparator: Optional[Comparator] = default_compare,
                 items: Optional[Iterable[T]] = None):
        if capacity is None or int(capacity) < 0:
            raise InvalidConstructionError(f"Non-negative capacity required, got {capacity!r}")
        if comparator is None or not callable(comparator):
            raise InvalidConstructionError("A comparator callable is required")

        self._array: List[Optional[T]] = [None] * int(capacity)
        self._last = -1
        self._compare = comparator

        if items is not None:
            for item in items:
                self.push(item)

    def __len__(self) -> int:
        return self._last + 1

    def __bool__(self) -> bool:
        return self._last >= 0

    @property
    def is_empty(self) -> bool:
        return self._last < 0

    @property
    def capacity(self) -> int:
        return len(self._array)

    def push(self, item: T) -> None:
        if self._last == len(self._array) - 1:
            self._resize()
        self._last += 1
        self._array[self._last] = item
        self._sift_up(self._last)

    def pop(self) -> T:
        if self._last < 0:
            raise EmptyCollectionError("The heap is empty.")
        top = self._array[0]
        self._array[0] = self._array[self._last]
        self._array[self._last] = None
        self._last -= 1
        self._sift_down(0)
        return top

    def peek(self) -> T:
        if self._last < 0:
            raise EmptyCollectionError("The heap is empty.")
        return self._array[0]

    def clear(self) -> None:
        # storage is kept; stale slots get overwritten by later pushes
        self._last = -1

    def to_list(self) -> List[T]:
        """Elements in storage (heap) order."""
        return self._array[:self._last + 1]

    # ------------------------------ internals ------------------------------- #

    def _sift_up(self, index: int) -> None:
        a, cmp = self._array, self._compare
        while index > 0:
            parent = (index - 1) // 2
            if cmp(a[index], a[parent]) <= 0:
                break
            a[index], a[parent] = a[parent], a[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        a, cmp, last = self._array, self._compare, self._last
        while True:
            left = 2 * index + 1
            right = left + 1
            top = index
            if left <= last and cmp(a[left], a[top]) > 0:
                top = left
            if right <= last and cmp(a[right], a[top]) > 0:
                top = right
            if top == index:
                return
            a[index], a[top] = a[top], a[index]
            index = top

    def _resize(self) -> None:
        new_capacity = max(1, 2 * len(self._array))
        logger.debug("heap resize %d -> %d", len(self._array), new_capacity)
        self._array.extend([None] * (new_capacity - len(self._array)))
