"""A growable array with index-based insertion, removal and searching."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import Any

Compare = Callable[[Any, Any], int]


class DynArray:
    """An array whose length can change, with comparator-driven searches."""

    __slots__ = ("_items",)

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._items: list[Any] = [None] * length

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(f"index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index, len(self._items))
        return self._items[index]

    def __setitem__(self, index: int, element: Any) -> None:
        self._check_index(index, len(self._items))
        self._items[index] = element

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"

    def add(self, element: Any) -> None:
        """Append element to the end."""
        self._items.append(element)

    def add_at(self, index: int, element: Any) -> None:
        """Insert element so that it becomes the index'th element."""
        self._check_index(index, len(self._items) + 1)
        self._items.insert(index, element)

    def remove_at(self, index: int) -> Any:
        """Remove and return the index'th element."""
        self._check_index(index, len(self._items))
        return self._items.pop(index)

    def to_list(self) -> list[Any]:
        """Return the elements as a new list."""
        return list(self._items)

    def map(self, apply: Callable[[Any, Any], Any], extra: Any = None) -> None:
        """Call apply(element, extra) for each element in order."""
        for element in self._items:
            apply(element, extra)

    def sort(self, compare: Compare) -> None:
        """Sort in place in the order given by a three-way comparator."""
        self._items.sort(key=functools.cmp_to_key(compare))

    def search(self, sought: Any, compare: Compare) -> int | None:
        """Return the index of the first element comparing equal, or None."""
        for index, element in enumerate(self._items):
            if compare(element, sought) == 0:
                return index
        return None

    def bsearch(self, sought: Any, compare: Compare) -> tuple[bool, int]:
        """Binary-search a sorted array.

        Returns (True, index) when found, otherwise (False, index) where
        index is the position at which sought would be inserted.
        """
        lo, hi = 0, len(self._items) - 1
        while lo <= hi:
            mid = lo + (hi - lo) // 2
            result = compare(self._items[mid], sought)
            if result > 0:
                hi = mid - 1
            elif result < 0:
                lo = mid + 1
            else:
                return True, mid
        return False, lo