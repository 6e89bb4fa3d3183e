"""A growable sequence that tracks its capacity explicitly."""

from __future__ import annotations

import copy
from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

from blaze.ordering import Ordering, compare

T = TypeVar("T")


class SearchResult(NamedTuple):
    """Outcome of a binary search: where the value is, or where it would go."""

    found: bool
    index: int


class BlazeVec(Generic[T]):
    """A growable sequence whose capacity starts at one and doubles when full."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[T] = (), *, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._items: list[T] = []
        self._capacity = capacity
        for item in items:
            self.push(item)

    def _make_room(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def push(self, value: T) -> None:
        """Append a value, growing the capacity when full."""
        self._make_room()
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the last value, or None when empty."""
        return self._items.pop() if self._items else None

    def get(self, index: int) -> T | None:
        """Return the value at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insertion index out of bounds")
        self._make_room()
        self._items.insert(index, element)

    def remove(self, index: int) -> T:
        """Remove and return the value at ``index``, shifting later values."""
        if not 0 <= index < len(self._items):
            raise IndexError("removal index out of bounds")
        return self._items.pop(index)

    def swap_remove(self, index: int) -> T:
        """Remove the value at ``index``, moving the last value into its place."""
        if not 0 <= index < len(self._items):
            raise IndexError("swap_remove index out of bounds")
        last = self._items.pop()
        if index == len(self._items):
            return last
        removed = self._items[index]
        self._items[index] = last
        return removed

    def truncate(self, length: int) -> None:
        """Shorten to ``length`` values; longer lengths are ignored."""
        if length < len(self._items):
            del self._items[max(length, 0):]

    def resize(self, new_len: int, value: T) -> None:
        """Grow with copies of ``value`` or shrink to ``new_len`` values."""
        if new_len > len(self._items):
            for _ in range(new_len - len(self._items)):
                self.push(copy.copy(value))
        else:
            self.truncate(new_len)

    def extend_from_slice(self, other: Iterable[T]) -> None:
        """Append copies of every value in ``other``."""
        for item in other:
            self.push(copy.copy(item))

    def sort(self) -> None:
        """Sort the values in ascending order."""
        self._items.sort()

    def binary_search(self, x: T) -> SearchResult:
        """Search a sorted vector for ``x``."""
        left, right = 0, len(self._items)
        while left < right:
            mid = left + (right - left) // 2
            ordering = compare(self._items[mid], x)
            if ordering is Ordering.LESS:
                left = mid + 1
            elif ordering is Ordering.GREATER:
                right = mid
            else:
                return SearchResult(True, mid)
        return SearchResult(False, left)

    def contains(self, x: T) -> bool:
        """Return True when some value equals ``x``."""
        return x in self._items

    def clear(self) -> None:
        """Remove every value, keeping the capacity."""
        self._items.clear()

    def capacity(self) -> int:
        """Number of values the vector holds before it must grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index out of bounds: the len is {len(self._items)} but the index is {index}"
            )
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index out of bounds: the len is {len(self._items)} but the index is {index}"
            )
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlazeVec):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"BlazeVec({self._items!r})"