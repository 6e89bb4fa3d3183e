"""A hash set built on the chained hash map."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from blaze.hashmap import INITIAL_CAPACITY, BlazeHashMap

T = TypeVar("T", bound=Hashable)


class BlazeHashSet(Generic[T]):
    """A set of values stored as the keys of a hash map."""

    __slots__ = ("_map",)

    def __init__(self, values: Iterable[T] = (), *, capacity: int = INITIAL_CAPACITY) -> None:
        self._map: BlazeHashMap[T, bool] = BlazeHashMap(capacity)
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> bool:
        """Add ``value``; return True when it was not already present."""
        return self._map.insert(value, True) is None

    def remove(self, value: T) -> bool:
        """Remove ``value``; return True when it was present."""
        return self._map.remove(value) is not None

    def contains(self, value: T) -> bool:
        """Return True when ``value`` is in the set."""
        return self._map.contains_key(value)

    def clear(self) -> None:
        """Remove every value."""
        self._map.clear()

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[T]:
        return self._map.keys()

    def __contains__(self, value: object) -> bool:
        return value in self._map

    def __repr__(self) -> str:
        return f"BlazeHashSet({list(self)!r})"