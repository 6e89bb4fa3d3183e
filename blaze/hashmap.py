"""A separately chained hash map with a simple multiplicative byte hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

INITIAL_CAPACITY = 16
LOAD_FACTOR = 0.75

_U64_MASK = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_U64_LIMIT = 1 << 64


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, int):
        if not _I64_MIN <= key < _U64_LIMIT:
            raise OverflowError(f"integer key {key} does not fit in 64 bits")
        return key.to_bytes(8, "little", signed=key < 0)
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    as_bytes = getattr(key, "as_bytes", None)
    if callable(as_bytes):
        return bytes(as_bytes())
    raise TypeError(f"cannot hash key of type {type(key).__name__}")


def default_hash(key: Any) -> int:
    """Hash a key's bytes as ``state = state * 31 + byte`` in 64-bit arithmetic."""
    state = 0
    for byte in _key_bytes(key):
        state = (state * 31 + byte) & _U64_MASK
    return state


@dataclass
class _Entry(Generic[K, V]):
    key: K
    value: V


class BlazeHashMap(Generic[K, V]):
    """A hash map that doubles its bucket count when three quarters full."""

    __slots__ = ("_buckets", "_len")

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._buckets: list[list[_Entry[K, V]]] = [[] for _ in range(capacity)]
        self._len = 0

    def _bucket_for(self, key: K) -> list[_Entry[K, V]]:
        return self._buckets[default_hash(key) % len(self._buckets)]

    def _resize(self) -> None:
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(len(old_buckets) * 2)]
        self._len = 0
        for bucket in old_buckets:
            for entry in bucket:
                self.insert(entry.key, entry.value)

    def insert(self, key: K, value: V) -> V | None:
        """Store ``value`` under ``key``; return the value it replaced, if any."""
        if self._len >= int(len(self._buckets) * LOAD_FACTOR):
            self._resize()
        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry.key == key:
                old, entry.value = entry.value, value
                return old
        bucket.append(_Entry(key, value))
        self._len += 1
        return None

    def get(self, key: K) -> V | None:
        """Return the value stored under ``key``, or None."""
        for entry in self._bucket_for(key):
            if entry.key == key:
                return entry.value
        return None

    def remove(self, key: K) -> V | None:
        """Remove ``key`` and return its value, or None when absent."""
        bucket = self._bucket_for(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                bucket[position] = bucket[-1]
                bucket.pop()
                self._len -= 1
                return entry.value
        return None

    def contains_key(self, key: K) -> bool:
        """Return True when ``key`` is present."""
        return any(entry.key == key for entry in self._bucket_for(key))

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._len = 0

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def keys(self) -> Iterator[K]:
        """Yield the keys in bucket order."""
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[V]:
        """Yield the values in bucket order."""
        for _, value in self.items():
            yield value

    def bucket_count(self) -> int:
        """Number of buckets currently allocated."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __contains__(self, key: object) -> bool:
        try:
            return self.contains_key(key)  # type: ignore[arg-type]
        except (TypeError, OverflowError):
            return False

    def __getitem__(self, key: K) -> V:
        for entry in self._bucket_for(key):
            if entry.key == key:
                return entry.value
        raise KeyError(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"BlazeHashMap({{{body}}})"