"""A singly linked list with push and pop at the front."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A stack-like singly linked list."""

    __slots__ = ("_head", "_len")

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._len = 0

    def push_front(self, data: T) -> None:
        """Put ``data`` at the front of the list."""
        self._head = _Node(data, self._head)
        self._len += 1

    def pop_front(self) -> T | None:
        """Remove and return the front value, or None when empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        self._len -= 1
        return node.data

    def clear(self) -> None:
        """Remove every value."""
        while self._head is not None:
            self.pop_front()

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"