"""Three-way comparison results."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Ordering(Enum):
    """The result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)


def compare(a: Any, b: Any) -> Ordering:
    """Compare two values; raise ValueError when they are unordered."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    raise ValueError(f"{a!r} and {b!r} are not ordered")