"""Half-open ranges of offsets into source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open range ``[start, end)`` of offsets into source text."""

    start: int = 0
    end: int = 0

    def __len__(self) -> int:
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes its start {self.start}")
        return self.end - self.start

    def is_empty(self) -> bool:
        """Return True when the span covers no offsets."""
        return self.start == self.end

    def contains(self, pos: int) -> bool:
        """Return True when ``pos`` lies inside the span."""
        return self.start <= pos < self.end

    def overlaps(self, other: Span) -> bool:
        """Return True when the two spans share at least one offset."""
        return self.start < other.end and other.start < self.end

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both spans."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def slice(self, text: str) -> str:
        """Return the part of ``text`` the span covers."""
        if not 0 <= self.start <= self.end <= len(text):
            raise IndexError(
                f"span {self.start}..{self.end} is out of range for text of length {len(text)}"
            )
        return text[self.start:self.end]