"""A UTF-8 string stored as a mutable byte buffer."""

from __future__ import annotations

from typing import Iterator

_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class BlazeString:
    """A growable UTF-8 string whose length is counted in bytes."""

    __slots__ = ("_bytes",)

    def __init__(self) -> None:
        self._bytes = bytearray()

    @classmethod
    def from_str(cls, s: str) -> BlazeString:
        """Build a string holding the UTF-8 encoding of ``s``."""
        result = cls()
        result._bytes.extend(s.encode("utf-8"))
        return result

    def push(self, ch: str) -> None:
        """Append a single character."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self._bytes.extend(ch.encode("utf-8"))

    def push_str(self, s: str) -> None:
        """Append a string."""
        self._bytes.extend(s.encode("utf-8"))

    def pop(self) -> str | None:
        """Remove and return the last character, or None when empty."""
        if not self._bytes:
            return None
        end = len(self._bytes) - 1
        while end > 0 and self._bytes[end] & 0xC0 == 0x80:
            end -= 1
        try:
            ch = bytes(self._bytes[end:]).decode("utf-8")
        except UnicodeDecodeError:
            return None
        del self._bytes[end:]
        return ch

    def as_str(self) -> str:
        """Return the contents as a Python string."""
        return self._bytes.decode("utf-8")

    def as_bytes(self) -> bytes:
        """Return the UTF-8 bytes."""
        return bytes(self._bytes)

    def chars(self) -> Iterator[str]:
        """Iterate over the characters."""
        return iter(self.as_str())

    def split(self, delimiter: str) -> list[BlazeString]:
        """Split on a single delimiter character."""
        if len(delimiter) != 1:
            raise ValueError(f"expected a single character, got {delimiter!r}")
        return [BlazeString.from_str(part) for part in self.as_str().split(delimiter)]

    def trim(self) -> BlazeString:
        """Return a copy without leading and trailing whitespace."""
        return BlazeString.from_str(self.as_str().strip(_WHITESPACE))

    def to_lowercase(self) -> BlazeString:
        """Return a lowercase copy."""
        return BlazeString.from_str(self.as_str().lower())

    def to_uppercase(self) -> BlazeString:
        """Return an uppercase copy."""
        return BlazeString.from_str(self.as_str().upper())

    def contains(self, pat: str) -> bool:
        """Return True when ``pat`` occurs in the string."""
        return pat in self.as_str()

    def starts_with(self, pat: str) -> bool:
        """Return True when the string begins with ``pat``."""
        return self.as_str().startswith(pat)

    def ends_with(self, pat: str) -> bool:
        """Return True when the string ends with ``pat``."""
        return self.as_str().endswith(pat)

    def replace(self, old: str, new: str) -> BlazeString:
        """Return a copy with every ``old`` replaced by ``new``."""
        return BlazeString.from_str(self.as_str().replace(old, new))

    def clear(self) -> None:
        """Remove every byte."""
        self._bytes.clear()

    def __len__(self) -> int:
        return len(self._bytes)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"BlazeString({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlazeString):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(bytes(self._bytes))

    def __copy__(self) -> BlazeString:
        result = BlazeString()
        result._bytes.extend(self._bytes)
        return result