"""Mapping of offsets in loaded source files to lines and columns."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


def _line_starts(content: str) -> list[int]:
    return [0] + [index + 1 for index, ch in enumerate(content) if ch == "\n"]


@dataclass
class SourceFile:
    """A named piece of source text with the offsets at which its lines start."""

    name: str
    content: str
    line_starts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.line_starts:
            self.line_starts = _line_starts(self.content)


class SourceMap:
    """A collection of source files keyed by name."""

    def __init__(self) -> None:
        self._files: dict[str, SourceFile] = {}

    def add_file(self, name: str, content: str) -> None:
        """Add a file, replacing any file of the same name."""
        self._files[name] = SourceFile(name, content, _line_starts(content))

    def get_file(self, name: str) -> SourceFile | None:
        """Return the named file, or None if it is unknown."""
        return self._files.get(name)

    def get_line_column(self, file_name: str, offset: int) -> tuple[int, int] | None:
        """Return the 1-based (line, column) of ``offset`` in the named file."""
        source = self.get_file(file_name)
        if source is None:
            return None
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        line = max(bisect_right(source.line_starts, offset) - 1, 0)
        column = offset - source.line_starts[line]
        return line + 1, column + 1

    def get_line_text(self, file_name: str, line: int) -> str | None:
        """Return the text of a 1-based line, including its line break."""
        source = self.get_file(file_name)
        if source is None or line < 1 or line > len(source.line_starts):
            return None
        start = source.line_starts[line - 1]
        end = (
            source.line_starts[line]
            if line < len(source.line_starts)
            else len(source.content)
        )
        return source.content[start:end]