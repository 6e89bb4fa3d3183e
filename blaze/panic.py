"""Runtime panics raised by compiled programs."""

from __future__ import annotations

from typing import NoReturn


class BlazePanic(RuntimeError):
    """An unrecoverable runtime failure with the location it happened at."""

    def __init__(self, message: str, file: str = "unknown", line: int = 0, column: int = 0):
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        super().__init__(
            f"thread 'main' panicked at '{message}', {file}:{line}:{column}"
        )


def blaze_panic(message: str, file: str, line: int, column: int) -> NoReturn:
    """Raise a panic with a message and source location."""
    raise BlazePanic(message, file, line, column)


def panic_bounds_check(index: int, length: int) -> NoReturn:
    """Raise the panic for an index outside a sequence."""
    blaze_panic(
        f"index out of bounds: the len is {length} but the index is {index}",
        "unknown",
        0,
        0,
    )


def panic_divide_by_zero() -> NoReturn:
    """Raise the panic for a division by zero."""
    blaze_panic("attempt to divide by zero", "unknown", 0, 0)


def panic_overflow(operation: str) -> NoReturn:
    """Raise the panic for an arithmetic overflow in ``operation``."""
    blaze_panic(f"attempt to {operation} with overflow", "unknown", 0, 0)