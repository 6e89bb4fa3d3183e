import pytest

from blaze.panic import (
    BlazePanic,
    blaze_panic,
    panic_bounds_check,
    panic_divide_by_zero,
    panic_overflow,
)


def test_blaze_panic_carries_location():
    with pytest.raises(BlazePanic) as info:
        blaze_panic("boom", "main.bz", 4, 2)
    error = info.value
    assert error.message == "boom"
    assert (error.file, error.line, error.column) == ("main.bz", 4, 2)
    assert str(error) == "thread 'main' panicked at 'boom', main.bz:4:2"


def test_bounds_check_message():
    with pytest.raises(BlazePanic) as info:
        panic_bounds_check(7, 3)
    assert info.value.message == "index out of bounds: the len is 3 but the index is 7"
    assert info.value.file == "unknown"


def test_divide_by_zero_message():
    with pytest.raises(BlazePanic) as info:
        panic_divide_by_zero()
    assert info.value.message == "attempt to divide by zero"
    assert str(info.value).endswith("unknown:0:0")


def test_overflow_message():
    with pytest.raises(BlazePanic) as info:
        panic_overflow("add")
    assert info.value.message == "attempt to add with overflow"


def test_panic_is_runtime_error():
    with pytest.raises(RuntimeError):
        panic_overflow("multiply")