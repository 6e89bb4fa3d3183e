import random

import pytest

from blaze.vector import BlazeVec


def _is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def test_new_vector_is_empty():
    vec = BlazeVec()
    assert len(vec) == 0
    assert vec.capacity() == 0
    assert vec.pop() is None
    assert vec.get(0) is None


def test_push_and_pop_are_lifo():
    vec = BlazeVec()
    for value in ["a", "b", "c"]:
        vec.push(value)
    assert [vec.pop(), vec.pop(), vec.pop()] == ["c", "b", "a"]
    assert vec.pop() is None


@pytest.mark.parametrize("count", [1, 2, 3, 5, 17, 64])
def test_capacity_doubles_from_one(count):
    vec = BlazeVec(range(count))
    cap = vec.capacity()
    assert _is_power_of_two(cap)
    assert count <= cap < 2 * count or cap == 1


def test_explicit_capacity_is_kept_until_full():
    vec = BlazeVec(capacity=5)
    for value in range(5):
        vec.push(value)
    assert vec.capacity() == 5
    vec.push(5)
    assert vec.capacity() == 10


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        BlazeVec(capacity=-1)


def test_get_in_and_out_of_range():
    vec = BlazeVec([10, 20, 30])
    assert vec.get(1) == 20
    assert vec.get(3) is None
    assert vec.get(-1) is None
    assert vec[2] == 30
    with pytest.raises(IndexError):
        vec[3]


def test_setitem_replaces():
    vec = BlazeVec([1, 2, 3])
    vec[0] = 9
    assert list(vec) == [9, 2, 3]
    with pytest.raises(IndexError):
        vec[5] = 1


def test_insert_shifts_values():
    vec = BlazeVec([1, 3])
    vec.insert(1, 2)
    vec.insert(3, 4)
    vec.insert(0, 0)
    assert list(vec) == [0, 1, 2, 3, 4]
    assert vec.capacity() >= len(vec)


def test_insert_past_end_raises():
    vec = BlazeVec([1])
    with pytest.raises(IndexError, match="insertion index out of bounds"):
        vec.insert(2, 5)


def test_remove_shifts_values():
    vec = BlazeVec([10, 20, 30, 40])
    assert vec.remove(1) == 20
    assert list(vec) == [10, 30, 40]
    with pytest.raises(IndexError, match="removal index out of bounds"):
        vec.remove(3)


def test_swap_remove_moves_last_into_hole():
    vec = BlazeVec([10, 20, 30, 40])
    assert vec.swap_remove(1) == 20
    assert list(vec) == [10, 40, 30]
    assert vec.swap_remove(2) == 30
    assert list(vec) == [10, 40]
    with pytest.raises(IndexError, match="swap_remove index out of bounds"):
        vec.swap_remove(2)


def test_truncate():
    vec = BlazeVec(range(6))
    vec.truncate(10)
    assert list(vec) == list(range(6))
    vec.truncate(2)
    assert list(vec) == [0, 1]


def test_resize_grows_and_shrinks():
    vec = BlazeVec([1, 2])
    vec.resize(5, 7)
    assert list(vec) == [1, 2, 7, 7, 7]
    vec.resize(1, 7)
    assert list(vec) == [1]


def test_resize_copies_value():
    vec = BlazeVec()
    vec.resize(3, [])
    vec[0].append("x")
    assert vec[1] == []
    assert vec[0] == ["x"]


def test_extend_from_slice_appends_in_order():
    vec = BlazeVec(["a"])
    vec.extend_from_slice(["b", "c"])
    assert list(vec) == ["a", "b", "c"]


def test_sort_orders_values():
    rng = random.Random(7)
    items = [rng.randint(-50, 50) for _ in range(40)]
    vec = BlazeVec(items)
    vec.sort()
    assert list(vec) == sorted(items)


def test_binary_search_finds_present_value():
    vec = BlazeVec([1, 3, 5, 7, 9])
    result = vec.binary_search(7)
    assert result.found
    assert vec[result.index] == 7


@pytest.mark.parametrize("target", [0, 4, 10])
def test_binary_search_reports_insertion_point(target):
    values = [1, 3, 5, 7, 9]
    vec = BlazeVec(values)
    found, index = vec.binary_search(target)
    assert not found
    assert all(v < target for v in values[:index])
    assert all(v > target for v in values[index:])


def test_binary_search_on_empty():
    found, index = BlazeVec().binary_search(3)
    assert not found
    assert index == 0


def test_contains():
    vec = BlazeVec(["x", "y"])
    assert vec.contains("y")
    assert not vec.contains("z")


def test_clear_keeps_capacity():
    vec = BlazeVec(range(9))
    cap = vec.capacity()
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity() == cap


def test_iteration_and_equality():
    items = [4, 8, 15]
    vec = BlazeVec(items)
    assert list(vec) == items
    assert vec == BlazeVec(items)
    assert not (vec == BlazeVec(items[:2]))