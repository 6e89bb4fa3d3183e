from blaze.linked_list import LinkedList


def test_new_list_is_empty():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.pop_front() is None


def test_push_front_reverses_order():
    lst = LinkedList()
    items = [1, 2, 3, 4]
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))
    assert len(lst) == len(items)


def test_pop_front_is_lifo():
    lst = LinkedList()
    for item in "abc":
        lst.push_front(item)
    assert [lst.pop_front() for _ in range(3)] == ["c", "b", "a"]
    assert lst.pop_front() is None
    assert len(lst) == 0


def test_clear():
    lst = LinkedList()
    for i in range(100):
        lst.push_front(i)
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_iteration_does_not_consume():
    lst = LinkedList()
    lst.push_front("x")
    assert list(lst) == ["x"]
    assert list(lst) == ["x"]
    assert len(lst) == 1