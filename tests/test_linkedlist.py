import pytest

from cubed.linkedlist import LinkedList, Node


def test_push_back_keeps_order():
    items = LinkedList()
    for value in ["a", "b", "c"]:
        items.push_back(value)
    assert list(items) == ["a", "b", "c"]


def test_push_front_reverses_order():
    items = LinkedList()
    for value in [1, 2, 3]:
        items.push_front(value)
    assert list(items) == [3, 2, 1]


def test_constructor_from_iterable():
    items = LinkedList(range(4))
    assert list(items) == [0, 1, 2, 3]
    assert len(items) == 4


def test_len_of_empty_list():
    assert len(LinkedList()) == 0


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_last_returns_tail_node():
    items = LinkedList(["x", "y"])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == "y"
    assert tail.next is None


def test_push_returns_linked_node():
    items = LinkedList()
    first = items.push_back("first")
    second = items.push_back("second")
    assert first.next is second
    assert items.head is first


def test_clear_calls_delete_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda v: v * 2, lambda v: None)
    assert list(doubled) == [2, 4, 6]
    assert list(items) == [1, 2, 3]


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str, lambda v: None)) == []


def test_map_none_result_deletes_partial_results():
    deleted = []
    items = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        items.map(lambda v: None if v == 3 else v * 10, deleted.append)
    assert deleted == [10, 20]


def test_map_exception_deletes_partial_results():
    deleted = []

    def boom(value):
        if value == 2:
            raise RuntimeError("bad")
        return value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2]).map(boom, deleted.append)
    assert deleted == [1]