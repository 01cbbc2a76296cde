import pytest

from ftkit.linked_list import LinkedList, Node


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_and_back():
    lst = LinkedList([2])
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_push_returns_node():
    lst = LinkedList()
    node = lst.push_back("x")
    assert isinstance(node, Node)
    assert node.content == "x"
    assert lst.head is node


def test_last_is_tail():
    lst = LinkedList(["a", "b"])
    tail = lst.last()
    assert tail.content == "b"
    assert tail.next is None
    lst.push_back("c")
    assert lst.last().content == "c"


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_all():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped is not original


def test_map_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [101, 102]