import pytest

from puhpkit.linked_list import Cursor, DoublyLinkedList


def test_push_back_and_iterate():
    dll = DoublyLinkedList()
    for value in (1, 2, 3):
        dll.push_back(value)
    assert list(dll) == [1, 2, 3]
    assert len(dll) == 3
    assert dll.front() == 1
    assert dll.back() == 3


def test_push_front_orders_reverse():
    dll = DoublyLinkedList()
    for value in (1, 2, 3):
        dll.push_front(value)
    assert list(dll) == [3, 2, 1]


def test_push_back_returns_cursor_to_new_node():
    dll = DoublyLinkedList([1])
    cursor = dll.push_back(9)
    assert cursor.element() == 9
    assert cursor == dll.last()


def test_empty_list_errors():
    dll = DoublyLinkedList()
    assert dll.is_empty()
    with pytest.raises(IndexError):
        dll.front()
    with pytest.raises(IndexError):
        dll.back()
    with pytest.raises(IndexError):
        dll.pop_front()
    with pytest.raises(IndexError):
        dll.pop_back()


def test_pop_front_and_back():
    dll = DoublyLinkedList([1, 2, 3, 4])
    dll.pop_front()
    dll.pop_back()
    assert list(dll) == [2, 3]
    assert dll.head().prev is None
    assert dll.tail().next is None


def test_at_and_bounds():
    dll = DoublyLinkedList(["a", "b", "c"])
    assert [dll.at(i) for i in range(3)] == ["a", "b", "c"]
    with pytest.raises(IndexError):
        dll.at(3)
    with pytest.raises(IndexError):
        dll.at(-1)


def test_insert_after_middle():
    dll = DoublyLinkedList([1, 2, 3])
    cursor = dll.insert_after(dll.begin(), 10)
    assert list(dll) == [1, 10, 2, 3]
    assert cursor.element() == 10
    assert len(dll) == 4


def test_insert_after_end_appends():
    dll = DoublyLinkedList([1, 2])
    dll.insert_after(dll.end(), 5)
    assert list(dll) == [1, 2, 5]
    assert dll.back() == 5


def test_insert_after_on_empty_ignores_position():
    dll = DoublyLinkedList()
    other = DoublyLinkedList([7, 8])
    dll.insert_after(other.begin(), 4)
    assert list(dll) == [4]
    assert dll.head() is dll.tail()


def test_insert_after_index():
    dll = DoublyLinkedList([1, 2, 3])
    dll.insert_after_index(0, 9)
    assert list(dll) == [1, 9, 2, 3]
    dll.insert_after_index(4, 6)
    assert list(dll) == [1, 9, 2, 3, 6]
    assert dll.insert_after_index(99, 0) == dll.end()
    assert len(dll) == 5


def test_erase_returns_next():
    dll = DoublyLinkedList([1, 2, 3])
    cursor = dll.erase(dll.begin())
    assert cursor.element() == 2
    assert list(dll) == [2, 3]
    assert dll.head().prev is None
    cursor = dll.erase(dll.last())
    assert cursor == dll.end()
    assert list(dll) == [2]


def test_erase_end_raises():
    dll = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        dll.erase(dll.end())


def test_reverse_and_links():
    dll = DoublyLinkedList([1, 2, 3, 4])
    dll.reverse()
    assert list(dll) == [4, 3, 2, 1]
    backwards = []
    node = dll.tail()
    while node is not None:
        backwards.append(node.element)
        node = node.prev
    assert backwards == [1, 2, 3, 4]


def test_equality():
    assert DoublyLinkedList([1, 2]) == DoublyLinkedList([1, 2])
    assert not (DoublyLinkedList([1, 2]) == DoublyLinkedList([1, 3]))
    assert not (DoublyLinkedList([1]) == DoublyLinkedList([1, 1]))


def test_copy_is_independent():
    dll = DoublyLinkedList([1, 2, 3])
    duplicate = dll.copy()
    assert duplicate == dll
    duplicate.push_back(4)
    assert list(dll) == [1, 2, 3]


def test_assign_count():
    dll = DoublyLinkedList([5, 6])
    dll.assign(5, 3)
    assert list(dll) == [3, 3, 3, 3, 3]


def test_assign_range():
    source = DoublyLinkedList([8, 4, 3, 2, 7, 1])
    first = source.begin().advance(1)
    last = source.begin().advance(5)
    dll = DoublyLinkedList()
    dll.assign_range(first, last)
    assert list(dll) == [4, 3, 2, 7]


def test_assign_range_out_of_order_copies_to_end():
    source = DoublyLinkedList([8, 4, 3, 2, 7, 1])
    first = source.begin().advance(4)
    last = source.begin().advance(1)
    dll = DoublyLinkedList([0])
    dll.assign_range(first, last)
    assert list(dll) == [7, 1]


def test_cursor_clamps_at_boundaries():
    dll = DoublyLinkedList([1, 2, 3])
    cursor = dll.begin()
    cursor.retreat(5)
    assert cursor.element() == 1
    cursor.advance(2)
    assert cursor.element() == 3
    cursor.advance(-1)
    assert cursor.element() == 2
    cursor.retreat(-10)
    assert cursor == dll.end()
    cursor.retreat(1)
    assert cursor == dll.end()


def test_end_cursor_element_raises():
    with pytest.raises(IndexError):
        Cursor().element()