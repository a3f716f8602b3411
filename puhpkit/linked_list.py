"""A doubly linked list with cursor-based navigation and insertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A single list node holding one element and links to its neighbours."""

    element: T
    prev: Optional["Node[T]"] = field(default=None, repr=False)
    next: Optional["Node[T]"] = field(default=None, repr=False)


class Cursor(Generic[T]):
    """A position inside a list; a cursor on no node stands for the end."""

    def __init__(self, head: Optional[Node[T]] = None, node: Optional[Node[T]] = None):
        self.head = head
        self.node = node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.node is other.node

    def __repr__(self) -> str:
        if self.node is None:
            return "Cursor(end)"
        return f"Cursor({self.node.element!r})"

    @property
    def at_end(self) -> bool:
        return self.node is None

    def _step_forward(self) -> None:
        if self.node is not None:
            self.node = self.node.next

    def _step_backward(self) -> None:
        # Moving back stops at the head; the end position cannot be left backwards.
        if self.node is not None and self.node is not self.head:
            self.node = self.node.prev

    def advance(self, steps: int = 1) -> "Cursor[T]":
        """Move forward by ``steps`` (backward if negative) and return self."""
        if steps < 0:
            return self.retreat(-steps)
        for _ in range(steps):
            if self.node is None:
                break
            self._step_forward()
        return self

    def retreat(self, steps: int = 1) -> "Cursor[T]":
        """Move backward by ``steps`` (forward if negative) and return self."""
        if steps < 0:
            return self.advance(-steps)
        for _ in range(steps):
            if self.node is None:
                break
            self._step_backward()
        return self

    def element(self) -> T:
        """Return the element under the cursor."""
        if self.node is None:
            raise IndexError("cursor is at the end of the list")
        return self.node.element


class DoublyLinkedList(Generic[T]):
    """A doubly linked list that tracks its size in constant time."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def head(self) -> Optional[Node[T]]:
        return self._head

    def tail(self) -> Optional[Node[T]]:
        return self._tail

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        while self._size > 0:
            self.pop_back()

    def assign(self, count: int, value: T) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        self.clear()
        for _ in range(count):
            self.push_back(value)

    def assign_range(self, first: Cursor[T], last: Cursor[T]) -> None:
        """Replace the contents with elements from ``first`` up to ``last``.

        Copying stops at ``last`` (exclusive) or the end of the source list,
        whichever comes first.
        """
        values = []
        cursor = Cursor(first.head, first.node)
        while cursor != last and not cursor.at_end:
            values.append(cursor.element())
            cursor.advance()
        self.clear()
        for value in values:
            self.push_back(value)

    def begin(self) -> Cursor[T]:
        return Cursor(self._head, self._head)

    def last(self) -> Cursor[T]:
        return Cursor(self._head, self._tail)

    def end(self) -> Cursor[T]:
        return Cursor(None, None)

    def _append_node(self, node: Node[T]) -> None:
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node

    def insert_after(self, pos: Cursor[T], value: T) -> Cursor[T]:
        """Insert ``value`` after the node under ``pos``; at the tail if ``pos`` is the end."""
        new_node = Node(value)
        anchor = pos.node
        if self.is_empty() or anchor is None or anchor.next is None:
            self._append_node(new_node)
        else:
            following = anchor.next
            new_node.prev = anchor
            new_node.next = following
            anchor.next = new_node
            following.prev = new_node
        self._size += 1
        return Cursor(self._head, new_node)

    def insert_after_index(self, index: int, value: T) -> Cursor[T]:
        """Insert ``value`` after the element at ``index``.

        An index equal to the size appends; a larger one inserts nothing and
        returns the end cursor.
        """
        if index > self._size:
            return self.end()
        if index == self._size:
            return self.push_back(value)
        return self.insert_after(self.begin().advance(index), value)

    def erase(self, pos: Cursor[T]) -> Cursor[T]:
        """Remove the node under ``pos`` and return a cursor to the node after it."""
        node = pos.node
        if node is None:
            raise ValueError("invalid cursor")
        prev, following = node.prev, node.next
        if node is self._head:
            self._head = following
        elif prev is not None:
            prev.next = following
        if node is self._tail:
            self._tail = prev
        elif following is not None:
            following.prev = prev
        if following is not None and node is self._head:
            following.prev = None
        node.prev = node.next = None
        self._size -= 1
        return Cursor(self._head, following)

    def push_front(self, value: T) -> None:
        new_node = Node(value)
        if self._head is None:
            self._head = self._tail = new_node
        else:
            new_node.next = self._head
            self._head.prev = new_node
            self._head = new_node
        self._size += 1

    def push_back(self, value: T) -> Cursor[T]:
        """Append ``value`` and return a cursor to the new node."""
        if self.is_empty():
            node = Node(value)
            self._head = self._tail = node
            self._size += 1
            return Cursor(self._head, node)
        return self.insert_after(self.last(), value)

    def pop_front(self) -> None:
        if self._head is None:
            raise IndexError("list is empty")
        old = self._head
        self._head = old.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        old.next = None
        self._size -= 1

    def pop_back(self) -> None:
        if self._tail is None:
            raise IndexError("list is empty")
        old = self._tail
        self._tail = old.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        old.prev = None
        self._size -= 1

    def front(self) -> T:
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.element

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.element

    def at(self, index: int) -> T:
        """Return the element at ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError("index out of bounds")
        return self.begin().advance(index).element()

    def reverse(self) -> None:
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def copy(self) -> "DoublyLinkedList[T]":
        return DoublyLinkedList(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> "DoublyLinkedList[T]":
        from copy import deepcopy

        return DoublyLinkedList(deepcopy(list(self), memo))