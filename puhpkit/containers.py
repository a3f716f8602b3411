"""First-in-first-out queue and last-in-first-out stack containers."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, List, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue that raises ``IndexError`` when read while empty."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def enqueue(self, item: T) -> None:
        """Put ``item`` at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


class Stack(Generic[T]):
    """A LIFO stack that raises ``IndexError`` when read while empty."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, item: T) -> None:
        """Push ``item`` onto the top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the item on top of the stack."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the item on top of the stack without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items