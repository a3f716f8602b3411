"""Exercise the linked list through a mixed sequence of operations."""

from __future__ import annotations

from typing import Optional, Sequence

from puhpkit.linked_list import DoublyLinkedList

GREETING = "Hello, my name is Quiche Hollandaise!"


def exercise_list() -> DoublyLinkedList[int]:
    """Run a workload of pushes, pops, erasures, copies and assigns; return the list."""
    dll: DoublyLinkedList[int] = DoublyLinkedList()

    for i in range(100):
        dll.push_front(i * 2)
        dll.push_back(i * 2)
    for _ in range(100):
        dll.pop_front()
        dll.pop_back()

    dll.push_front(5)
    dll.erase(dll.begin())

    dll.assign(276, 100)

    first_copy = dll.copy()
    second_copy = DoublyLinkedList(dll)
    if first_copy != dll or second_copy != dll:
        raise RuntimeError("copied lists differ from the original")

    dll.assign(100, 1000)
    return dll


def main(argv: Optional[Sequence[str]] = None) -> int:
    print(GREETING)
    exercise_list()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())