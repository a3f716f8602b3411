import pytest

from puhpkit.containers import Queue, Stack


def test_queue_is_fifo():
    q = Queue()
    for item in ["a", "b", "c"]:
        q.enqueue(item)
    assert q.front() == "a"
    assert [q.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert q.is_empty()


def test_queue_len_tracks_operations():
    q = Queue()
    q.enqueue(1)
    q.enqueue(2)
    assert len(q) == 2
    q.dequeue()
    assert len(q) == 1
    assert q.front() == 2


def test_queue_empty_errors():
    q = Queue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.front()


def test_queue_clear():
    q = Queue()
    q.enqueue(1)
    q.enqueue(2)
    q.clear()
    assert len(q) == 0
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.front()


def test_stack_is_lifo():
    s = Stack()
    for item in ["a", "b", "c"]:
        s.push(item)
    assert s.top() == "c"
    assert [s.pop() for _ in range(3)] == ["c", "b", "a"]
    assert s.is_empty()


def test_stack_len_tracks_operations():
    s = Stack()
    s.push(10)
    s.push(20)
    assert len(s) == 2
    s.pop()
    assert len(s) == 1
    assert s.top() == 10


def test_stack_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()


def test_stack_clear():
    s = Stack()
    s.push(1)
    s.push(2)
    s.clear()
    assert len(s) == 0
    with pytest.raises(IndexError):
        s.pop()