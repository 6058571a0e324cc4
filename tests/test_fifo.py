import copy

import pytest

from juez.fifo import Queue


def test_queue_fifo_order():
    items = [4, 8, 15, 16]
    q = Queue(items)
    assert [q.pop() for _ in items] == items
    assert len(q) == 0


def test_queue_front_and_len():
    q = Queue()
    q.push("a")
    q.push("b")
    assert q.front() == "a"
    assert len(q) == 2
    q.pop()
    assert q.front() == "b"


def test_queue_empty_errors():
    q = Queue()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.pop()


def test_queue_reuse_after_empty():
    q = Queue([1])
    q.pop()
    q.push(2)
    q.push(3)
    assert list(q) == [2, 3]


def test_queue_copy_is_independent():
    original = Queue([1, 2, 3])
    clone = copy.copy(original)
    clone.pop()
    clone.push(9)
    assert list(original) == [1, 2, 3]
    assert list(clone) == [2, 3, 9]
    assert len(clone) == len(original)