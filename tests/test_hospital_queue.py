import pytest

from dsakit.hospital_queue import HospitalQueue, Patient


def _sample():
    queue = HospitalQueue()
    queue.add_patient("John", 3)
    queue.add_patient("Alice", 1)
    queue.add_patient("Bob", 2)
    queue.add_patient("Zara", 1)
    return queue


def test_order_by_priority_then_arrival():
    assert [p.name for p in _sample()] == ["Alice", "Zara", "Bob", "John"]


def test_serve_removes_front():
    queue = _sample()
    assert queue.serve_patient() == Patient("Alice", 1)
    assert queue.serve_patient() == Patient("Zara", 1)
    assert [p.name for p in queue] == ["Bob", "John"]
    assert len(queue) == 2


def test_serve_empty_raises():
    with pytest.raises(IndexError):
        HospitalQueue().serve_patient()


def test_add_returns_patient():
    queue = HospitalQueue()
    assert queue.add_patient("Ann", 4) == Patient("Ann", 4)
    assert len(queue) == 1


def test_priorities_non_decreasing():
    queue = HospitalQueue()
    for i, priority in enumerate([5, 2, 9, 2, 1, 5]):
        queue.add_patient(f"p{i}", priority)
    priorities = [p.priority for p in queue]
    assert priorities == sorted(priorities)