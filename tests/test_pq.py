import random

import pytest

from dsakit.pq import PriorityQueue


def _drain(pq, count, expected):
    seen = []
    for want in expected[:count]:
        priority = pq.first_priority()
        first = pq.first()
        removed = pq.remove_first()
        assert first == removed
        assert priority == want
        assert removed[0] == want
        seen.append(removed[0])
    return seen


def test_two_rounds_of_random_values_come_out_sorted():
    rng = random.Random(0)
    n, m = 16, 16
    pq = PriorityQueue()
    vals = []
    for i in range(n):
        v = rng.randrange(64)
        vals.append(v)
        pq.insert((v, i), v)
    assert len(pq) == n

    sorted_vals = sorted(vals)
    k = n // 2
    assert _drain(pq, k, sorted_vals) == sorted_vals[:k]
    assert len(pq) == n - k

    for i in range(n, n + m):
        v = rng.randrange(64)
        vals.append(v)
        pq.insert((v, i), v)

    remaining = sorted(sorted_vals[k:] + vals[n:])
    out = []
    for want in remaining:
        priority = pq.first_priority()
        first = pq.first()
        removed = pq.remove_first()
        assert first == removed
        assert priority == want
        out.append(removed[0])
    assert out == remaining
    assert pq.is_empty()
    assert k + len(out) == n + m


def test_new_queue_is_empty():
    pq = PriorityQueue()
    assert pq.is_empty()
    assert len(pq) == 0


def test_lowest_priority_value_first():
    pq = PriorityQueue()
    pq.insert("low", 5)
    pq.insert("high", 1)
    pq.insert("mid", 3)
    assert pq.first() == "high"
    assert pq.first_priority() == 1
    assert [pq.remove_first() for _ in range(3)] == ["high", "mid", "low"]


def test_first_does_not_remove():
    pq = PriorityQueue()
    pq.insert("a", 2)
    assert pq.first() == "a"
    assert len(pq) == 1


def test_none_value_is_ignored():
    pq = PriorityQueue()
    pq.insert(None, 1)
    assert pq.is_empty()


def test_empty_queue_first_raises():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.first()
    assert len(pq) == 0


def test_empty_queue_first_priority_raises():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.first_priority()
    assert len(pq) == 0


def test_empty_queue_remove_first_raises():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.remove_first()
    assert pq.is_empty()


def test_many_values_beyond_initial_capacity():
    rng = random.Random(42)
    priorities = [rng.randrange(-100, 100) for _ in range(200)]
    pq = PriorityQueue()
    for index, priority in enumerate(priorities):
        pq.insert(index, priority)
    out = []
    while not pq.is_empty():
        out.append(pq.first_priority())
        pq.remove_first()
    assert out == sorted(priorities)