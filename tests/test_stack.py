import pytest

from dsakit.stack import Stack

N = 16
K_PUSH = 8
K_POP = 4
SQUARES = [i * i for i in range(N)]


def test_push_pop_sequence_matches_simulated_stack():
    stack = Stack()
    for value in SQUARES[:K_PUSH]:
        stack.push(value)

    for expected in [49, 36, 25, 16]:
        assert stack.top() == expected
        assert stack.pop() == expected

    for value in SQUARES[K_PUSH:]:
        stack.push(value)

    expected_rest = [225, 196, 169, 144, 121, 100, 81, 64, 9, 4, 1, 0]
    popped = []
    for expected in expected_rest:
        assert stack.top() == expected
        popped.append(stack.pop())

    assert popped == expected_rest
    assert stack.is_empty() is True


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_length_tracks_pushes_and_pops():
    stack = Stack()
    for value in SQUARES:
        stack.push(value)
    assert len(stack) == N
    assert stack.pop() == 225
    assert len(stack) == N - 1
    assert stack.is_empty() is False


def test_top_does_not_remove():
    stack = Stack()
    stack.push(9)
    assert stack.top() == 9
    assert stack.top() == 9
    assert len(stack) == 1


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0


def test_top_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.top()
    assert stack.is_empty() is True