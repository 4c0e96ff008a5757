import pytest

from dsaworks.array_deque import ArrayDeque


def _filled():
    dq = ArrayDeque(5)
    dq.push_front(1)
    dq.push_rear(2)
    dq.push_front(3)
    dq.push_rear(4)
    dq.push_front(5)
    return dq


def test_mixed_pushes_fill_the_deque():
    dq = _filled()
    assert dq.is_full() is True
    assert dq.is_empty() is False
    assert list(dq) == [5, 3, 1, 2, 4]


def test_push_to_full_deque_raises_at_both_ends():
    dq = _filled()
    with pytest.raises(IndexError):
        dq.push_front(6)
    with pytest.raises(IndexError):
        dq.push_rear(6)
    assert len(dq) == 5


def test_pops_and_peeks_follow_source_example():
    dq = _filled()
    assert dq.pop_front() == 5
    assert dq.pop_rear() == 4
    assert dq.peek_front() == 3
    assert dq.peek_rear() == 2
    assert dq.is_empty() is False
    assert dq.is_full() is False


def test_empty_deque_operations_raise():
    dq = ArrayDeque(3)
    assert dq.is_empty() is True
    for operation in (dq.pop_front, dq.pop_rear, dq.peek_front, dq.peek_rear):
        with pytest.raises(IndexError):
            operation()


def test_single_element_is_both_front_and_rear():
    dq = ArrayDeque(2)
    dq.push_rear(42)
    assert dq.peek_front() == 42
    assert dq.peek_rear() == 42
    assert dq.pop_rear() == 42
    assert dq.is_empty() is True


def test_push_front_then_pop_rear_is_fifo():
    dq = ArrayDeque(4)
    for value in [1, 2, 3, 4]:
        dq.push_front(value)
    assert [dq.pop_rear() for _ in range(4)] == [1, 2, 3, 4]


def test_push_rear_then_pop_rear_is_lifo():
    dq = ArrayDeque(4)
    for value in [1, 2, 3, 4]:
        dq.push_rear(value)
    assert [dq.pop_rear() for _ in range(4)] == [4, 3, 2, 1]


def test_space_is_reused_after_pops():
    dq = ArrayDeque(3)
    for value in [1, 2, 3]:
        dq.push_rear(value)
    assert dq.pop_front() == 1
    dq.push_rear(4)
    assert dq.is_full() is True
    assert dq.pop_rear() == 4
    dq.push_front(0)
    assert list(dq) == [0, 2, 3]


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity_raises(capacity):
    with pytest.raises(ValueError):
        ArrayDeque(capacity)