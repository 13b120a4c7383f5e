import pytest

from dsakit.errors import CapacityError, EmptyError
from dsakit.stack import BoundedStack


def _stack(capacity, *values):
    stack = BoundedStack(capacity)
    for value in values:
        stack.push(value)
    return stack


def test_pop_returns_values_in_reverse_order():
    stack = _stack(5, 90, 97, 12)
    assert [stack.pop() for _ in range(3)] == [12, 97, 90]
    assert stack.is_empty()


def test_iteration_goes_from_top_to_bottom():
    assert list(_stack(3, 90, 97)) == [97, 90]


def test_source_sequence_leaves_first_value():
    stack = _stack(2, 90, 97)
    assert stack.pop() == 97
    assert list(stack) == [90]


def test_push_on_full_stack_raises_overflow():
    stack = _stack(2, 1, 2)
    assert stack.is_full()
    with pytest.raises(CapacityError):
        stack.push(3)
    assert list(stack) == [2, 1]


@pytest.mark.parametrize("operation", ["pop", "peek"])
def test_empty_stack_raises_underflow(operation):
    with pytest.raises(EmptyError):
        getattr(BoundedStack(1), operation)()


def test_peek_does_not_remove():
    stack = _stack(2, "a")
    assert stack.peek() == "a"
    assert len(stack) == 1


def test_len_tracks_pushes_and_pops():
    stack = _stack(4, *range(4))
    assert len(stack) == 4
    stack.pop()
    assert len(stack) == 3


def test_room_is_reclaimed_after_pop():
    stack = _stack(1, 1)
    stack.pop()
    stack.push(2)
    assert stack.peek() == 2


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_is_rejected(capacity):
    with pytest.raises(ValueError):
        BoundedStack(capacity)


def test_capacity_is_reported():
    assert BoundedStack(7).capacity == 7