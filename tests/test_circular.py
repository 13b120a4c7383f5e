import pytest

from dsakit.circular import CircularLinkedList
from dsakit.errors import EmptyError, InvalidPositionError


def _assert_holds(lst, expected):
    assert list(lst) == expected
    assert len(lst) == len(expected)


@pytest.mark.parametrize("values", [[], [5], [1, 2, 3]])
def test_build_from_values(values):
    _assert_holds(CircularLinkedList(values), values)


def test_empty_list_displays_nothing():
    assert str(CircularLinkedList()) == ""


@pytest.mark.parametrize(
    "steps, expected",
    [
        ([("insert_first", 9), ("append", 3)], [9, 1, 2, 3]),
        ([("insert_last", 9), ("insert_first", 0)], [0, 1, 2, 9]),
    ],
)
def test_insert_at_an_end(steps, expected):
    lst = CircularLinkedList([1, 2])
    for method, value in steps:
        getattr(lst, method)(value)
    _assert_holds(lst, expected)


def test_insert_first_on_empty():
    lst = CircularLinkedList()
    lst.insert_first(4)
    lst.insert_first(3)
    _assert_holds(lst, [3, 4])


@pytest.mark.parametrize("position", [1, 2, 3])
def test_insert_at_goes_after_position(position):
    lst = CircularLinkedList([10, 20, 30])
    lst.insert_at(position, 99)
    values = list(lst)
    assert values[position] == 99
    assert [v for v in values if v != 99] == [10, 20, 30]
    assert len(lst) == 4


def test_insert_at_last_position_updates_tail():
    lst = CircularLinkedList([1, 2])
    lst.insert_at(2, 3)
    lst.append(4)
    _assert_holds(lst, [1, 2, 3, 4])


@pytest.mark.parametrize(
    "operation, position",
    [("insert_at", 0), ("insert_at", 4), ("delete_at", 0), ("delete_at", 4), ("delete_at", -2)],
)
def test_invalid_position_raises(operation, position):
    lst = CircularLinkedList([10, 20, 30])
    args = (position, 99) if operation == "insert_at" else (position,)
    with pytest.raises(InvalidPositionError):
        getattr(lst, operation)(*args)
    _assert_holds(lst, [10, 20, 30])


@pytest.mark.parametrize(
    "operation",
    [
        lambda lst: lst.insert_at(1, 1),
        CircularLinkedList.delete_first,
        CircularLinkedList.delete_last,
        lambda lst: lst.delete_at(1),
    ],
)
def test_operations_on_empty_list_raise(operation):
    lst = CircularLinkedList()
    with pytest.raises(EmptyError):
        operation(lst)
    _assert_holds(lst, [])


@pytest.mark.parametrize(
    "method, removed, remaining",
    [("delete_first", 1, [2, 3]), ("delete_last", 3, [1, 2])],
)
def test_delete_at_an_end_keeps_ring_usable(method, removed, remaining):
    lst = CircularLinkedList([1, 2, 3])
    assert getattr(lst, method)() == removed
    _assert_holds(lst, remaining)
    lst.append(4)
    _assert_holds(lst, remaining + [4])


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_only_element_empties(method):
    lst = CircularLinkedList([7])
    assert getattr(lst, method)() == 7
    _assert_holds(lst, [])
    lst.append(8)
    _assert_holds(lst, [8])


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_at(position):
    values = [10, 20, 30]
    lst = CircularLinkedList(values)
    assert lst.delete_at(position) == values[position - 1]
    _assert_holds(lst, values[: position - 1] + values[position:])


def test_str_format():
    assert str(CircularLinkedList([1, 2, 3])) == "1->2->3->"


def test_length_matches_iteration_after_operations():
    lst = CircularLinkedList(range(5))
    lst.delete_at(3)
    lst.insert_at(1, 7)
    lst.delete_last()
    lst.insert_first(8)
    assert len(lst) == len(list(lst))


def test_session_like_source_main():
    lst = CircularLinkedList([1, 2, 3, 4])
    assert str(lst) == "1->2->3->4->"
    assert lst.delete_at(2) == 2
    assert str(lst) == "1->3->4->"