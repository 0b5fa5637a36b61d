import pytest

from dlclist.circular import CircularList, EmptyListError


def make(values, list_id=0):
    lst = CircularList(list_id)
    for value in values:
        lst.insert_before(value)
    return lst


def test_new_list_is_empty():
    lst = CircularList(4)
    assert len(lst) == 0
    assert lst.values() == []
    assert lst.id == 4


def test_current_on_empty_raises():
    with pytest.raises(EmptyListError):
        CircularList(1).current


def test_first_insert_becomes_current():
    lst = CircularList(1)
    lst.insert_after(10)
    assert lst.current == 10
    assert len(lst) == 1


def test_insert_after_keeps_current():
    lst = CircularList(1)
    lst.insert_after(1)
    lst.insert_after(2)
    lst.insert_after(3)
    assert lst.current == 1
    assert lst.values() == [1, 3, 2]


def test_insert_before_appends_in_order():
    lst = make([1, 2, 3])
    assert lst.current == 1
    assert lst.values() == [1, 2, 3]
    assert lst.values(forward=False) == [1, 3, 2]


def test_move_forward_and_backward():
    lst = make([1, 2, 3])
    lst.move_forward()
    assert lst.current == 2
    lst.move_backward()
    lst.move_backward()
    assert lst.current == 3
    assert lst.values() == [3, 1, 2]


def test_move_wraps_around():
    lst = make([5, 6, 7])
    for _ in range(len(lst)):
        lst.move_forward()
    assert lst.current == 5


def test_move_on_empty_raises():
    lst = CircularList(0)
    with pytest.raises(EmptyListError):
        lst.move_forward()
    with pytest.raises(EmptyListError):
        lst.move_backward()


def test_delete_current_moves_to_next():
    lst = make([1, 2, 3])
    assert lst.delete_current() == 1
    assert lst.current == 2
    assert lst.values() == [2, 3]
    assert len(lst) == 2


def test_delete_last_element_empties_list():
    lst = make([9])
    assert lst.delete_current() == 9
    assert len(lst) == 0
    with pytest.raises(EmptyListError):
        lst.current


def test_delete_on_empty_raises():
    with pytest.raises(EmptyListError):
        CircularList(0).delete_current()


def test_links_stay_consistent_after_mixed_operations():
    lst = make([1, 2, 3, 4])
    lst.move_forward()
    lst.delete_current()
    lst.insert_after(8)
    lst.move_backward()
    forward = lst.values()
    backward = lst.values(forward=False)
    assert forward[0] == backward[0]
    assert forward[1:] == list(reversed(backward[1:]))
    assert sorted(forward) == [1, 3, 4, 8]


def test_iter_matches_values():
    lst = make([4, 5, 6])
    lst.move_forward()
    assert list(lst) == lst.values()


def test_copy_is_equal_and_independent():
    lst = make([1, 2, 3], list_id=2)
    lst.move_forward()
    duplicate = lst.copy()
    assert duplicate.values() == lst.values()
    assert duplicate.current == lst.current
    assert len(duplicate) == len(lst)
    duplicate.delete_current()
    assert lst.values() == [2, 3, 1]
    assert len(duplicate) == len(lst) - 1


def test_copy_of_empty_is_empty():
    duplicate = CircularList(3).copy()
    assert len(duplicate) == 0
    assert duplicate.values() == []


def test_format_single_element():
    lst = make([5], list_id=7)
    assert lst.format() == "DLC list | Id : 7\nElements count: 1\nvalue: 5 <- current\n\n"


def test_format_empty():
    assert CircularList(3).format() == "DLC list | Id : 3\nElements count: 0\nList is empty...\n\n"


def test_format_direction():
    lst = make([1, 2, 3], list_id=0)
    forward = lst.format(True).splitlines()
    backward = lst.format(False).splitlines()
    assert forward[2:5] == ["value: 1 <- current", "value: 2", "value: 3"]
    assert backward[2:5] == ["value: 1 <- current", "value: 3", "value: 2"]