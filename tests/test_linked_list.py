import pytest
from hypothesis import given, strategies as st

from dsakit.linked_list import SinglyLinkedList


def _demo_list():
    items = SinglyLinkedList()
    items.append(10)
    items.append(20)
    items.append(30)
    items.prepend(5)
    return items


def test_demo_operations_order():
    assert list(_demo_list()) == [5, 10, 20, 30]


def test_demo_str():
    assert str(_demo_list()) == "Linked List: 5 -> 10 -> 20 -> 30 -> NULL"


def test_demo_position_and_remove():
    items = _demo_list()
    assert items.position(20) == 3
    items.remove(20)
    assert list(items) == [5, 10, 30]
    assert items.position(20) is None


def test_empty_str():
    assert str(SinglyLinkedList()) == "List is empty."


def test_remove_from_empty_raises():
    with pytest.raises(ValueError, match="empty"):
        SinglyLinkedList().remove(1)


def test_remove_missing_raises():
    items = SinglyLinkedList([1, 2])
    with pytest.raises(ValueError, match="not found"):
        items.remove(3)
    assert list(items) == [1, 2]


def test_remove_head_and_tail_then_append():
    items = SinglyLinkedList([1, 2, 3])
    items.remove(1)
    items.remove(3)
    items.append(4)
    assert list(items) == [2, 4]
    assert len(items) == 2


def test_remove_only_element_then_prepend():
    items = SinglyLinkedList([7])
    items.remove(7)
    assert len(items) == 0
    items.prepend(8)
    items.append(9)
    assert list(items) == [8, 9]


def test_remove_first_of_duplicates():
    items = SinglyLinkedList([1, 2, 1])
    items.remove(1)
    assert list(items) == [2, 1]


@given(st.lists(st.integers()))
def test_round_trip(values):
    items = SinglyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers(min_value=0, max_value=5)), st.integers(0, 5))
def test_position_matches_index(values, target):
    expected = values.index(target) + 1 if target in values else None
    assert SinglyLinkedList(values).position(target) == expected


@given(st.lists(st.integers(min_value=0, max_value=5), min_size=1), st.data())
def test_remove_matches_list_remove(values, data):
    target = data.draw(st.sampled_from(values))
    items = SinglyLinkedList(values)
    items.remove(target)
    expected = list(values)
    expected.remove(target)
    assert list(items) == expected
    assert len(items) == len(expected)