import pytest

from dsaprimer.nodes import (
    Node,
    contains,
    from_list,
    insert_before_value,
    insert_head,
    insert_kth,
    insert_last,
    length,
    remove_head,
    remove_kth,
    remove_tail,
    remove_value,
    to_list,
)

VALUES = [2, 5, 8, 7]


def test_round_trip():
    assert to_list(from_list(VALUES)) == VALUES


def test_from_empty_is_none():
    assert from_list([]) is None
    assert to_list(None) == []


def test_node_links():
    tail = Node(3)
    head = Node(1, tail)
    assert to_list(head) == [1, 3]
    assert tail.next is None


def test_length():
    assert length(from_list(VALUES)) == len(VALUES)
    assert length(None) == 0


def test_contains():
    head = from_list([12, 3, 4, 5])
    assert contains(head, 7) is False
    assert contains(head, 4) is True
    assert contains(None, 4) is False


def test_remove_head():
    assert to_list(remove_head(from_list(VALUES))) == VALUES[1:]
    assert remove_head(None) is None


def test_remove_tail():
    assert to_list(remove_tail(from_list(VALUES))) == VALUES[:-1]


def test_remove_tail_single_and_empty():
    assert remove_tail(Node(1)) is None
    assert remove_tail(None) is None


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_remove_kth(k):
    head = remove_kth(from_list(VALUES), k)
    assert to_list(head) == VALUES[: k - 1] + VALUES[k:]


def test_remove_kth_past_end_drops_tail():
    assert to_list(remove_kth(from_list(VALUES), 10)) == VALUES[:-1]


def test_remove_kth_below_one_unchanged():
    assert to_list(remove_kth(from_list(VALUES), 0)) == VALUES


def test_remove_kth_empty():
    assert remove_kth(None, 1) is None


@pytest.mark.parametrize("value", VALUES)
def test_remove_value(value):
    expected = list(VALUES)
    expected.remove(value)
    assert to_list(remove_value(from_list(VALUES), value)) == expected


def test_remove_value_only_first_occurrence():
    values = [1, 4, 2, 4]
    expected = list(values)
    expected.remove(4)
    assert to_list(remove_value(from_list(values), 4)) == expected


def test_remove_value_absent_unchanged():
    assert to_list(remove_value(from_list(VALUES), 99)) == VALUES
    assert remove_value(None, 1) is None


def test_insert_head():
    assert to_list(insert_head(from_list(VALUES), 1)) == [1] + VALUES
    assert to_list(insert_head(None, 1)) == [1]


def test_insert_last():
    assert to_list(insert_last(from_list(VALUES), 1)) == VALUES + [1]
    assert to_list(insert_last(None, 1)) == [1]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_kth(position):
    head = insert_kth(from_list(VALUES), 100, position)
    assert to_list(head) == VALUES[: position - 1] + [100] + VALUES[position - 1 :]


def test_insert_kth_past_end_appends():
    assert to_list(insert_kth(from_list(VALUES), 100, 9)) == VALUES + [100]


def test_insert_kth_into_empty():
    assert to_list(insert_kth(None, 100, 3)) == [100]


def test_insert_kth_below_one_unchanged():
    assert to_list(insert_kth(from_list(VALUES), 100, 0)) == VALUES


def test_insert_before_value_demo():
    assert to_list(insert_before_value(from_list(VALUES), 5, 4)) == [2, 4, 5, 8, 7]


def test_insert_before_value_at_head():
    assert to_list(insert_before_value(from_list(VALUES), 2, 9)) == [9] + VALUES


def test_insert_before_value_last():
    assert to_list(insert_before_value(from_list(VALUES), 7, 9)) == VALUES[:-1] + [9, 7]


def test_insert_before_value_absent_or_empty():
    assert to_list(insert_before_value(from_list(VALUES), 99, 9)) == VALUES
    assert insert_before_value(None, 5, 4) is None