import pytest

from dsadrills.singly_linked_list import (
    Node,
    SinglyLinkedList,
    detect_loop,
    floyd_detect_loop,
    is_circular,
    loop_start,
    remove_duplicates,
    remove_duplicates_sorted,
    remove_loop,
)


def _values(head):
    result = []
    while head is not None:
        result.append(head.data)
        head = head.next
    return result


def _looped():
    lst = SinglyLinkedList([10, 12, 15, 22])
    lst.tail.next = lst.head.next
    return lst


def test_insert_at_tail_keeps_order():
    values = [10, 12, 15]
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_at_tail(value)
    assert list(lst) == values
    assert len(lst) == len(values)
    assert lst.tail.data == values[-1]


def test_insert_at_head_reverses_order():
    values = [1, 2, 3]
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_at_head(value)
    assert list(lst) == values[::-1]
    assert lst.tail.data == values[0]


def test_insert_at_position_end_updates_tail():
    lst = SinglyLinkedList([10, 12, 15])
    lst.insert_at_position(4, 22)
    assert list(lst) == [10, 12, 15, 22]
    assert lst.tail.data == 22


def test_insert_at_position_middle_and_front():
    lst = SinglyLinkedList([10, 15])
    lst.insert_at_position(2, 12)
    lst.insert_at_position(1, 5)
    assert list(lst) == [5, 10, 12, 15]


@pytest.mark.parametrize("position", [0, 5, -1])
def test_insert_at_invalid_position(position):
    lst = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert_at_position(position, 9)


def test_delete_at_positions():
    lst = SinglyLinkedList([1, 2, 3, 4])
    assert lst.delete_at(1) == 1
    assert lst.delete_at(2) == 3
    assert list(lst) == [2, 4]
    assert lst.delete_at(2) == 4
    assert lst.tail.data == 2
    assert lst.delete_at(1) == 2
    assert list(lst) == []
    assert lst.tail is None


@pytest.mark.parametrize("position", [0, 4])
def test_delete_at_invalid_position(position):
    lst = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.delete_at(position)
    assert list(lst) == [1, 2, 3]


def test_delete_from_empty_list():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)


def test_loop_detection_and_removal():
    lst = _looped()
    assert detect_loop(lst.head)
    assert floyd_detect_loop(lst.head) is not None
    assert loop_start(lst.head) is lst.head.next
    remove_loop(lst.head)
    assert list(lst) == [10, 12, 15, 22]
    assert lst.tail.next is None
    assert not detect_loop(lst.head)


def test_no_loop():
    lst = SinglyLinkedList([1, 2, 3])
    assert not detect_loop(lst.head)
    assert floyd_detect_loop(lst.head) is None
    assert loop_start(lst.head) is None
    remove_loop(lst.head)
    assert list(lst) == [1, 2, 3]


def test_single_node_loop():
    node = Node(7)
    node.next = node
    assert detect_loop(node)
    assert loop_start(node) is node
    remove_loop(node)
    assert node.next is None


def test_is_circular():
    assert is_circular(None)
    lst = SinglyLinkedList([1, 2, 3])
    assert not is_circular(lst.head)
    lst.tail.next = lst.head
    assert is_circular(lst.head)


def test_remove_duplicates_sorted():
    values = [1, 1, 2, 3, 3, 3]
    head = SinglyLinkedList(values).head
    assert _values(remove_duplicates_sorted(head)) == sorted(set(values))


def test_remove_duplicates_unsorted_keeps_first_occurrences():
    values = [4, 2, 4, 1, 2, 4]
    head = SinglyLinkedList(values).head
    assert _values(remove_duplicates(head)) == list(dict.fromkeys(values))


def test_remove_duplicates_of_empty_list():
    assert remove_duplicates(None) is None
    assert remove_duplicates_sorted(None) is None