"""Singly linked lists, with loop detection and duplicate removal."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: Optional["Node"] = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list that keeps track of its head and tail."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value):
        """Put ``value`` in front of the list."""
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head

    def insert_at_tail(self, value):
        """Put ``value`` at the end of the list."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def _node_at(self, position):
        if position < 1:
            raise IndexError("positions are numbered from 1")
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"no node at position {position}")
        return node

    def insert_at_position(self, position, value):
        """Insert ``value`` so that it ends up at ``position`` (1 is the head)."""
        if position == 1:
            self.insert_at_head(value)
            return
        previous = self._node_at(position - 1)
        if previous.next is None:
            self.insert_at_tail(value)
            return
        previous.next = Node(value, previous.next)

    def delete_at(self, position):
        """Remove the node at ``position`` (1 is the head) and return its value."""
        if position == 1:
            node = self._node_at(1)
            self.head = node.next
            if self.head is None:
                self.tail = None
        else:
            previous = self._node_at(position - 1)
            node = previous.next
            if node is None:
                raise IndexError(f"no node at position {position}")
            previous.next = node.next
            if node is self.tail:
                self.tail = previous
        node.next = None
        return node.data

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self):
        return sum(1 for _ in self)


def is_circular(head):
    """Tell whether following ``next`` from ``head`` leads back to ``head``.

    An empty list counts as circular.
    """
    if head is None:
        return True
    node = head.next
    while node is not None and node is not head:
        node = node.next
    return node is head


def detect_loop(head):
    """Tell whether the list starting at ``head`` contains a cycle."""
    visited = set()
    node = head
    while node is not None:
        if node in visited:
            return True
        visited.add(node)
        node = node.next
    return False


def floyd_detect_loop(head):
    """Return the node where a slow and a fast pointer meet, or None without a cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def loop_start(head):
    """Return the first node of the cycle, or None if there is none."""
    meeting = floyd_detect_loop(head)
    if meeting is None:
        return None
    node = head
    while node is not meeting:
        node = node.next
        meeting = meeting.next
    return node


def remove_loop(head):
    """Break the cycle, if any, by ending the list at the node that closes it."""
    start = loop_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None


def remove_duplicates_sorted(head):
    """Drop every later node whose value repeats an earlier one; return the head.

    Meant for sorted lists, where equal values sit next to each other.
    """
    current = head
    while current is not None:
        previous = current
        node = current.next
        while node is not None:
            if node.data == current.data:
                previous.next = node.next
            else:
                previous = node
            node = node.next
        current = current.next
    return head


def remove_duplicates(head):
    """Keep only the first node holding each value, in any order; return the head."""
    seen = set()
    previous = None
    node = head
    while node is not None:
        if node.data in seen:
            previous.next = node.next
        else:
            seen.add(node.data)
            previous = node
        node = node.next
    return head