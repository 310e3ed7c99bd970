"""Circular singly linked lists."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a circular linked list."""

    data: int
    next: Optional["Node"] = field(default=None, repr=False)


class CircularLinkedList:
    """A singly linked list whose last node points back to its head."""

    def __init__(self, head=None):
        self.head = head

    def _nodes(self):
        node = self.head
        if node is None:
            return
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def insert_after(self, element, value):
        """Insert ``value`` after the first node holding ``element``.

        In an empty list ``value`` becomes the only node.
        """
        if self.head is None:
            node = Node(value)
            node.next = node
            self.head = node
            return
        for node in self._nodes():
            if node.data == element:
                node.next = Node(value, node.next)
                return
        raise ValueError(f"{element!r} is not in the list")

    def delete(self, value):
        """Remove the first node holding ``value``, searching from after the head."""
        if self.head is None:
            raise ValueError("the list is empty")
        previous = self.head
        for _ in range(len(self)):
            current = previous.next
            if current.data == value:
                break
            previous = current
        else:
            raise ValueError(f"{value!r} is not in the list")
        previous.next = current.next
        if current is previous:
            self.head = None
        elif current is self.head:
            self.head = previous.next
        current.next = None

    def split(self):
        """Cut the list into two circular halves.

        This list keeps the first half (the larger one when the length is
        odd); the second half is returned as a new list.
        """
        length = len(self)
        if length < 2:
            raise ValueError("only a list of two or more nodes can be split")
        last_of_first = self.head
        for _ in range((length - 1) // 2):
            last_of_first = last_of_first.next
        second_head = last_of_first.next
        last = second_head
        while last.next is not self.head:
            last = last.next
        last_of_first.next = self.head
        last.next = second_head
        return CircularLinkedList(second_head)

    def is_circular(self):
        """Tell whether following ``next`` from the head leads back to it."""
        if self.head is None:
            return True
        node = self.head.next
        while node is not None and node is not self.head:
            node = node.next
        return node is self.head

    def __iter__(self):
        return (node.data for node in self._nodes())

    def __len__(self):
        return sum(1 for _ in self._nodes())