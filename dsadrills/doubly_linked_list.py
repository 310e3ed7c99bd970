"""Doubly linked lists."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A node of a doubly linked list."""

    data: int
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that keeps track of its head and tail."""

    def __init__(self, values=()):
        self.head = None
        self.tail = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value):
        """Put ``value`` in front of the list."""
        node = Node(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, value):
        """Put ``value`` at the end of the list."""
        node = Node(value, prev=self.tail)
        if self.tail is None:
            self.head = node
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
        node = Node(value, prev=previous, next=previous.next)
        previous.next.prev = node
        previous.next = node

    def delete_at(self, position):
        """Remove the node at ``position`` (1 is the head) and return its value."""
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def reverse(self):
        """Reverse the list in place."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.head, self.tail = self.tail, self.head

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self):
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self):
        return sum(1 for _ in self)