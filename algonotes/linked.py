"""A queue built from linked nodes and a circular singly linked list."""

from __future__ import annotations


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value, following=None):
        self.value = value
        self.next = following


class LinkedQueue:
    """A first-in, first-out queue kept as a chain of nodes from front to rear."""

    def __init__(self, items=()):
        self._front = None
        self._rear = None
        self._size = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, item):
        """Add ``item`` at the rear."""
        node = _Node(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self):
        """Remove and return the item at the front."""
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self):
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self):
        return self._size


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, items=()):
        self._tail = None
        self._size = 0
        for item in items:
            self.insert_at_tail(item)

    def insert_at_head(self, value):
        """Make ``value`` the new first element."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_at_tail(self, value):
        """Make ``value`` the new last element."""
        self.insert_at_head(value)
        self._tail = self._tail.next

    def delete_at_head(self):
        """Remove and return the first element."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete(self, position):
        """Remove and return the element at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            return self.delete_at_head()
        previous = self._tail.next
        for _ in range(position - 2):
            previous = previous.next
        target = previous.next
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.value

    def __iter__(self):
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self):
        return self._size