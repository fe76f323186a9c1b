"""Singly linked list with head and tail references.

The list keeps ``first`` and ``last`` aliases into a chain of ``ListNode``
objects owned transitively from ``first``. Head and tail insertion are O(1);
lookup, tail deletion and reversal walk the chain.

    +-----------+-----------+--------+-------------+
    | Operation | Position  | Array  | Linked list |
    +===========+===========+========+=============+
    | Lookup    | By index  | O(1)   | O(n)        |
    |           | By value  | O(n)   | O(n)        |
    | Insert    | Head/Tail | O(n)   | O(1)        |
    | Delete    | Head      | O(n)   | O(1)        |
    |           | Tail      | O(n)   | O(n)        |
    +-----------+-----------+--------+-------------+

The list is written for integers but compares values with ``==`` only, so the
graph module reuses it as its adjacency-list container.
"""

from collections.abc import Iterator
from typing import Generic, TypeVar

import structlog

from src.errors import EmptyCollectionError, OutOfRangeError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ListNode(Generic[T]):
    """A node in a singly linked list."""

    __slots__ = ("next", "value")

    def __init__(self, value: T, next_node: "ListNode[T] | None" = None):
        self.value = value
        self.next = next_node

    def is_last(self) -> bool:
        """Return True if no node follows this one."""
        return self.next is None

    def __repr__(self) -> str:
        next_value = self.next.value if self.next is not None else None
        return f"ListNode(value={self.value!r}, next={next_value!r})"


class LinkedList(Generic[T]):
    """Singly linked list holding ``first`` and ``last`` node references.

    Thread-safety:
        This class is NOT thread-safe. Concurrent mutation from several
        threads must be serialised by the caller.

    Example:
        >>> numbers = LinkedList()
        >>> numbers.add_last(10)
        >>> numbers.add_last(20)
        >>> numbers.add_last(30)
        >>> str(numbers)
        '[10, 20, 30]'
        >>> numbers.get_kth_from_end(1)
        30
        >>> numbers.reverse()
        >>> str(numbers)
        '[30, 20, 10]'
    """

    def __init__(self, *values: T):
        """Create a list, appending any initial values in order.

        Args:
            *values: Values to append, first to last
        """
        self.first: ListNode[T] | None = None
        self.last: ListNode[T] | None = None
        self._size = 0

        for value in values:
            self.add_last(value)

    def add_first(self, value: T) -> None:
        """Insert a value at the head of the list."""
        node = ListNode(value)
        if self.is_empty():
            self.first = self.last = node
        else:
            node.next = self.first
            self.first = node
        self._size += 1

    def add_last(self, value: T) -> None:
        """Insert a value at the tail of the list."""
        node = ListNode(value)
        if self.is_empty():
            self.first = self.last = node
        else:
            self.last.next = node
            self.last = node
        self._size += 1

    def delete_first(self) -> None:
        """Remove the head node.

        Deletion never empties the list: a single remaining element is kept.

        Raises:
            EmptyCollectionError: If the list is empty
            OutOfRangeError: If the list holds a single element
        """
        if self.is_empty():
            msg = "Cannot delete the first element of an empty list"
            logger.warning("delete_from_empty_list", position="first")
            raise EmptyCollectionError(msg)

        if self.first.is_last():
            msg = "Cannot delete the first element of a single-element list"
            logger.warning("delete_from_single_element_list", position="first")
            raise OutOfRangeError(msg)

        self.first = self.first.next
        self._size -= 1

    def delete_last(self) -> None:
        """Remove the tail node.

        Deletion never empties the list: a single remaining element is kept.

        Raises:
            EmptyCollectionError: If the list is empty
            OutOfRangeError: If the list holds a single element
        """
        if self.is_empty():
            msg = "Cannot delete the last element of an empty list"
            logger.warning("delete_from_empty_list", position="last")
            raise EmptyCollectionError(msg)

        penultimate = self._get_penultimate()
        if penultimate is None:
            msg = "Cannot delete the last element of a single-element list"
            logger.warning("delete_from_single_element_list", position="last")
            raise OutOfRangeError(msg)

        self.last = penultimate
        self.last.next = None
        self._size -= 1

    def remove(self, value: T) -> bool:
        """Unlink the first node whose value equals ``value``.

        Unlike the delete operations this may leave the list empty.

        Args:
            value: Value to remove

        Returns:
            True if a node was removed, False if no node matched
        """
        previous: ListNode[T] | None = None
        current = self.first

        while current is not None:
            if current.value == value:
                if previous is None:
                    self.first = current.next
                else:
                    previous.next = current.next

                if current is self.last:
                    self.last = previous

                current.next = None
                self._size -= 1
                return True

            previous = current
            current = current.next

        return False

    def contains(self, value: T) -> bool:
        """Return True if ``value`` is in the list."""
        return self.index_of(value) != -1

    def index_of(self, value: T) -> int:
        """Find a value using linear search.

        Returns:
            Zero-based index of the first match, or -1 if absent
        """
        for index, current in enumerate(self):
            if current == value:
                return index
        return -1

    def reverse(self) -> None:
        """Reverse the list by rebuilding the chain as new nodes.

        Lists with zero or one element are left untouched.
        """
        if self.is_empty() or self.first is self.last:
            return

        # First rebuilt node doubles as the new tail
        new_last = ListNode(self.first.value)
        previous = new_last
        current = self.first.next
        while current is not None:
            previous = ListNode(current.value, previous)
            current = current.next

        self.first = previous
        self.last = new_last

    def get_kth_from_end(self, k: int) -> T:
        """Return the value ``k`` positions from the tail, where k=1 is the tail.

        A lead pointer is advanced k-1 nodes ahead of a trailing pointer;
        both then move together until the lead reaches the last node.

        Args:
            k: Position counted from the end, starting at 1

        Returns:
            Value stored at that position

        Raises:
            OutOfRangeError: If k is below 1 or exceeds the list length
        """
        if k < 1:
            msg = f"k must be at least 1, got {k}"
            raise OutOfRangeError(msg)

        trailing = self.first
        lead = self.first
        if lead is None:
            msg = f"k={k} exceeds list length 0"
            raise OutOfRangeError(msg)

        for _ in range(k - 1):
            lead = lead.next
            if lead is None:
                msg = f"k={k} exceeds list length {self._size}"
                raise OutOfRangeError(msg)

        while lead.next is not None:
            trailing = trailing.next
            lead = lead.next

        return trailing.value

    def is_empty(self) -> bool:
        """Return True if the list has no nodes."""
        return self.first is None and self.last is None

    def to_list(self) -> list[T]:
        """Return the values as a Python list, first to last."""
        return list(self)

    def _get_penultimate(self) -> ListNode[T] | None:
        """Return the node before ``last``, or None for lists shorter than two."""
        if self.first is None or self.first.next is None:
            return None

        penultimate = self.first
        while not penultimate.next.is_last():
            penultimate = penultimate.next
        return penultimate

    def __iter__(self) -> Iterator[T]:
        node = self.first
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __repr__(self) -> str:
