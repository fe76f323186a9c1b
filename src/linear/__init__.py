"""Linear data structures.

This module provides a singly linked list with head/tail references, which
also serves as the adjacency-list container for the graph module.
"""

from src.linear.linked_list import LinkedList, ListNode

__all__ = ["LinkedList", "ListNode"]
