"""Singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _ListNode:
    value: int
    next: Optional["_ListNode"] = None


class LinkedList:
    """A singly linked list with insertion at both ends."""

    def __init__(self) -> None:
        self.head: Optional[_ListNode] = None

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self.head = _ListNode(value, self.head)

    def insert_at_end(self, value: int) -> None:
        """Append ``value`` to the end of the list."""
        new_node = _ListNode(value)
        if self.head is None:
            self.head = new_node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = new_node

    def delete_first(self) -> None:
        """Remove the first node; an empty list is left unchanged."""
        if self.head is not None:
            self.head = self.head.next

    def search(self, value: int) -> bool:
        """Report whether ``value`` occurs in the list."""
        return any(item == value for item in self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_ListNode] = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def has_cycle(self) -> bool:
        """Report whether following ``next`` links ever returns to a visited node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def __iter__(self) -> Iterator[int]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next