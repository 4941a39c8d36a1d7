"""A singly linked stack."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"]


class SimpleLinkedList:
    """A last-in, first-out list of items linked from the head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the head (most recently pushed) to the tail."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def push(self, item: Any) -> None:
        """Put ``item`` on the head of the list."""
        self._head = _Node(item, self._head)
        self._size += 1

    def pop(self) -> Optional[Any]:
        """Remove and return the head item, or None if the list is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Optional[Any]:
        """Return the head item without removing it, or None if empty."""
        return None if self._head is None else self._head.value

    def reverse(self) -> "SimpleLinkedList":
        """Return a new list whose head is this list's tail."""
        return SimpleLinkedList(self)

    def to_list(self) -> list[Any]:
        """Return the items in the order they were pushed."""
        items = list(self)
        items.reverse()
        return items