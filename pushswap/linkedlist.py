"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class ListNode:
    """One link of the list: its content and the link after it."""

    content: Any
    next: Optional[ListNode] = None


class LinkedList:
    """A singly linked list that keeps track of its first and last links."""

    def __init__(self, items: Iterable[Any] = ()):
        self.head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> ListNode:
        """Put a new link holding ``content`` before the first one."""
        node = ListNode(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> ListNode:
        """Put a new link holding ``content`` after the last one."""
        node = ListNode(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[ListNode]:
        """Return the last link, or None when the list is empty."""
        return self._tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first link, pass its content to ``delete`` and return it."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every link, passing each content to ``delete`` in order."""
        while self.head is not None:
            self.pop_front(delete)

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, first to last."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents made so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result