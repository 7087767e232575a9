"""A singly linked list with front and back insertion, iteration and mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a payload and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of arbitrary payloads."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, first passing each payload to ``delete`` in order."""
        if delete is not None:
            for content in list(self):
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each payload, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func`` applied to each payload."""
        return LinkedList(func(content) for content in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"