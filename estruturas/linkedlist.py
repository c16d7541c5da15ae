"""A circular doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .elements import ElementType


class EmptyListError(IndexError):
    """Raised when removing from an empty list."""


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class LinkedList:
    """Doubly linked list holding values of one :class:`ElementType`."""

    def __init__(self, element_type: ElementType) -> None:
        self.element_type = element_type
        self._root = _Node()
        self._root.next = self._root
        self._root.prev = self._root
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self._root.next
        while node is not self._root:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({self.element_type.name}, {list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._len == 0

    def _check_type(self, value: Any) -> None:
        if not self.element_type.accepts(value):
            raise TypeError("invalid type")

    def _insert_after(self, at: _Node, value: Any) -> None:
        node = _Node(value)
        node.prev = at
        node.next = at.next
        at.next.prev = node
        at.next = node
        self._len += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._len -= 1
        return node.value

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head of the list."""
        self._check_type(value)
        self._insert_after(self._root, value)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the tail of the list."""
        self._check_type(value)
        self._insert_after(self._root.prev, value)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.is_empty():
            raise EmptyListError("empty list")
        return self._unlink(self._root.next)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.is_empty():
            raise EmptyListError("empty list")
        return self._unlink(self._root.prev)

    def clear(self) -> None:
        """Remove every element; an already empty list is an error."""
        if self.is_empty():
            raise EmptyListError("empty list")
        self._root.next = self._root
        self._root.prev = self._root
        self._len = 0

    def format(self) -> str:
        """Render the list as ``[a, b, c]``."""
        return "[" + ", ".join(self.element_type.format(v) for v in self) + "]"