"""A growable vector of integers with explicit capacity doubling."""

from __future__ import annotations

from typing import Iterator


class IntVector:
    """Vector of integers whose capacity doubles whenever it fills up."""

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity < 1:
            raise ValueError("initial capacity must be positive")
        self._items: list[int] = []
        self._capacity = initial_capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntVector({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def push_back(self, value: int) -> None:
        """Append ``value``."""
        self._grow_if_full()
        self._items.append(value)

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the first element."""
        self._grow_if_full()
        self._items.insert(0, value)

    def erase(self, index: int) -> None:
        """Remove the element at ``index``; indices outside 1..len-1 are ignored."""
        if 0 < index < len(self._items):
            del self._items[index]

    def begin(self) -> int:
        """Return the first element."""
        if not self._items:
            raise IndexError("empty vector")
        return self._items[0]

    def end(self) -> int:
        """Return the last element."""
        if not self._items:
            raise IndexError("empty vector")
        return self._items[-1]