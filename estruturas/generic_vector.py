"""A growable vector of values of one element type."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Sequence

from .elements import ElementType


class Vector:
    """Vector storing values of one :class:`ElementType` with tracked capacity."""

    def __init__(self, element_type: ElementType) -> None:
        self.element_type = element_type
        self._items: list[Any] = []
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self.element_type.name}, {self._items!r})"

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True if the vector holds no elements."""
        return not self._items

    def reserve(self, new_capacity: int) -> None:
        """Set the capacity; requests below the current length are ignored."""
        if new_capacity < len(self._items):
            return
        self._capacity = new_capacity

    def _prepare_insert(self, value: Any) -> None:
        if not self.element_type.accepts(value):
            raise TypeError("invalid type")
        if len(self._items) == self._capacity:
            self.reserve(max(1, self._capacity * 2))

    def push_back(self, value: Any) -> None:
        """Append ``value``."""
        self._prepare_insert(value)
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._prepare_insert(value)
        self._items.insert(0, value)

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` at position ``pos`` (0..len inclusive)."""
        if pos < 0 or pos > len(self._items):
            raise IndexError("invalid insert position")
        self._prepare_insert(value)
        self._items.insert(pos, value)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def at(self, index: int) -> Any:
        """Return the element at ``index``."""
        if index < 0 or index >= len(self._items):
            raise IndexError("index out of bounds")
        return self._items[index]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("empty vector")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("empty vector")
        return self._items[-1]

    def format(self) -> str:
        """Render the vector as ``[ a, b, c ]``."""
        if not self._items:
            return "[ ]"
        return "[ " + ", ".join(self.element_type.format(v) for v in self._items) + " ]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show a short demonstration of the vector operations."""
    v = Vector(ElementType.INT)
    for i in range(1, 11, 2):
        v.push_back(i)
    v.push_front(99)
    out = sys.stdout
    out.write("antes: " + v.format() + "\n")
    out.write(f"{len(v)}")
    v.insert(1, 100)
    out.write("depois: " + v.format() + "\n")
    out.write("true\n" if v.is_empty() else "false\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())