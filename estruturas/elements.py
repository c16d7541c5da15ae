"""Element types shared by the list and vector containers."""

from __future__ import annotations

import enum
from typing import Any


class ElementType(enum.Enum):
    """The kind of value a container holds, and how it is printed."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"

    def accepts(self, value: Any) -> bool:
        """Return True if ``value`` may be stored in a container of this type."""
        if isinstance(value, bool):
            return False
        if self is ElementType.INT:
            return isinstance(value, int)
        if self is ElementType.FLOAT:
            return isinstance(value, (int, float))
        return isinstance(value, str)

    def format(self, value: Any) -> str:
        """Render ``value`` the way containers of this type show it."""
        if self is ElementType.INT:
            return f"{value:d}"
        if self is ElementType.FLOAT:
            return f"{value:.2f}"
        return f"{value}"