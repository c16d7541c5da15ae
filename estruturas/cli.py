"""Interactive command interpreter driving an integer linked list."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .elements import ElementType
from .linkedlist import EmptyListError, LinkedList
from .tokens import split_args

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def run(lines: Iterable[str], out: TextIO) -> None:
    """Execute commands from ``lines``, writing echoes and results to ``out``."""
    items = LinkedList(ElementType.INT)
    for line in lines:
        out.write(f"${line}")
        args = split_args(line)
        command = args[0] if args else ""
        try:
            if command == "end":
                break
            if command == "push_front":
                for word in args[1:]:
                    items.push_front(_to_int(word))
            elif command == "push_back":
                for word in args[1:]:
                    items.push_back(_to_int(word))
            elif command == "show":
                out.write(items.format() + "\n")
            elif command == "empty":
                out.write("true\n" if items.is_empty() else "false\n")
            elif command == "pop_front":
                items.pop_front()
            elif command == "pop_back":
                items.pop_back()
            elif command == "size":
                out.write(f"{len(items)}\n")
            elif command == "clear":
                items.clear()
            else:
                out.write("invalid argument\n")
        except EmptyListError as exc:
            out.write(f"{exc}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input until ``end`` or end of input."""
    parser = argparse.ArgumentParser(
        description="Manipulate a linked list of integers with commands read from stdin."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())