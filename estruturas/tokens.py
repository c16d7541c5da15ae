"""Splitting of command lines into words."""

from __future__ import annotations


def split_args(line: str) -> list[str]:
    """Split ``line`` on spaces, ignoring everything from the first newline on."""
    line = line.split("\n", 1)[0]
    return [word for word in line.split(" ") if word]