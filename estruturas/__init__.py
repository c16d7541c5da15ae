"""Typed linked list and vector data structures, with a small interactive list shell."""

__version__ = "0.1.0"
__all__ = ["cli", "dynamic_vector", "elements", "generic_vector", "linkedlist", "tokens"]