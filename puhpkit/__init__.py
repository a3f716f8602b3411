"""Linked list, queue, stack and hash table, with timing, complexity and process helpers."""

__version__ = "0.1.0"