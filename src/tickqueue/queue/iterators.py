"""Positional iteration over stored entries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from tickqueue.queue.models import ItemInfo

T = TypeVar("T")


class FromIndexIterator(Generic[T]):
    """Iterates entries starting at a position, front to back.

    Reads the live storage on every step, so the queue must not be mutated
    while iterating. A start position past the end yields nothing.

    Args:
        entries: Backing storage of the queue.
        start_index: Position of the first entry to yield.
    """

    def __init__(self, entries: deque[ItemInfo[T]], start_index: int = 0):
        self._entries = entries
        self._start_index = start_index
        self._current_index = start_index

    @property
    def start_index(self) -> int:
        return self._start_index

    @property
    def current_index(self) -> int:
        """Position of the entry the next call to ``next`` returns."""
        return self._current_index

    def __iter__(self) -> Iterator[ItemInfo[T]]:
        return self

    def __next__(self) -> ItemInfo[T]:
        if self._current_index >= len(self._entries):
            raise StopIteration
        info = self._entries[self._current_index]
        self._current_index += 1
        return info
