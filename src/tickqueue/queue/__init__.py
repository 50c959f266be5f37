"""Tick-ordered queue: container, entries, iterators and errors."""

from tickqueue.queue.errors import (
    IndexOutOfBoundsError,
    NotFrontElementError,
    QueueError,
    TickNotFoundError,
    WrongTickOrderError,
)
from tickqueue.queue.iterators import FromIndexIterator
from tickqueue.queue.models import ItemInfo
from tickqueue.queue.protocol import TickSequence
from tickqueue.queue.tick_queue import TickQueue

__all__ = [
    "TickQueue",
    "ItemInfo",
    "FromIndexIterator",
    "TickSequence",
    # Errors
    "QueueError",
    "WrongTickOrderError",
    "TickNotFoundError",
    "IndexOutOfBoundsError",
    "NotFrontElementError",
]
