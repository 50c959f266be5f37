"""Errors raised by the tick queue.

Every error leaves the queue exactly as it was before the failing call.
"""

from __future__ import annotations

from tickqueue.core.identity import TickId


class QueueError(Exception):
    """Base class for tick queue errors."""

    pass


class WrongTickOrderError(QueueError, ValueError):
    """Raised when a push does not carry the next expected tick.

    Attributes:
        expected: Tick the queue required.
        received: Tick the caller supplied.
    """

    def __init__(self, expected: TickId, received: TickId):
        self.expected = expected
        self.received = received
        super().__init__(f"Wrong tick order: expected {expected}, received {received}")


class TickNotFoundError(QueueError, LookupError):
    """Raised when a tick is not present in the queue."""

    def __init__(self, tick: TickId):
        self.tick = tick
        super().__init__(f"Tick {tick} not found in queue")


class IndexOutOfBoundsError(QueueError, IndexError):
    """Raised when a position does not refer to a stored entry."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of bounds for queue of length {length}")


class NotFrontElementError(QueueError):
    """Raised when removing an entry other than the front.

    Attributes:
        tick: Tick of the entry the caller asked for.
        front: Tick of the current front entry.
    """

    def __init__(self, tick: TickId, front: TickId):
        self.tick = tick
        self.front = front
        super().__init__(f"Tick {tick} is not the front element (front is {front})")
