"""tickqueue: gapless, tick-ordered queue for simulation and replay loops.

Usage:
    from tickqueue import TickQueue, WrongTickOrderError

    queue: TickQueue[str] = TickQueue()
    queue.push(5, "a")
    queue.push(6, "b")

    try:
        queue.push(9, "c")
    except WrongTickOrderError as err:
        resync(expected=err.expected, received=err.received)

    while (info := queue.pop()) is not None:
        step(info.tick_id, info.item)
"""

import logging

__version__ = "0.1.0"

# Core primitives
from tickqueue.core import TICK_ID_MAX, TickId

# Configuration
from tickqueue.config import QueueSettings

# Queue and errors
from tickqueue.queue import (
    FromIndexIterator,
    IndexOutOfBoundsError,
    ItemInfo,
    NotFrontElementError,
    QueueError,
    TickNotFoundError,
    TickQueue,
    TickSequence,
    WrongTickOrderError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "TickId",
    "TICK_ID_MAX",
    # Config
    "QueueSettings",
    # Queue
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
