"""Tick-ordered queue.

TickQueue keeps a gapless run of (tick, item) entries. Items are appended at
the back with the tick after the current back tick and removed from the
front, so the stored ticks always form a contiguous increasing run.

Usage:
    queue: TickQueue[str] = TickQueue()
    queue.push(5, "a")
    queue.push(6, "b")
    queue.push(8, "c")       # raises WrongTickOrderError(expected=7, received=8)

    info = queue.pop()       # ItemInfo(tick_id=TickId(5), item="a")
    for tick, item in queue.iter_with_tick():
        ...
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from tickqueue.config import QueueSettings
from tickqueue.core.identity import TICK_ID_MAX, TickId
from tickqueue.queue.errors import (
    IndexOutOfBoundsError,
    NotFrontElementError,
    TickNotFoundError,
    WrongTickOrderError,
)
from tickqueue.queue.iterators import FromIndexIterator
from tickqueue.queue.models import ItemInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TickQueue(Generic[T]):
    """Double-ended buffer of items keyed by contiguous ticks.

    Only two mutations preserve ordering: appending at the back with
    ``back_tick + 1`` and removing from the front. Anything that would
    splice the middle of the run is rejected.

    An empty queue accepts any tick as the new base unless it is anchored,
    either through ``initial_tick`` / ``clear(initial_tick=...)`` or, after a
    drain, through ``QueueSettings.keep_sequence_on_drain``.

    Args:
        initial_tick: Tick the first push must carry. None accepts any tick.
        settings: Queue settings. When omitted, QueueSettings() is built per
            queue, so TICKQUEUE_* variables (or a .env file) present at
            construction time apply to every default queue.

    Thread Safety:
        None. Wrap the queue in a lock when sharing it between threads.
    """

    def __init__(
        self,
        initial_tick: TickId | int | None = None,
        *,
        settings: QueueSettings | None = None,
    ):
        self._settings = settings or QueueSettings()
        self._items: deque[ItemInfo[T]] = deque()
        if initial_tick is None:
            initial_tick = self._settings.initial_tick
        # Expected tick while empty; None accepts any tick.
        self._anchor: TickId | None = None if initial_tick is None else TickId.of(initial_tick)

    # Insertion

    def push(self, tick: TickId | int, item: T) -> None:
        """Append an item at the back of the queue.

        Args:
            tick: Tick of the item. Must equal ``back_tick + 1`` when the
                queue holds entries, or the anchor when one is set.
            item: Item to store.

        Raises:
            WrongTickOrderError: If tick is not the expected next tick.
            OverflowError: If the back tick is already TICK_ID_MAX.
            TypeError: If tick is not an int or TickId.
            ValueError: If tick is outside the unsigned 32-bit range.
        """
        tick = TickId.of(tick)
        expected = self.expected_tick
        if expected is not None and tick != expected:
            raise WrongTickOrderError(expected=expected, received=tick)

        self._items.append(ItemInfo(tick_id=tick, item=item))
        self._anchor = None

    # Removal

    def pop(self) -> ItemInfo[T] | None:
        """Remove and return the front entry, or None when empty."""
        removed = self._pop_front(1)
        return removed[0] if removed else None

    def take(self, index: int) -> ItemInfo[T]:
        """Remove and return the entry at a position.

        Only the front entry (position 0) may be removed.

        Args:
            index: 0-based position from the front.

        Returns:
            The removed entry.

        Raises:
            IndexOutOfBoundsError: If no entry exists at index.
            NotFrontElementError: If the entry exists but is not the front.
            TypeError: If index is not an int.
        """
        _check_index(index)
        if index < 0 or index >= len(self._items):
            raise IndexOutOfBoundsError(index, len(self._items))
        if index != 0:
            raise NotFrontElementError(self._items[index].tick_id, self._items[0].tick_id)
        return self._pop_front(1)[0]

    def take_tick(self, tick: TickId | int) -> ItemInfo[T]:
        """Remove and return the entry with a given tick.

        Only the front entry may be removed.

        Raises:
            TickNotFoundError: If no entry carries tick.
            NotFrontElementError: If the entry exists but is not the front.
            TypeError: If tick is not an int or TickId.
            ValueError: If tick is outside the unsigned 32-bit range.
        """
        tick = TickId.of(tick)
        if self.get_tick(tick) is None:
            raise TickNotFoundError(tick)
        front = self._items[0].tick_id
        if tick != front:
            raise NotFrontElementError(tick, front)
        return self._pop_front(1)[0]

    def take_count(self, count: int) -> tuple[TickId, list[T]] | None:
        """Remove up to count entries from the front.

        Args:
            count: Maximum number of entries to remove.

        Returns:
            Tick of the first removed entry and the removed items in order,
            or None if the queue is empty.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if not self._items:
            return None
        first_tick = self._items[0].tick_id
        return first_tick, [info.item for info in self._pop_front(count)]

    def discard_up_to(self, tick: TickId | int) -> int:
        """Drop front entries with a tick lower than tick.

        Returns:
            Number of entries dropped.
        """
        tick = TickId.of(tick)
        front = self.front_tick
        if front is None or tick <= front:
            return 0
        dropped = len(self._pop_front(tick - front))
        logger.debug("Discarded %d entries below tick %s", dropped, tick)
        return dropped

    def discard_count(self, count: int) -> int:
        """Drop up to count entries from the front.

        Returns:
            Number of entries dropped.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        dropped = len(self._pop_front(count))
        if dropped:
            logger.debug("Discarded %d entries from front", dropped)
        return dropped

    def drain(self) -> Iterator[ItemInfo[T]]:
        """Pop entries front to back, yielding each one."""
        while self._items:
            yield from self._pop_front(1)

    def clear(self, initial_tick: TickId | int | None = None) -> None:
        """Remove all entries.

        Args:
            initial_tick: Tick the next push must carry. None accepts any tick.
        """
        self._items.clear()
        self._anchor = None if initial_tick is None else TickId.of(initial_tick)
        logger.debug("Cleared queue (anchor=%s)", self._anchor)

    # Access

    def front(self) -> ItemInfo[T] | None:
        """Oldest entry, or None when empty."""
        return self._items[0] if self._items else None

    def back(self) -> ItemInfo[T] | None:
        """Newest entry, or None when empty."""
        return self._items[-1] if self._items else None

    @property
    def front_tick(self) -> TickId | None:
        return self._items[0].tick_id if self._items else None

    @property
    def back_tick(self) -> TickId | None:
        return self._items[-1].tick_id if self._items else None

    @property
    def expected_tick(self) -> TickId | None:
        """Tick the next push must carry, or None if any tick is accepted.

        Raises:
            OverflowError: If the back tick is TICK_ID_MAX.
        """
        if self._items:
            return self._items[-1].tick_id.next()
        return self._anchor

    def get(self, index: int) -> ItemInfo[T] | None:
        """Entry at a 0-based position, or None. Negative positions are not supported.

        Raises:
            TypeError: If index is not an int.
        """
        _check_index(index)
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def get_tick(self, tick: TickId | int) -> ItemInfo[T] | None:
        """Entry carrying tick, or None.

        Raises:
            TypeError: If tick is not an int or TickId.
            ValueError: If tick is outside the unsigned 32-bit range.
        """
        tick = TickId.of(tick)
        front = self.front_tick
        if front is None:
            return None
        offset = tick - front
        if 0 <= offset < len(self._items):
            return self._items[offset]
        return None

    def contains_tick(self, tick: TickId | int) -> bool:
        return self.get_tick(tick) is not None

    def is_empty(self) -> bool:
        return not self._items

    def to_list(self) -> list[T]:
        """Copy of the stored items in tick order."""
        return [info.item for info in self._items]

    # Iteration

    def iter(self) -> Iterator[T]:
        """Items in tick order, front to back. Does not consume the queue."""
        return (info.item for info in self._items)

    def iter_with_tick(self) -> Iterator[tuple[TickId, T]]:
        """(tick, item) pairs in tick order, front to back."""
        return ((info.tick_id, info.item) for info in self._items)

    def entries(self) -> Iterator[ItemInfo[T]]:
        """Stored entries in tick order, front to back."""
        return iter(self._items)

    def iter_from(self, index: int) -> FromIndexIterator[T]:
        """Entries starting at a 0-based position.

        Raises:
            IndexOutOfBoundsError: If index is negative.
            TypeError: If index is not an int.
        """
        _check_index(index)
        if index < 0:
            raise IndexOutOfBoundsError(index, len(self._items))
        return FromIndexIterator(self._items, index)

    # Internal helpers

    def _pop_front(self, count: int) -> list[ItemInfo[T]]:
        """Pop up to count entries from the front, tracking a drain."""
        removed = [self._items.popleft() for _ in range(min(count, len(self._items)))]
        if removed and not self._items:
            self._on_drained(removed[-1].tick_id)
        return removed

    def _on_drained(self, last_tick: TickId) -> None:
        if not self._settings.keep_sequence_on_drain:
            return
        # Past TICK_ID_MAX there is no successor to wait for.
        self._anchor = last_tick.next() if last_tick.value < TICK_ID_MAX else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, tick: object) -> bool:
        if isinstance(tick, bool) or not isinstance(tick, TickId | int):
            return False
        if isinstance(tick, int) and not 0 <= tick <= TICK_ID_MAX:
            return False
        return self.contains_tick(tick)

    def __repr__(self) -> str:
        if not self._items:
            return f"TickQueue(empty, expected={self._anchor})"
        return (
            f"TickQueue(len={len(self._items)}, "
            f"front={self._items[0].tick_id}, back={self._items[-1].tick_id})"
        )


def _check_index(index: object) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Queue index must be an int, got {type(index).__name__}")
