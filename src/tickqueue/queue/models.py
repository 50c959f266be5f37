"""Data models for the tick queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tickqueue.core.identity import TickId

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ItemInfo(Generic[T]):
    """A stored entry: an item and the tick it belongs to.

    Unpacks as a ``(tick_id, item)`` pair:

        for tick, item in queue.entries():
            ...

    Attributes:
        tick_id: Tick the item was pushed at.
        item: The caller's item.
    """

    tick_id: TickId
    item: T

    def __iter__(self) -> Iterator[Any]:
        yield self.tick_id
        yield self.item

    def __str__(self) -> str:
        return f"{self.tick_id}: {self.item}"
