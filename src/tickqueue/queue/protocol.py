"""Read-only protocol for tick-ordered containers.

Consumers that only inspect a queue (renderers, replay checkers) can type
against TickSequence instead of the concrete TickQueue.

Usage:
    def latest_tick(seq: TickSequence[Any]) -> TickId | None:
        back = seq.back()
        return back.tick_id if back else None
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from tickqueue.core.identity import TickId
    from tickqueue.queue.models import ItemInfo

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class TickSequence(Protocol[T_co]):
    """Gapless run of items ordered by tick.

    Thread Safety:
        None. Callers synchronize externally.
    """

    def front(self) -> ItemInfo[T_co] | None:
        """Oldest entry, None when empty."""
        ...

    def back(self) -> ItemInfo[T_co] | None:
        """Newest entry, None when empty."""
        ...

    def __len__(self) -> int: ...

    def iter(self) -> Iterator[T_co]:
        """Items in tick order, front to back."""
        ...

    def iter_with_tick(self) -> Iterator[tuple[TickId, T_co]]:
        """(tick, item) pairs in tick order, front to back."""
        ...
