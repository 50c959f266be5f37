"""Tick identity: step identifiers and their bounds."""

from tickqueue.core.identity.models import TICK_ID_MAX, TickId

__all__ = [
    "TickId",
    "TICK_ID_MAX",
]
