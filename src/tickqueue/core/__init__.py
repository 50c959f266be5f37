"""Core primitives: immutable value types shared by the containers.

Architecture Note:
    core/ holds stateless value types only.
    For the stateful container, see queue/.
"""

from tickqueue.core.identity import TICK_ID_MAX, TickId

__all__ = [
    "TickId",
    "TICK_ID_MAX",
]
