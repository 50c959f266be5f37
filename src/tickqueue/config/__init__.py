"""Configuration module using Pydantic Settings.

Usage:
    from tickqueue.config import QueueSettings

    settings = QueueSettings(initial_tick=0)
"""

from tickqueue.config.settings import QueueSettings

__all__ = [
    "QueueSettings",
]
