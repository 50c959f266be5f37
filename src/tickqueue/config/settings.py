"""Configuration settings using Pydantic Settings.

Provides typed queue defaults with environment variable support.

Usage:
    from tickqueue.config import QueueSettings

    # Load from environment variables (TICKQUEUE_*)
    settings = QueueSettings()

    # Or override with explicit values
    settings = QueueSettings(initial_tick=100, keep_sequence_on_drain=True)
    queue = TickQueue(settings=settings)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickqueue.core.identity import TICK_ID_MAX


class QueueSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for TickQueue instances.

    Attributes:
        initial_tick: Tick the first push must carry. None accepts any tick.
        keep_sequence_on_drain: After the queue empties through removal,
            keep expecting the tick after the last one seen instead of
            accepting any tick.

    Environment Variables:
        TICKQUEUE_INITIAL_TICK
        TICKQUEUE_KEEP_SEQUENCE_ON_DRAIN
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKQUEUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_tick: int | None = Field(default=None, ge=0, le=TICK_ID_MAX)
    keep_sequence_on_drain: bool = False
