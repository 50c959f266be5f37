"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from tickqueue import TickQueue

# Host TICKQUEUE_* variables would leak into every QueueSettings() default.
for _name in [name for name in os.environ if name.startswith("TICKQUEUE_")]:
    del os.environ[_name]


@dataclass(frozen=True, slots=True)
class GameInput:
    jumping: bool = False
    move_horizontal: int = 0


@pytest.fixture
def queue():
    """Fresh, unanchored TickQueue."""
    return TickQueue()


@pytest.fixture
def abc_queue():
    """Queue holding "a", "b", "c" at ticks 5, 6, 7."""
    q = TickQueue()
    q.push(5, "a")
    q.push(6, "b")
    q.push(7, "c")
    return q


@pytest.fixture
def game_input_cls():
    return GameInput
