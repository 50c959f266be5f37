"""Tests for QueueSettings and how TickQueue applies them."""

import pytest
from pydantic import ValidationError

from tickqueue import TICK_ID_MAX, QueueSettings, TickId, TickQueue, WrongTickOrderError


def test_defaults():
    settings = QueueSettings()

    assert settings.initial_tick is None
    assert settings.keep_sequence_on_drain is False


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("TICKQUEUE_INITIAL_TICK", "12")
    monkeypatch.setenv("TICKQUEUE_KEEP_SEQUENCE_ON_DRAIN", "true")

    settings = QueueSettings()

    assert settings.initial_tick == 12
    assert settings.keep_sequence_on_drain is True


@pytest.mark.parametrize("value", [-1, TICK_ID_MAX + 1])
def test_rejects_out_of_range_initial_tick(value):
    with pytest.raises(ValidationError):
        QueueSettings(initial_tick=value)


def test_initial_tick_from_settings_anchors_queue():
    queue = TickQueue(settings=QueueSettings(initial_tick=10))

    assert queue.expected_tick == TickId(10)
    with pytest.raises(WrongTickOrderError):
        queue.push(11, "early")
    queue.push(10, "first")


def test_explicit_initial_tick_wins_over_settings():
    queue = TickQueue(initial_tick=3, settings=QueueSettings(initial_tick=10))

    assert queue.expected_tick == TickId(3)


def test_queue_reads_environment_when_no_settings_given(monkeypatch):
    monkeypatch.setenv("TICKQUEUE_INITIAL_TICK", "7")

    assert TickQueue().expected_tick == TickId(7)


def test_drained_queue_accepts_any_tick_by_default():
    queue = TickQueue()
    queue.push(5, "a")
    queue.pop()

    assert queue.expected_tick is None
    queue.push(500, "b")


@pytest.mark.parametrize(
    "drain",
    [
        lambda q: q.pop(),
        lambda q: q.take(0),
        lambda q: q.take_count(10),
        lambda q: q.discard_count(10),
        lambda q: q.discard_up_to(100),
        lambda q: list(q.drain()),
    ],
)
def test_keep_sequence_on_drain(drain):
    """Every removal path that empties the queue keeps the sequence."""
    queue = TickQueue(settings=QueueSettings(keep_sequence_on_drain=True))
    queue.push(5, "a")

    drain(queue)

    assert queue.is_empty()
    assert queue.expected_tick == TickId(6)
    with pytest.raises(WrongTickOrderError) as exc_info:
        queue.push(500, "b")
    assert exc_info.value.expected == TickId(6)
    queue.push(6, "b")


def test_clear_resets_kept_sequence():
    queue = TickQueue(settings=QueueSettings(keep_sequence_on_drain=True))
    queue.push(5, "a")
    queue.pop()

    queue.clear()

    assert queue.expected_tick is None
