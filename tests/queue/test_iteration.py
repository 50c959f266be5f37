"""Tests for queue iteration.

Why these tests exist:
- Consumers advance their state machine from iter()/iter_with_tick()
- Iteration must never consume or reorder the queue
"""

import pytest

from tickqueue import FromIndexIterator, IndexOutOfBoundsError, TickId, TickQueue


@pytest.fixture
def moves():
    items = TickQueue()
    items.push(TickId(0), "Move 1")
    items.push(TickId(1), "Move 2")
    items.push(TickId(2), "Move 3")
    return items


def test_iter_yields_items_in_tick_order(moves):
    it = moves.iter()
    assert next(it) == "Move 1"
    assert next(it) == "Move 2"
    assert next(it) == "Move 3"
    assert next(it, None) is None


def test_iter_is_restartable_and_non_consuming(moves):
    assert list(moves.iter()) == list(moves.iter())
    assert list(moves) == ["Move 1", "Move 2", "Move 3"]
    assert len(moves) == 3


def test_iter_with_tick_pairs(moves):
    assert list(moves.iter_with_tick()) == [
        (TickId(0), "Move 1"),
        (TickId(1), "Move 2"),
        (TickId(2), "Move 3"),
    ]


def test_entries_unpack_as_pairs(moves):
    assert [(tick.value, item) for tick, item in moves.entries()] == [
        (0, "Move 1"),
        (1, "Move 2"),
        (2, "Move 3"),
    ]


def test_iter_on_empty_queue():
    items: TickQueue[str] = TickQueue()
    assert next(items.iter(), None) is None
    assert list(items.iter_with_tick()) == []


def test_iter_from_index(moves):
    it = moves.iter_from(1)

    assert isinstance(it, FromIndexIterator)
    assert it.start_index == 1
    assert next(it).item == "Move 2"
    assert it.current_index == 2
    assert next(it).item == "Move 3"
    assert next(it, None) is None


def test_iter_from_index_out_of_bounds_is_empty(moves):
    assert list(moves.iter_from(10)) == []


def test_iter_from_negative_index(moves):
    with pytest.raises(IndexOutOfBoundsError):
        moves.iter_from(-1)


def test_drain_consumes_in_order(moves):
    drained = [(info.tick_id.value, info.item) for info in moves.drain()]

    assert drained == [(0, "Move 1"), (1, "Move 2"), (2, "Move 3")]
    assert moves.is_empty()


def test_drain_stopped_early_keeps_remaining(moves):
    it = moves.drain()
    next(it)

    assert moves.to_list() == ["Move 2", "Move 3"]


def test_mutating_during_iteration_is_detected(moves):
    with pytest.raises(RuntimeError):
        for _ in moves.iter():
            moves.pop()
