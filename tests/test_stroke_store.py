"""Unit tests for StrokeStore."""

import pytest

from paint.domain.entities.segment import Color, Point, Segment
from paint.domain.entities.stroke_store import StrokeStore


def test_append_to_empty_store(red):
    store = StrokeStore()
    seg = Segment(Point(0, 0), Point(10, 10), red, 10)

    store.append(seg)

    assert len(store) == 1
    assert store[0] == seg


def test_insertion_order_is_kept(segment_factory):
    store = StrokeStore()
    segs = [segment_factory(i, i, i + 1, i + 1) for i in range(5)]
    for seg in segs:
        store.append(seg)

    assert list(store) == segs


def test_duplicates_are_allowed(segment_factory):
    store = StrokeStore()
    seg = segment_factory(0, 0, 1, 1)
    store.append(seg)
    store.append(seg)
    assert len(store) == 2


def test_remove_where_returns_count(segment_factory):
    store = StrokeStore([segment_factory(0, 0, 1, 1), segment_factory(50, 50, 60, 60),
                         segment_factory(2, 2, 3, 3)])

    removed = store.remove_where(lambda s: s.start.x < 10)

    assert removed == 2
    assert len(store) == 1
    assert store[0].start == Point(50, 50)


def test_clear_empties_store(segment_factory):
    store = StrokeStore([segment_factory(0, 0, 1, 1) for _ in range(20)])
    store.clear()
    assert len(store) == 0


def test_snapshot_is_isolated_from_later_mutation(segment_factory):
    store = StrokeStore([segment_factory(0, 0, 1, 1)])
    snap = store.snapshot()

    store.append(segment_factory(5, 5, 6, 6))
    store.clear()

    assert isinstance(snap, tuple)
    assert len(snap) == 1


def test_point_rejects_non_finite():
    for bad in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(ValueError):
            Point(bad, 0)
        with pytest.raises(ValueError):
            Point.from_pair([0, bad])


def test_point_difference_overflow_is_rejected():
    with pytest.raises(ValueError):
        Point(1e308, 0) - Point(-1e308, 0)


def test_segment_to_dict():
    seg = Segment(Point(1, 2), Point(3, 4), Color(255, 0, 0, 128), 7.5)
    assert seg.to_dict() == {
        "start": [1.0, 2.0],
        "end": [3.0, 4.0],
        "color": "#FF000080",
        "stroke_width": 7.5,
    }
