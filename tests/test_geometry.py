"""Unit tests for the eraser hit-test."""

import pytest

from paint.domain.entities.segment import Point
from paint.domain.services.geometry import is_erasable, within_erase_radius


class TestWithinEraseRadius:

    @pytest.mark.parametrize("brush", [0.1, 1.0, 10.0, 250.0])
    @pytest.mark.parametrize("cursor", [Point(0, 0), Point(-50.5, 12.25), Point(1080, 1920)])
    def test_point_always_erases_itself(self, cursor, brush):
        assert within_erase_radius(cursor, brush, cursor)

    def test_box_edges_are_inclusive(self):
        # brush 10 -> radius 15
        cursor = Point(100, 100)
        assert within_erase_radius(cursor, 10, Point(115, 100))
        assert within_erase_radius(cursor, 10, Point(85, 85))
        assert not within_erase_radius(cursor, 10, Point(115.01, 100))
        assert not within_erase_radius(cursor, 10, Point(100, 84.99))

    def test_corner_is_inside_square_box(self):
        # outside a circle of radius 15, inside the axis-aligned box
        assert within_erase_radius(Point(0, 0), 10, Point(14, 14))

    def test_both_axes_must_match(self):
        assert not within_erase_radius(Point(0, 0), 10, Point(0, 40))
        assert not within_erase_radius(Point(0, 0), 10, Point(40, 0))


class TestIsErasable:

    def test_start_only_in_range(self, segment_factory):
        seg = segment_factory(1, 1, 500, 500)
        assert is_erasable(seg, Point(0, 0), 10)

    def test_end_only_in_range(self, segment_factory):
        seg = segment_factory(500, 500, 2, 2)
        assert is_erasable(seg, Point(0, 0), 10)

    def test_crossing_without_endpoints_is_kept(self, segment_factory):
        # the line passes through the cursor but neither endpoint is near it
        seg = segment_factory(-100, 0, 100, 0)
        assert not is_erasable(seg, Point(0, 0), 10)
