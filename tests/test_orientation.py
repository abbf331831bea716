"""Tests for polygon orientation and area helpers."""

import pytest

from core.room_gen.orientation import (
    orientation_sign,
    polygon_area,
    polygon_centroid,
    signed_area,
)


class TestOrientationSign:
    """Tests for winding detection."""

    def test_counter_clockwise_rectangle(self):
        rect = [(0, 0), (4, 0), (4, 3), (0, 3)]
        assert signed_area(rect) == pytest.approx(24.0)
        assert orientation_sign(rect) == 1

    def test_clockwise_rectangle(self):
        rect = [(0, 0), (0, 3), (4, 3), (4, 0)]
        assert signed_area(rect) == pytest.approx(-24.0)
        assert orientation_sign(rect) == -1

    def test_concave_l_shape(self):
        l_shape = [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
        assert orientation_sign(l_shape) == 1
        assert orientation_sign(list(reversed(l_shape))) == -1

    def test_zero_area_polygon_is_deterministic(self):
        line = [(0, 0), (1, 0), (2, 0)]
        assert signed_area(line) == 0.0
        assert orientation_sign(line) == 1


class TestAreaAndCentroid:
    """Tests for polygon_area and polygon_centroid."""

    def test_rectangle_area(self):
        assert polygon_area([(0, 0), (4, 0), (4, 3), (0, 3)]) == pytest.approx(12.0)

    def test_clockwise_area_is_positive(self):
        assert polygon_area([(0, 0), (0, 3), (4, 3), (4, 0)]) == pytest.approx(12.0)

    def test_rectangle_centroid(self):
        cx, cy = polygon_centroid([(0, 0), (4, 0), (4, 3), (0, 3)])
        assert cx == pytest.approx(2.0)
        assert cy == pytest.approx(1.5)

    def test_degenerate_centroid_uses_vertex_mean(self):
        cx, cy = polygon_centroid([(0, 0), (2, 0), (4, 0)])
        assert cx == pytest.approx(2.0)
        assert cy == pytest.approx(0.0)
