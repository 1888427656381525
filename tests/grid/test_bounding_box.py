"""
Tests for BoundingBox
"""

import math

import pytest

from tilecrs.core.coordinate import Coordinate
from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.bounding_box import BoundingBox


class TestBoundingBox:
    """Test BoundingBox"""

    @pytest.fixture
    def bbox(self):
        return BoundingBox(-10.0, -5.0, 30.0, 15.0)

    def test_dimensions(self, bbox):
        assert bbox.width == 40.0
        assert bbox.height == 20.0

    def test_corners(self, bbox):
        assert bbox.top_left == Coordinate(-10.0, 15.0)
        assert bbox.top_right == Coordinate(30.0, 15.0)
        assert bbox.bottom_left == Coordinate(-10.0, -5.0)
        assert bbox.bottom_right == Coordinate(30.0, -5.0)
        assert bbox.min == bbox.bottom_left
        assert bbox.max == bbox.top_right

    def test_center(self, bbox):
        assert bbox.center == Coordinate(10.0, 5.0)

    def test_min_greater_than_max(self):
        with pytest.raises(InvalidArgumentError):
            BoundingBox(1.0, 0.0, 0.0, 1.0)

        with pytest.raises(InvalidArgumentError):
            BoundingBox(0.0, 1.0, 1.0, 0.0)

    def test_non_finite(self):
        for value in [math.nan, math.inf, -math.inf, None]:
            with pytest.raises(InvalidArgumentError):
                BoundingBox(value, 0.0, 1.0, 1.0)

    def test_degenerate_allowed(self):
        bbox = BoundingBox(1.0, 1.0, 1.0, 1.0)
        assert bbox.width == 0.0
        assert bbox.height == 0.0

    def test_contains_inclusive(self, bbox):
        """Test plain containment includes every edge"""
        assert bbox.contains(Coordinate(0.0, 0.0))
        assert bbox.contains(bbox.top_left)
        assert bbox.contains(bbox.top_right)
        assert bbox.contains(bbox.bottom_left)
        assert bbox.contains(bbox.bottom_right)
        assert not bbox.contains(Coordinate(30.1, 0.0))
        assert not bbox.contains(Coordinate(0.0, -5.1))

    def test_intersects(self, bbox):
        assert bbox.intersects(BoundingBox(0.0, 0.0, 50.0, 50.0))
        assert bbox.intersects(BoundingBox(30.0, 15.0, 40.0, 20.0))  # touching corner
        assert not bbox.intersects(BoundingBox(31.0, 0.0, 40.0, 1.0))

    def test_equality_and_hash(self, bbox):
        other = BoundingBox(-10.0, -5.0, 30.0, 15.0)
        assert bbox == other
        assert hash(bbox) == hash(other)
        assert bbox != BoundingBox(-10.0, -5.0, 30.0, 16.0)

    def test_to_tuple_and_str(self, bbox):
        assert bbox.to_tuple() == (-10.0, -5.0, 30.0, 15.0)
        assert str(bbox) == "(-10.0, -5.0, 30.0, 15.0)"

    def test_immutable(self, bbox):
        with pytest.raises(AttributeError):
            bbox.min_x = 0.0
