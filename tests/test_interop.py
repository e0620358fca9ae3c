"""Tests for shapely and geopy conversions."""
import pytest
from geopy.point import Point as GeopyPoint
from shapely.geometry import Point

from geo_coordinates.coordinates import Coordinate
from geo_coordinates.interop import (
    from_geopy_point,
    from_shapely_point,
    to_geopy_point,
    to_shapely_point,
)


class TestShapely:
    """Test conversion to and from shapely points."""

    def test_x_is_longitude(self):
        point = to_shapely_point(Coordinate("49°12'8.8\"N 16°36'54.2\"W"))
        assert point.x == pytest.approx(-16.615055, abs=1e-6)
        assert point.y == pytest.approx(49.202444, abs=1e-6)

    def test_from_point(self):
        assert from_shapely_point(Point(16.615052, 49.202442)) == Coordinate(49.202442, 16.615052)


class TestGeopy:
    """Test conversion to and from geopy points."""

    def test_to_point(self):
        point = to_geopy_point(Coordinate(-33.8688, 151.2093))
        assert point.latitude == pytest.approx(-33.8688)
        assert point.longitude == pytest.approx(151.2093)

    def test_from_point(self):
        assert from_geopy_point(GeopyPoint(49.202442, 16.615052)) == Coordinate(49.202442, 16.615052)

    def test_out_of_range_latitude(self):
        with pytest.raises(ValueError):
            to_geopy_point(Coordinate(91.0, 0.0))
