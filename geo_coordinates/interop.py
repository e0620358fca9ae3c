"""Conversions between Coordinate and shapely/geopy points."""

from __future__ import annotations

from geopy.point import Point as GeopyPoint
from shapely.geometry import Point

from geo_coordinates.coordinates import Coordinate


def to_shapely_point(coordinate: Coordinate) -> Point:
    """Return a shapely Point with x as longitude and y as latitude."""
    return Point(coordinate.longitude, coordinate.latitude)


def from_shapely_point(point: Point) -> Coordinate:
    return Coordinate(point.y, point.x)


def to_geopy_point(coordinate: Coordinate) -> GeopyPoint:
    """
    Return a geopy Point for the coordinate.

    geopy normalizes longitude into [-180, 180] and rejects latitudes
    outside [-90, 90], which Coordinate itself does not check.

    Raises:
        ValueError: If the latitude is out of range
    """
    return GeopyPoint(coordinate.latitude, coordinate.longitude)


def from_geopy_point(point: GeopyPoint) -> Coordinate:
    return Coordinate(point.latitude, point.longitude)
