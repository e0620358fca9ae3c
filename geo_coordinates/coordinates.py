"""Coordinate parsing helpers and the Coordinate value.

A latitude/longitude pair can be given in decimal degrees (DD) or in
degrees, minutes and seconds (DMS), as one string, a two-element
sequence, two numbers or two single-point strings. Parsing is lenient by
default: malformed input degrades to 0.0 instead of raising. The strict
entry points raise ``CoordinateParseError`` instead.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Union

from geo_coordinates.decimal_degrees import extract_dd, find_numbers, to_degrees, trailing_cardinals
from geo_coordinates.dms import MAX_POINTS, Axis, Point, extract_points, tokenize_points
from geo_coordinates.formatting import format_coordinate
from geo_coordinates.notation import CoordinateFormat, detect_format, sanitize


class CoordinateParseError(ValueError):
    """Raised when strict parsing cannot produce a complete coordinate pair."""

    def __init__(self, reason: str, token=None):
        self.reason = reason
        self.token = token
        message = reason if token is None else f"{reason}: {token!r}"
        super().__init__(message)


@dataclass(frozen=True)
class RawText:
    """Latitude and longitude in one string, DD or DMS."""

    text: str


@dataclass(frozen=True)
class Pair:
    """Latitude and longitude as two numeric-like values."""

    latitude: object = None
    longitude: object = None


@dataclass(frozen=True)
class PointPair:
    """Latitude and longitude as two self-contained point strings."""

    latitude: object = None
    longitude: object = None


CoordinateInput = Union[RawText, Pair, PointPair]


def _or_zero(value: float | None) -> float:
    return 0.0 if value is None else value


def _pair(values) -> tuple[float, float]:
    latitude, longitude = (list(values) + [None, None])[:2]
    return _or_zero(latitude), _or_zero(longitude)


def _check_count(values: list[float], text: str, expected: int) -> None:
    if not values:
        raise CoordinateParseError("no coordinate values found", text)
    if len(values) < expected:
        raise CoordinateParseError("expected latitude and longitude", text)
    if len(values) > expected:
        raise CoordinateParseError("more values than expected", text)


def _check_points(points: list[Point], text: str, expected: int) -> None:
    tokens = tokenize_points(sanitize(text))
    if not tokens:
        raise CoordinateParseError("no coordinate values found", text)
    if len(tokens) > expected:
        raise CoordinateParseError("more points than expected", tokens[expected])
    if len(tokens) < expected:
        raise CoordinateParseError("expected latitude and longitude", text)

    for point in points:
        if len(point.cardinals) > 1:
            raise CoordinateParseError("conflicting cardinal directions", point.token)
        if point.value is None:
            raise CoordinateParseError("no numeric value in point", point.token)

    for axis in (Axis.LATITUDE, Axis.LONGITUDE):
        tagged = [point for point in points if point.cardinals and point.axis is axis]
        if len(tagged) > 1:
            raise CoordinateParseError(f"more than one {axis.value} point", tagged[1].token)


def _check_cardinals(value: str, axis: Axis | None) -> None:
    cardinals = trailing_cardinals(value)
    letters = set(cardinals[0]) if cardinals else set()
    if len(letters) > 1:
        raise CoordinateParseError("conflicting cardinal directions", value)
    if axis is None or not letters:
        return
    tagged = Axis.LATITUDE if letters <= set("ns") else Axis.LONGITUDE
    if tagged is not axis:
        raise CoordinateParseError(f"expected a {axis.value}", value)


def _coerce(value, strict: bool) -> float:
    if not strict:
        return to_degrees(value)
    if value is None:
        raise CoordinateParseError("missing value")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise CoordinateParseError("not a number", value) from e
    except OverflowError as e:
        raise CoordinateParseError("not a finite number", value) from e
    if not math.isfinite(number):
        raise CoordinateParseError("not a finite number", value)
    return number


def parse_text(text, strict: bool = False) -> tuple[float, float]:
    """Parse one string holding both latitude and longitude."""
    text = "" if text is None else str(text)
    if detect_format(text) is CoordinateFormat.DMS:
        points = extract_points(text)
        if strict:
            _check_points(points, text, MAX_POINTS)
        return _pair(point.value for point in points)

    if strict:
        _check_count(find_numbers(text), text, MAX_POINTS)
    return _pair(extract_dd(text))


def parse_point(value, axis: Axis | None = None, strict: bool = False) -> float:
    """
    Parse a single latitude or longitude into decimal degrees.

    Args:
        value: Point text such as ``49°12'08.8"N`` or ``-23.5``, or a number
        axis: Axis the point is expected on; only checked when strict
        strict: Raise instead of falling back to 0.0

    Returns:
        The first value found in ``value``

    Raises:
        CoordinateParseError: If strict and the point is malformed
    """
    if not isinstance(value, str):
        return _coerce(value, strict)

    if detect_format(value) is CoordinateFormat.DMS:
        points = extract_points(value)
        if strict:
            _check_points(points, value, 1)
            point = points[0]
            if axis is not None and point.cardinals and point.axis is not axis:
                raise CoordinateParseError(f"expected a {axis.value}", point.token)
        values = [point.value for point in points]
    else:
        values = find_numbers(value)
        if strict:
            _check_count(values, value, 1)
            _check_cardinals(value, axis)

    return _or_zero(values[0] if values else None)


def parse_pair(latitude, longitude, strict: bool = False) -> tuple[float, float]:
    return _coerce(latitude, strict), _coerce(longitude, strict)


def parse_points(latitude, longitude, strict: bool = False) -> tuple[float, float]:
    return (
        parse_point(latitude, Axis.LATITUDE, strict),
        parse_point(longitude, Axis.LONGITUDE, strict),
    )


def parse_input(source: CoordinateInput, strict: bool = False) -> tuple[float, float]:
    """
    Route a tagged input to its parser.

    Args:
        source: ``RawText``, ``Pair`` or ``PointPair``
        strict: Raise ``CoordinateParseError`` on malformed input

    Returns:
        Tuple of (latitude, longitude) in signed decimal degrees

    Raises:
        CoordinateParseError: If strict and the input is malformed
        TypeError: If ``source`` is not a tagged input
    """
    if isinstance(source, RawText):
        return parse_text(source.text, strict)
    if isinstance(source, Pair):
        return parse_pair(source.latitude, source.longitude, strict)
    if isinstance(source, PointPair):
        return parse_points(source.latitude, source.longitude, strict)
    raise TypeError(f"Unsupported coordinate input: {type(source).__name__}")


def as_input(coordinates_or_latitude=None, longitude=None) -> CoordinateInput:
    """Map the loose constructor arguments onto a tagged input."""
    first = coordinates_or_latitude
    if longitude is None:
        if isinstance(first, (RawText, Pair, PointPair)):
            return first
        if first is None:
            return RawText("")
        if isinstance(first, str):
            return RawText(first)
        if isinstance(first, Coordinate):
            return Pair(first.latitude, first.longitude)
        if isinstance(first, Mapping):
            return Pair(first.get("latitude"), first.get("longitude"))
        if isinstance(first, (list, tuple)):
            values = list(first[:2]) + [None, None]
            return Pair(values[0], values[1])
        return Pair(first, None)

    if isinstance(first, Real) and isinstance(longitude, Real):
        return Pair(first, longitude)
    return PointPair(first, longitude)


@dataclass(frozen=True, init=False)
class Coordinate:
    """
    An immutable latitude/longitude pair in signed decimal degrees.

    Accepted forms::

        Coordinate("49.202442, 16.615052")
        Coordinate([49.202442, 16.615052])
        Coordinate(49.202442, 16.615052)
        Coordinate('49°12\\'8.8"N 16°36\\'54.2"E')
        Coordinate('49°12\\'08.8" 16°36\\'54.2"')
        Coordinate('49°12\\'08.8"N', '16°36\\'54.2"E')

    Malformed input never raises; missing values are 0.0. Use
    ``Coordinate.strict`` to get a ``CoordinateParseError`` instead.
    """

    latitude: float
    longitude: float

    def __init__(self, coordinates_or_latitude=None, longitude=None):
        latitude, longitude = parse_input(as_input(coordinates_or_latitude, longitude))
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @classmethod
    def from_input(cls, source: CoordinateInput, strict: bool = False) -> "Coordinate":
        latitude, longitude = parse_input(source, strict)
        return cls(Pair(latitude, longitude))

    @classmethod
    def strict(cls, coordinates_or_latitude=None, longitude=None) -> "Coordinate":
        """Like the constructor, but raise ``CoordinateParseError`` on malformed input."""
        return cls.from_input(as_input(coordinates_or_latitude, longitude), strict=True)

    def format(self, kind="dd", decimals: int | None = None) -> str:
        """Render as ``"dd"`` (default, 6 decimals) or ``"dms"`` (3 decimals on seconds)."""
        return format_coordinate(self.latitude, self.longitude, kind, decimals)

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def __iter__(self):
        yield self.latitude
        yield self.longitude

    def __str__(self) -> str:
        return self.format("dd")

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        kind, _, decimals = format_spec.partition(".")
        return self.format(kind, int(decimals) if decimals else None)
