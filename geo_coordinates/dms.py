"""Degrees, minutes and seconds extraction.

Text is split into at most two points. Each point is classified as
latitude or longitude by its cardinal letter (N/S or E/W); points without
one fall back to the usual "latitude, then longitude" order. Every point
is then read as a degrees/minutes/seconds triple and converted to signed
decimal degrees.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from enum import Enum

from geo_coordinates.notation import sanitize

logger = logging.getLogger(__name__)

MAX_POINTS = 2

_POINT_RE = re.compile(r"[0-9.dmcnsew-]+")
_SEPARATOR_RE = re.compile(r"[.-]+")
_CARDINAL_RE = re.compile(r"[nsew]+")
_UNIT_RE = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)([dms])")
_BARE_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_STRIP_CARDINALS = str.maketrans("", "", "nsew-")
_STRIP_SIGN = str.maketrans("", "", "-")


class Axis(Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    UNCLASSIFIED = "unclassified"


class Unit(Enum):
    DEGREES = "d"
    MINUTES = "m"
    SECONDS = "s"


@dataclass(frozen=True)
class DMS:
    degrees: int = 0
    minutes: int = 0
    seconds: float = 0.0

    def to_decimal(self) -> float:
        return self.degrees + (self.minutes * 60.0 + self.seconds) / 3600


@dataclass(frozen=True)
class Point:
    """One coordinate component before pairing.

    ``token`` is the sanitized text as found, ``body`` the same text with
    cardinal letters and sign removed.
    """

    token: str
    body: str
    axis: Axis = Axis.UNCLASSIFIED
    negative: bool = False
    cardinals: frozenset = frozenset()

    @property
    def value(self) -> float | None:
        return point_value(self)


def tokenize_points(sanitized: str) -> list[str]:
    """Split sanitized text into candidate point tokens, in order.

    A cardinal letter standing alone belongs to the point before it, as in
    ``49.5 s, 16.2 w``.
    """
    tokens = []
    for token in _POINT_RE.findall(sanitized):
        if _SEPARATOR_RE.fullmatch(token):
            continue
        if tokens and _CARDINAL_RE.fullmatch(token):
            tokens[-1] += token
        else:
            tokens.append(token)
    return tokens


def classify_point(token: str) -> Point:
    """Tag a token with its axis and sign.

    Cardinal letters win over a written ``-``. N/S take precedence over E/W
    when a token carries both.
    """
    cardinals = frozenset(token) & frozenset("nsew")
    if not cardinals:
        return Point(token, token.translate(_STRIP_SIGN), Axis.UNCLASSIFIED, token.startswith("-"))

    body = token.translate(_STRIP_CARDINALS)
    if cardinals & {"n", "s"}:
        return Point(token, body, Axis.LATITUDE, "s" in cardinals, cardinals)
    return Point(token, body, Axis.LONGITUDE, "w" in cardinals, cardinals)


def order_points(points: list[Point]) -> list[Point]:
    """
    Put latitude points first, longitude points next and leftovers last.

    When no point is tagged as latitude, the first untagged point takes
    that role.
    """
    latitudes = [point for point in points if point.axis is Axis.LATITUDE]
    longitudes = [point for point in points if point.axis is Axis.LONGITUDE]
    leftovers = [point for point in points if point.axis is Axis.UNCLASSIFIED]

    if not latitudes and leftovers:
        latitudes = [replace(leftovers[0], axis=Axis.LATITUDE)]
        leftovers = leftovers[1:]

    return latitudes + longitudes + leftovers


def read_dms(body: str) -> DMS | None:
    """Read unit-tagged numbers from a point body; None when there are none.

    Degrees and minutes are floored to integers, seconds stay fractional.
    A unit given twice keeps its last value.
    """
    parts = {}
    for number, letter in _UNIT_RE.findall(body.replace("c", "s")):
        amount = float(number)
        if not math.isfinite(amount):
            continue
        unit = Unit(letter)
        if unit is Unit.SECONDS:
            parts[unit] = amount
        else:
            parts[unit] = math.floor(amount)

    if not parts:
        return None
    return DMS(
        degrees=parts.get(Unit.DEGREES, 0),
        minutes=parts.get(Unit.MINUTES, 0),
        seconds=parts.get(Unit.SECONDS, 0.0),
    )


def point_value(point: Point) -> float | None:
    """Signed decimal degrees of a point, or None when it holds no number."""
    dms = read_dms(point.body)
    if dms is not None:
        value = dms.to_decimal()
    else:
        # A bare number next to a cardinal letter, e.g. "49.5s".
        bare = _BARE_RE.search(point.body)
        if bare is None:
            logger.debug("No numeric value in point %r", point.token)
            return None
        value = float(bare.group())

    if not math.isfinite(value):
        logger.debug("Point %r is out of float range", point.token)
        return None
    if point.negative and value:
        return -value
    return value


def extract_points(text) -> list[Point]:
    """Tokenize, classify and order the first two points of ``text``."""
    tokens = tokenize_points(sanitize(text))
    if len(tokens) > MAX_POINTS:
        logger.debug("Ignoring %d extra point(s) in %r", len(tokens) - MAX_POINTS, text)
    return order_points([classify_point(token) for token in tokens[:MAX_POINTS]])


def extract_dms(text) -> list[float | None]:
    """
    Extract up to two signed decimal-degree values from DMS text.

    Args:
        text: Text such as ``49°12'8.8"N 16°36'54.2"E``

    Returns:
        Values latitude first. A point with no numeric token is None so the
        remaining points keep their position.
    """
    return [point.value for point in extract_points(text)]
