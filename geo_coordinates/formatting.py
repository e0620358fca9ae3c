"""Rendering of latitude/longitude pairs as DD or DMS text."""

from __future__ import annotations

import math
from decimal import Decimal

from geo_coordinates.notation import CoordinateFormat

DD_DECIMALS = 6
DMS_DECIMALS = 3


def _trim(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _plain(value: float) -> str:
    # Shortest round-tripping digits, written without an exponent.
    return _trim(format(Decimal(repr(value + 0.0)), "f"))


def format_decimal(value: float, decimals: int = DD_DECIMALS) -> str:
    """Round ``value`` to ``decimals`` places and drop trailing zeros."""
    decimals = int(decimals)
    # Adding 0.0 turns -0.0 into 0.0.
    rounded = round(value, decimals) + 0.0
    return _plain(rounded)


def dms_components(value: float, decimals: int = DMS_DECIMALS) -> tuple[int, int, float]:
    """
    Split an angle into whole degrees, whole minutes and rounded seconds.

    The sign is dropped. Seconds rounding up to 60 carries into the minutes,
    and minutes reaching 60 carry into the degrees.

    Args:
        value: Angle in decimal degrees
        decimals: Number of decimal places kept for the seconds

    Returns:
        Tuple of (degrees, minutes, seconds)
    """
    value = abs(value)
    degrees = int(value)
    total = (value - degrees) * 3600
    minutes = math.floor(total / 60)
    seconds = round(total - minutes * 60, decimals)

    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return degrees, minutes, seconds


def format_dms_angle(value: float, decimals: int = DMS_DECIMALS) -> str:
    decimals = abs(int(decimals))
    degrees, minutes, seconds = dms_components(value, decimals)
    seconds_text = _plain(seconds)
    return f"{degrees}°{minutes}'{seconds_text}\""


def latitude_hemisphere(latitude: float) -> str:
    return "S" if latitude < 0 else "N"


def longitude_hemisphere(longitude: float) -> str:
    return "W" if longitude < 0 else "E"


def format_dd(latitude: float, longitude: float, decimals: int | None = None) -> str:
    if decimals is None:
        decimals = DD_DECIMALS
    return f"{format_decimal(latitude, decimals)}, {format_decimal(longitude, decimals)}"


def format_dms(latitude: float, longitude: float, decimals: int | None = None) -> str:
    if decimals is None:
        decimals = DMS_DECIMALS
    return (
        f"{format_dms_angle(latitude, decimals)}{latitude_hemisphere(latitude)} "
        f"{format_dms_angle(longitude, decimals)}{longitude_hemisphere(longitude)}"
    )


def format_coordinate(latitude: float, longitude: float, kind="dd", decimals: int | None = None) -> str:
    """
    Render a latitude/longitude pair.

    Args:
        latitude: Signed decimal degrees, positive north
        longitude: Signed decimal degrees, positive east
        kind: ``"dd"`` or ``"dms"`` (case-insensitive); anything else is DD
        decimals: Decimal places. Defaults to 6 for DD and 3 for the DMS
            seconds.

    Returns:
        ``"49.202442, 16.615052"`` or ``49°12'8.791"N 16°36'54.187"E``
    """
    if CoordinateFormat.from_name(kind) is CoordinateFormat.DMS:
        return format_dms(latitude, longitude, decimals)
    return format_dd(latitude, longitude, decimals)
