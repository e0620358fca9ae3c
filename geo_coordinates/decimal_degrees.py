"""Decimal degrees extraction."""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

_DD_RE = re.compile(r"(-?[0-9]+(?:\.[0-9]*)?)(?:\s*([nsew])\b)?", re.IGNORECASE)
_CARDINAL_RUN_RE = re.compile(r"-?[0-9]+(?:\.[0-9]*)?(?:\s*([nsew]+)\b)?", re.IGNORECASE)


def find_numbers(text: str) -> list[float]:
    """Return every decimal number in ``text``, left to right.

    A cardinal letter directly after a number decides its sign: S and W
    make it negative, N and E positive, whatever sign was written.
    """
    numbers = []
    for match in _DD_RE.finditer(str(text)):
        value = float(match.group(1))
        if not math.isfinite(value):
            continue
        cardinal = match.group(2)
        if cardinal:
            value = -abs(value) if cardinal.lower() in "sw" else abs(value)
        numbers.append(value)
    return numbers


def trailing_cardinals(text: str) -> list[str]:
    """Return the cardinal letters written after each number, "" where none."""
    return [(match.group(1) or "").lower() for match in _CARDINAL_RUN_RE.finditer(str(text))]


def to_degrees(value) -> float:
    """Coerce one latitude or longitude value to a finite float, 0.0 otherwise."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        numbers = find_numbers(value)
        if not numbers:
            logger.debug("No number in %r; using 0.0", value)
            return 0.0
        return numbers[0]
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Cannot coerce %r to degrees; using 0.0", value)
        return 0.0
    if not math.isfinite(number):
        logger.debug("Non-finite degrees %r; using 0.0", value)
        return 0.0
    return number


def extract_dd(value) -> list[float]:
    """
    Extract a latitude/longitude pair written in decimal degrees.

    Args:
        value: Text such as ``"49.202442, 16.615052"`` or a list/tuple of
            numeric-like values

    Returns:
        Exactly two floats, latitude first. Missing values are 0.0.
    """
    if value is None:
        values = []
    elif isinstance(value, (list, tuple)):
        values = [to_degrees(item) for item in value[:2]]
    elif isinstance(value, str):
        values = find_numbers(value)
    else:
        values = [to_degrees(value)]

    if len(values) < 2:
        logger.debug("Only %d decimal value(s) in %r; padding with 0.0", len(values), value)
    return (values + [0.0, 0.0])[:2]
