"""Coordinate notation helpers.

Normalizes free-form coordinate text into a small alphabet and decides
whether it is written in decimal degrees or degrees/minutes/seconds.
"""

from __future__ import annotations

import re
from enum import Enum


class CoordinateFormat(Enum):
    DD = "dd"
    DMS = "dms"

    @classmethod
    def from_name(cls, name) -> "CoordinateFormat":
        """Resolve a format name case-insensitively; anything but ``dms`` is DD."""
        if isinstance(name, cls):
            return name
        if str(name or "").strip().lower() == cls.DMS.value:
            return cls.DMS
        return cls.DD


# Doubled marks must be replaced before the single ones.
_MARKS = (
    ("''", "c"),
    ("′′", "c"),
    ("°", "d"),
    ("º", "d"),
    ("'", "m"),
    ("′", "m"),
    ("’", "m"),
    ('"', "c"),
    ("″", "c"),
    ("”", "c"),
    ("“", "c"),
    ("−", "-"),
)

_DISALLOWED_RE = re.compile(r"[^0-9.,\sdmcnsew-]")
_DMS_UNIT_RE = re.compile(r"[dms]")


def sanitize(value) -> str:
    """
    Reduce coordinate text to digits, separators, units and cardinal letters.

    The second mark becomes ``c`` rather than ``s`` so it cannot be confused
    with the south cardinal letter until cardinals have been consumed.

    Args:
        value: Raw coordinate text

    Returns:
        Lower-cased text restricted to ``[0-9 . , whitespace d m c n s e w -]``
    """
    text = str(value if value is not None else "").lower()
    for mark, replacement in _MARKS:
        text = text.replace(mark, replacement)
    return _DISALLOWED_RE.sub("", text)


def detect_format(value) -> CoordinateFormat:
    """Return DMS when the sanitized text carries a d, m or s letter."""
    if _DMS_UNIT_RE.search(sanitize(value)):
        return CoordinateFormat.DMS
    return CoordinateFormat.DD
