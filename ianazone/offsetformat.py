"""Render numeric offsets as text."""

from __future__ import annotations

import math
from enum import Enum

from .exceptions import UnsupportedFormatError


class OffsetFormat(Enum):
    """Offset format enum."""

    #: +05:30
    Short = "short"
    #: +0530
    Techie = "techie"
    #: +5:30, or +5 for whole hours
    Narrow = "narrow"

    @staticmethod
    def from_value(value: str | OffsetFormat) -> OffsetFormat:
        """Return offset format from string value."""
        if isinstance(value, OffsetFormat):
            return value
        for offset_format in OffsetFormat:
            if offset_format.value == value:
                return offset_format
        raise UnsupportedFormatError(
            f"Value format {value!r} is out of range for property format",
            format=value,
        )


def format_offset(offset: float, format: str | OffsetFormat) -> str | None:
    """Return the offset in minutes as text, None if it is NaN."""
    offset_format = OffsetFormat.from_value(format)
    if math.isnan(offset):
        return None

    hours = math.trunc(abs(offset / 60))
    minutes = math.trunc(abs(math.fmod(offset, 60)))
    sign = "+" if offset >= 0 else "-"

    if offset_format is OffsetFormat.Short:
        return f"{sign}{hours:02}:{minutes:02}"
    if offset_format is OffsetFormat.Techie:
        return f"{sign}{hours:02}{minutes:02}"
    return f"{sign}{hours}" + (f":{minutes}" if minutes > 0 else "")
