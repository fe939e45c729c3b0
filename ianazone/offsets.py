"""Resolve zone offsets from oracle output.

Two resolvers are available. :func:`direct_offset` reads the offset straight
out of a ``GMT-05:00`` style token, :func:`calculated_offset` reads the local
wall clock fields and compares them with the instant as UTC. Both return the
offset in minutes, or NaN when it cannot be resolved.
"""

from __future__ import annotations

import logging
import math
import re

from .formattercache import FormatterCache
from .instant import Instant, to_epoch_millis
from .oracle import ORACLE_ERRORS, DateTimeFormatter

_LOGGER = logging.getLogger(__name__)

_OFFSET_TOKEN = re.compile(r"GMT([+-]\d\d:\d\d(:\d\d)?)?")
_POSITIONAL_FIELDS = re.compile(r"(\d+)/(\d+)/(\d+) (AD|BC),? (\d+):(\d+):(\d+)")

_PART_POSITIONS = {
    "year": 0,
    "month": 1,
    "day": 2,
    "era": 3,
    "hour": 4,
    "minute": 5,
    "second": 6,
}

_MS_PER_SECOND = 1000
_MS_PER_DAY = 86_400_000
# Days from 0000-03-01 to 1970-01-01
_EPOCH_DAY_OFFSET = 719_468


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Return days since the epoch for a proleptic Gregorian date."""
    y = year - (1 if month <= 2 else 0)
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - _EPOCH_DAY_OFFSET


def fields_to_epoch_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Return the epoch milliseconds of the fields read as UTC.

    Years before 1 are astronomical, so year 0 is 1 BC.
    """
    millis_of_day = ((hour * 60 + minute) * 60 + second) * 1000 + millisecond
    return _days_from_civil(year, month, day) * _MS_PER_DAY + millis_of_day


def direct_offset(formatters: FormatterCache, zone: str, instant: Instant) -> float:
    """Return the offset read from the oracle's GMT token."""
    try:
        formatted = formatters.get(zone).format(instant)
    except ORACLE_ERRORS as ex:
        _LOGGER.debug("Unable to format %s for %s: %s", instant, zone, ex)
        return math.nan

    match = _OFFSET_TOKEN.search(formatted)
    if match is None:
        return math.nan
    token = match.group(1)
    if token is None:
        return 0.0

    sign = 44 - ord(token[0])  # '+' is 43, '-' is 45
    hours = int(token[1:3])
    minutes = int(token[4:6])
    seconds = int(token[7:9]) if match.group(2) else 0
    return sign * (hours * 60 + minutes + seconds / 60)


def _parts_fields(formatter: DateTimeFormatter, millis: float) -> list:
    filled: list = [None] * len(_PART_POSITIONS)
    for part in formatter.format_to_parts(millis):  # type: ignore[attr-defined]
        pos = _PART_POSITIONS.get(part.type)
        if pos is None:
            continue
        filled[pos] = part.value if part.type == "era" else int(part.value)
    if None in filled:
        raise ValueError(f"Incomplete fields from {formatter!r}: {filled}")
    return filled


def _positional_fields(formatter: DateTimeFormatter, millis: float) -> list:
    formatted = formatter.format(millis).replace("\u200e", "")
    if (match := _POSITIONAL_FIELDS.search(formatted)) is None:
        raise ValueError(f"Unexpected output from {formatter!r}: {formatted!r}")
    month, day, year, era, hour, minute, second = match.groups()
    return [int(year), int(month), int(day), era, int(hour), int(minute), int(second)]


def calculated_offset(
    formatters: FormatterCache, zone: str, instant: Instant
) -> float:
    """Return the offset calculated from the zone's wall clock fields."""
    millis = to_epoch_millis(instant)
    if math.isnan(millis):
        return math.nan

    try:
        formatter = formatters.get(zone)
        if hasattr(formatter, "format_to_parts"):
            fields = _parts_fields(formatter, millis)
        else:
            fields = _positional_fields(formatter, millis)
    except ORACLE_ERRORS as ex:
        _LOGGER.debug("Unable to read fields of %s for %s: %s", instant, zone, ex)
        return math.nan

    year, month, day, era, hour, minute, second = fields
    if era == "BC":
        year = -abs(year) + 1

    # Some oracles render midnight as 24 even with a 24-hour clock
    if hour == 24:
        hour = 0

    as_utc = fields_to_epoch_millis(year, month, day, hour, minute, second, 0)

    as_ts = millis
    over = math.fmod(as_ts, _MS_PER_SECOND)
    as_ts -= over if over >= 0 else _MS_PER_SECOND + over
    return (as_utc - as_ts) / (60 * _MS_PER_SECOND)
