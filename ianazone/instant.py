"""Helpers for turning instants into epoch values and datetimes."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Union

Instant = Union[int, float, datetime]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_millis(instant: Instant) -> float:
    """Return the instant as milliseconds since the epoch, or NaN.

    Naive datetimes are read as UTC. Anything that is not a finite number
    or a datetime gives NaN.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return (instant - _EPOCH) / _MILLISECOND
    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        return math.nan
    value = float(instant)
    return value if math.isfinite(value) else math.nan


def to_datetime(instant: Instant) -> datetime:
    """Return the instant as an aware datetime.

    Raises ValueError for instants that are not a number,
    and OverflowError for instants outside the datetime range.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=UTC)
        return instant
    millis = to_epoch_millis(instant)
    if math.isnan(millis):
        raise ValueError(f"Invalid instant {instant!r}")
    return _EPOCH + timedelta(milliseconds=millis)
