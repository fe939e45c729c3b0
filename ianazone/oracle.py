"""Formatting oracle backed by Babel.

All knowledge about zone rules comes from here. Formatters are bound to one
zone and one pattern, and are expensive enough to construct that callers
are expected to cache them, see :class:`~ianazone.formattercache.FormatterCache`.

>>> from ianazone import BabelOracle
>>> oracle = BabelOracle()
>>> oracle.create_formatter("Etc/GMT+1", "y ZZZZ").format(0)
'1969 GMT-01:00'
>>> oracle.is_valid_zone("Fantasia/Castle")
False
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from typing import NamedTuple

from babel import Locale
from babel.dates import (
    DateTimeFormat,
    format_datetime,
    get_timezone,
    get_timezone_name,
    tokenize_pattern,
)

from .instant import Instant, to_datetime
from .oracleconfig import OracleConfig

_LOGGER = logging.getLogger(__name__)

#: Errors the oracle raises for unknown zones, bad instants or unsupported fields
ORACLE_ERRORS = (LookupError, ValueError, TypeError, OverflowError, OSError)

#: Resolvers parse the oracle output, so they always format in this locale
PARSE_LOCALE = "en_US"

DIRECT_OFFSET_PATTERN = "y ZZZZ"
CALCULATED_OFFSET_PATTERN = "MM/dd/y G, HH:mm:ss"
VALIDATION_PATTERN = "y"

_FIELD_TYPES = {
    "G": "era",
    "y": "year",
    "M": "month",
    "d": "day",
    "H": "hour",
    "h": "hour",
    "K": "hour",
    "k": "hour",
    "m": "minute",
    "s": "second",
    "z": "timeZoneName",
    "Z": "timeZoneName",
    "O": "timeZoneName",
    "v": "timeZoneName",
    "V": "timeZoneName",
    "x": "timeZoneName",
    "X": "timeZoneName",
}


class FormattedPart(NamedTuple):
    """A single piece of formatted output."""

    type: str
    value: str


class DateTimeFormatter:
    """Formatter bound to a single zone and pattern, producing text."""

    def __init__(
        self, zone: str, pattern: str, locale: Locale | str = PARSE_LOCALE
    ) -> None:
        if not isinstance(zone, str):
            raise TypeError(f"Zone name must be a string, not {type(zone).__name__}")
        self.zone = zone
        self.pattern = pattern
        self.locale = Locale.parse(locale)
        self.tzinfo: tzinfo = get_timezone(zone)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} zone={self.zone!r} pattern={self.pattern!r}"
            f" locale={str(self.locale)}>"
        )

    def format(self, instant: Instant) -> str:
        """Format the instant in the bound zone."""
        return format_datetime(
            to_datetime(instant), self.pattern, tzinfo=self.tzinfo, locale=self.locale
        )


class StructuredDateTimeFormatter(DateTimeFormatter):
    """Formatter that can also return its output split up by field."""

    def format_to_parts(self, instant: Instant) -> list[FormattedPart]:
        """Format the instant and return the output as typed parts."""
        value = to_datetime(instant).astimezone(self.tzinfo)
        if hasattr(self.tzinfo, "normalize"):  # pytz
            value = self.tzinfo.normalize(value)
        fields = DateTimeFormat(value, self.locale)

        parts = []
        for kind, token in tokenize_pattern(self.pattern):
            if kind == "chars":
                parts.append(FormattedPart("literal", token))
                continue
            char, num = token
            parts.append(
                FormattedPart(_FIELD_TYPES.get(char, "unknown"), fields[char * num])
            )
        return parts


class BabelOracle:
    """Builds formatters and answers zone questions using Babel."""

    def __init__(self, config: OracleConfig | None = None) -> None:
        self.config = config or OracleConfig()

    def __repr__(self) -> str:
        return f"<BabelOracle {self.config!r}>"

    @property
    def locale(self) -> str:
        """Return the display locale."""
        return self.config.locale

    def create_formatter(
        self, zone: str, pattern: str, locale: str = PARSE_LOCALE
    ) -> DateTimeFormatter:
        """Build a formatter for the zone.

        Raises LookupError for zones the oracle does not know.
        """
        cls = (
            StructuredDateTimeFormatter if self.config.structured else DateTimeFormatter
        )
        return cls(zone, pattern, locale)

    def is_valid_zone(self, zone: str) -> bool:
        """Return True if the oracle accepts the zone name."""
        if not zone:
            return False
        try:
            self.create_formatter(zone, VALIDATION_PATTERN).format(datetime.now(UTC))
        except ORACLE_ERRORS as ex:
            _LOGGER.debug("Zone %r rejected by oracle: %s", zone, ex)
            return False
        return True

    def zone_name(
        self, zone: str, instant: Instant, width: str, locale: str | None = None
    ) -> str:
        """Return the localized name of the zone at the instant."""
        value = to_datetime(instant).astimezone(get_timezone(zone))
        return get_timezone_name(value, width=width, locale=locale or self.locale)
