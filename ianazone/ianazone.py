"""Zones identified by an IANA name, like America/New_York.

Zones are created through :meth:`IANAZone.create`, which returns the same
object for the same name:

>>> from ianazone import IANAZone
>>> zone = IANAZone.create("America/New_York")
>>> zone.is_valid
True
>>> zone.offset(1_700_000_000_000)
-300.0
>>> zone.format_offset(1_700_000_000_000, "short")
'-05:00'
>>> zone.offset_name(1_700_000_000_000, format="long")
'Eastern Standard Time'

Unknown names do not raise, but the zone is invalid and has no offset:

>>> castle = IANAZone.create("Fantasia/Castle")
>>> castle.is_valid
False
>>> castle.offset(0)
nan
"""

from __future__ import annotations

import logging
from warnings import warn

from .instant import Instant
from .offsetformat import OffsetFormat, format_offset
from .oracle import ORACLE_ERRORS
from .zone import Zone
from .zonestate import ZoneState, get_default_state

_LOGGER = logging.getLogger(__name__)

_NAME_WIDTHS = {"short": "short", "long": "long"}


class IANAZone(Zone):
    """A zone identified by an IANA identifier."""

    TYPE = "iana"

    def __init__(self, name: str, state: ZoneState | None = None) -> None:
        self._state = state or get_default_state()
        self._name = name
        self._valid = self._state.oracle.is_valid_zone(name)

    @classmethod
    def create(cls, name: str, state: ZoneState | None = None) -> IANAZone:
        """Return the zone for the name, reusing an existing instance."""
        state = state or get_default_state()
        if (zone := state.zones.get(name)) is None:
            zone = cls(name, state)
            state.zones[name] = zone
        return zone

    @staticmethod
    def reset_cache(state: ZoneState | None = None) -> None:
        """Reset zone and formatter caches, only needed in tests."""
        (state or get_default_state()).reset_cache()

    @staticmethod
    def is_valid_zone(zone: str, state: ZoneState | None = None) -> bool:
        """Return True if the name identifies a real zone."""
        return (state or get_default_state()).oracle.is_valid_zone(zone)

    @staticmethod
    def is_valid_specifier(zone: str, state: ZoneState | None = None) -> bool:
        """Return True if the name identifies a real zone.

        Deprecated, use :meth:`is_valid_zone` instead.
        """
        warn(
            "is_valid_specifier is deprecated, use is_valid_zone instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return IANAZone.is_valid_zone(zone, state)

    def __repr__(self) -> str:
        return f"<IANAZone {self._name} valid={self._valid}>"

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.TYPE, self._name))

    @property
    def type(self) -> str:
        """Return the zone kind."""
        return self.TYPE

    @property
    def name(self) -> str:
        """Return the zone name."""
        return self._name

    @property
    def is_universal(self) -> bool:
        """Return False, IANA zones follow historical rules."""
        return False

    @property
    def is_valid(self) -> bool:
        """Return True if the oracle knows this zone."""
        return self._valid

    def offset(self, instant: Instant) -> float:
        """Return the offset in minutes, NaN if it cannot be resolved."""
        return self._state.offset(self._name, instant)

    def format_offset(self, instant: Instant, format: str | OffsetFormat) -> str | None:
        """Return the offset as +HH:MM, +HHMM or +H text."""
        return format_offset(self.offset(instant), format)

    def offset_name(
        self, instant: Instant, *, format: str, locale: str | None = None
    ) -> str | None:
        """Return the localized zone name, e.g. EST or Eastern Standard Time."""
        if (width := _NAME_WIDTHS.get(format)) is None:
            raise ValueError(f"Unknown name format {format!r}")
        try:
            return self._state.oracle.zone_name(self._name, instant, width, locale)
        except ORACLE_ERRORS as ex:
            _LOGGER.debug("No %s name for %s at %s: %s", format, self._name, instant, ex)
            return None

    def equals(self, other: object) -> bool:
        """Return True if the other zone is an IANA zone with the same name."""
        return getattr(other, "type", None) == self.TYPE and (
            getattr(other, "name", None) == self._name
        )
