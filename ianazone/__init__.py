"""Python library resolving UTC offsets of IANA time zones.

Zones are looked up by name and answer offset queries for any instant::

>>> from ianazone import IANAZone
>>> zone = IANAZone.create("Asia/Kolkata")
>>> zone.offset(0)
330.0

All zone rules come from Babel, which acts as the formatting oracle. Failures
to resolve an offset are reported as NaN rather than raised, errors raised
by the library derive from `IANAZoneException`.
"""

from importlib.metadata import version

from ianazone.exceptions import (
    IANAZoneException,
    OffsetProbeError,
    UnsupportedFormatError,
)
from ianazone.formattercache import FormatterCache
from ianazone.ianazone import IANAZone
from ianazone.offsetformat import OffsetFormat, format_offset
from ianazone.oracle import BabelOracle
from ianazone.oracleconfig import OracleConfig
from ianazone.strategy import OffsetStrategy
from ianazone.zone import Zone
from ianazone.zonestate import ZoneState

__version__ = version("python-ianazone")


__all__ = [
    "IANAZone",
    "Zone",
    "ZoneState",
    "OffsetStrategy",
    "BabelOracle",
    "OracleConfig",
    "FormatterCache",
    "OffsetFormat",
    "format_offset",
    "IANAZoneException",
    "UnsupportedFormatError",
    "OffsetProbeError",
]
