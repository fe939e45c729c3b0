"""Select how offsets are resolved on this oracle.

Reading the offset token directly is cheap, but depends on the oracle
rendering it correctly. The first offset query probes the direct resolver
against zones with known offsets and falls back to calculating offsets from
wall clock fields if anything is off. The choice is kept for the lifetime of
the :class:`~ianazone.zonestate.ZoneState`.
"""

from __future__ import annotations

import logging
import math
import time
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import OffsetProbeError
from .oracle import ORACLE_ERRORS

if TYPE_CHECKING:
    from .zonestate import ZoneState

_LOGGER = logging.getLogger(__name__)

#: Zones whose offsets are fixed, with the offset in minutes they must resolve to
PROBE_ZONES: tuple[tuple[str, float], ...] = (
    ("Etc/GMT", 0),
    ("Etc/GMT+1", -60),
    ("Etc/GMT-1", 60),
)
#: Negative offset with half hours, checked against the calculated resolver
CROSS_CHECK_ZONE = "America/St_Johns"


class OffsetStrategy(Enum):
    """Offset resolution strategy enum."""

    Direct = "direct"
    Calculated = "calculated"


def _check(zone: str, expected: float, actual: float) -> None:
    if actual != expected:
        raise OffsetProbeError(
            "Invalid offset", zone=zone, expected=expected, actual=actual
        )


class StrategySelector:
    """Resolve the offset strategy once and remember it."""

    def __init__(self) -> None:
        self._strategy: OffsetStrategy | None = None

    def __repr__(self) -> str:
        strategy = self._strategy.value if self._strategy else "unresolved"
        return f"<StrategySelector {strategy}>"

    @property
    def resolved(self) -> bool:
        """Return True if the strategy has been chosen."""
        return self._strategy is not None

    def resolve(self, state: ZoneState) -> OffsetStrategy:
        """Return the strategy, probing the oracle on first use."""
        if self._strategy is None:
            self._strategy = self.probe(state)
            _LOGGER.debug("Using %s offsets", self._strategy.value)
        return self._strategy

    def reset(self) -> None:
        """Forget the chosen strategy."""
        self._strategy = None

    @staticmethod
    def probe(state: ZoneState) -> OffsetStrategy:
        """Return Direct if direct offsets are correct on the state's oracle."""
        now = time.time() * 1000
        try:
            for zone, expected in PROBE_ZONES:
                _check(zone, expected, state.direct_offset(zone, now))

            expected = state.calculated_offset(CROSS_CHECK_ZONE, now)
            if not math.isnan(expected):
                _check(
                    CROSS_CHECK_ZONE,
                    expected,
                    state.direct_offset(CROSS_CHECK_ZONE, now),
                )
        except (OffsetProbeError, *ORACLE_ERRORS) as ex:
            _LOGGER.debug("Direct offsets not usable: %s", ex)
            return OffsetStrategy.Calculated
        return OffsetStrategy.Direct
