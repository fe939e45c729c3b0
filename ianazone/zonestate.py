"""State shared by all zones created against the same oracle.

A :class:`ZoneState` owns the formatter caches, the zone identity cache and
the chosen offset strategy. The library keeps one default state for the
process, used whenever no state is passed explicitly:

>>> from ianazone import IANAZone, ZoneState
>>> IANAZone.create("Europe/Paris") is IANAZone.create("Europe/Paris")
True
>>> state = ZoneState()
>>> IANAZone.create("Europe/Paris", state) is IANAZone.create("Europe/Paris")
False

Nothing here is guarded by locks, a state must only be used from one thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .formattercache import FormatterCache
from .instant import Instant
from .offsets import calculated_offset, direct_offset
from .oracle import CALCULATED_OFFSET_PATTERN, DIRECT_OFFSET_PATTERN, BabelOracle
from .oracleconfig import OracleConfig
from .strategy import OffsetStrategy, StrategySelector

if TYPE_CHECKING:
    from .ianazone import IANAZone

_LOGGER = logging.getLogger(__name__)


class ZoneState:
    """Caches and strategy for one oracle."""

    def __init__(
        self,
        config: OracleConfig | None = None,
        *,
        oracle: BabelOracle | None = None,
    ) -> None:
        self.oracle = oracle or BabelOracle(config)
        self.direct_formatters = FormatterCache(
            lambda zone: self.oracle.create_formatter(zone, DIRECT_OFFSET_PATTERN),
            name="direct",
        )
        self.calculated_formatters = FormatterCache(
            lambda zone: self.oracle.create_formatter(zone, CALCULATED_OFFSET_PATTERN),
            name="calculated",
        )
        self.zones: dict[str, IANAZone] = {}
        self.selector = StrategySelector()

    def __repr__(self) -> str:
        return (
            f"<ZoneState {self.oracle!r} zones={len(self.zones)} {self.selector!r}>"
        )

    @property
    def strategy(self) -> OffsetStrategy:
        """Return the offset strategy, resolving it on first use."""
        return self.selector.resolve(self)

    def offset(self, zone: str, instant: Instant) -> float:
        """Return the zone offset in minutes using the active strategy."""
        if self.strategy is OffsetStrategy.Direct:
            return self.direct_offset(zone, instant)
        return self.calculated_offset(zone, instant)

    def direct_offset(self, zone: str, instant: Instant) -> float:
        """Return the zone offset read from the offset token."""
        return direct_offset(self.direct_formatters, zone, instant)

    def calculated_offset(self, zone: str, instant: Instant) -> float:
        """Return the zone offset calculated from wall clock fields."""
        return calculated_offset(self.calculated_formatters, zone, instant)

    def reset_cache(self) -> None:
        """Clear the zone and formatter caches."""
        _LOGGER.debug("Clearing caches of %r", self)
        self.zones.clear()
        self.direct_formatters.clear()
        self.calculated_formatters.clear()

    def reset_strategy(self) -> None:
        """Forget the offset strategy, the next query probes again."""
        self.selector.reset()


_default_state: ZoneState | None = None


def get_default_state() -> ZoneState:
    """Return the process wide state, creating it on first use."""
    global _default_state
    if _default_state is None:
        _default_state = ZoneState()
    return _default_state


def set_default_state(state: ZoneState | None) -> None:
    """Replace the process wide state, None creates a fresh one on next use."""
    global _default_state
    _default_state = state
