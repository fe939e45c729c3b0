"""Module for caching oracle formatters."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .oracle import DateTimeFormatter

_LOGGER = logging.getLogger(__name__)


class FormatterCache:
    """Cache formatters by zone name.

    Entries are never evicted; call :meth:`clear` to start over.
    """

    def __init__(
        self, factory: Callable[[str], DateTimeFormatter], *, name: str = ""
    ) -> None:
        self._factory = factory
        self._name = name
        self._cache: dict[str, DateTimeFormatter] = {}

    def __repr__(self) -> str:
        return f"<FormatterCache {self._name} entries={len(self._cache)}>"

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, zone: object) -> bool:
        return zone in self._cache

    def get(self, zone: str) -> DateTimeFormatter:
        """Return the cached formatter for the zone, creating it if needed."""
        if cached := self._cache.get(zone):
            return cached
        formatter = self._factory(zone)
        _LOGGER.debug("Created %s formatter for %s", self._name, zone)
        self._cache[zone] = formatter
        return formatter

    def clear(self) -> None:
        """Drop all cached formatters."""
        self._cache.clear()
