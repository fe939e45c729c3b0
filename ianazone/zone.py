"""Module for the zone interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .instant import Instant
from .offsetformat import OffsetFormat


class Zone(ABC):
    """Base class for time zones."""

    @property
    @abstractmethod
    def type(self) -> str:
        """Return the zone kind, used to compare zones."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the zone name."""

    @property
    @abstractmethod
    def is_universal(self) -> bool:
        """Return True if the offset never changes."""

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the zone is usable."""

    @abstractmethod
    def offset(self, instant: Instant) -> float:
        """Return the offset in minutes at the instant."""

    @abstractmethod
    def format_offset(self, instant: Instant, format: str | OffsetFormat) -> str | None:
        """Return the offset at the instant as text."""

    @abstractmethod
    def offset_name(
        self, instant: Instant, *, format: str, locale: str | None = None
    ) -> str | None:
        """Return the localized name of the offset at the instant."""

    @abstractmethod
    def equals(self, other: object) -> bool:
        """Return True if the other zone is the same zone."""
