"""python-ianazone exceptions."""

from __future__ import annotations


class IANAZoneException(Exception):
    """Base exception for library errors."""


class UnsupportedFormatError(IANAZoneException, ValueError):
    """Exception for offset formats the library does not know how to render."""

    def __init__(self, *args, **kwargs) -> None:
        self.format = kwargs.get("format")
        super().__init__(*args)


class OffsetProbeError(IANAZoneException):
    """Direct offset resolution gave a wrong answer for a reference zone."""

    def __init__(self, *args, **kwargs) -> None:
        self.zone: str | None = kwargs.get("zone")
        self.expected: float | None = kwargs.get("expected")
        self.actual: float | None = kwargs.get("actual")
        super().__init__(*args)

    def __str__(self) -> str:
        if self.zone is None:
            return super().__str__()
        return (
            super().__str__()
            + f" (zone={self.zone}, expected={self.expected}, actual={self.actual})"
        )
