"""Configuration for the Babel formatting oracle.

The oracle settings can be stored and restored as plain dicts:

>>> from ianazone import OracleConfig
>>> config = OracleConfig(locale="de_DE")
>>> config.to_dict()
{'locale': 'de_DE', 'structured': True}
>>> OracleConfig.from_dict({"structured": False})
OracleConfig(locale='en_US', structured=False)
"""

from __future__ import annotations

import logging
from typing import Any

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict, field_validator

_LOGGER = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


class OracleConfig(BaseModel):
    """Settings that determine how the formatting oracle is built."""

    model_config = ConfigDict(frozen=True)

    #: Locale used for display names, e.g. :meth:`IANAZone.offset_name`
    locale: str = DEFAULT_LOCALE
    #: Whether formatters expose field-by-field output.
    #: Disabling this forces offsets to be read back from plain text.
    structured: bool = True

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        try:
            Locale.parse(value)
        except (UnknownLocaleError, ValueError) as ex:
            raise ValueError(f"Unknown locale {value!r}") from ex
        return value

    def __repr__(self) -> str:
        return f"OracleConfig(locale={self.locale!r}, structured={self.structured})"

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a dict."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OracleConfig:
        """Build the config from a dict, using defaults for missing keys."""
        _LOGGER.debug("Loading oracle config from %s", data)
        return cls.model_validate(data)
