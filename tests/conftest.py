from __future__ import annotations

from datetime import UTC, datetime

import pytest

from ianazone import ZoneState
from ianazone.zonestate import set_default_state

#: Instants in northern winter and summer
WINTER = datetime(2024, 1, 15, 12, tzinfo=UTC)
SUMMER = datetime(2024, 7, 15, 12, tzinfo=UTC)


def millis(dt: datetime) -> int:
    """Return the datetime as epoch milliseconds."""
    return int(dt.timestamp() * 1000)


@pytest.fixture(autouse=True)
def zone_state():
    """Give every test a fresh default zone state."""
    state = ZoneState()
    set_default_state(state)
    yield state
    set_default_state(None)


@pytest.fixture()
def text_only_state():
    """Return a state whose oracle only produces plain text."""
    from ianazone import OracleConfig

    return ZoneState(OracleConfig(structured=False))


@pytest.fixture()
def runner():
    """Runner fixture that unsets the IANAZONE_ environment variables for tests."""
    from click.testing import CliRunner

    return CliRunner(
        env={
            "IANAZONE_LOCALE": None,
            "IANAZONE_TEXT_ONLY": None,
            "IANAZONE_DEBUG": None,
            "IANAZONE_JSON": None,
        }
    )
