import json
import logging

import pytest
from pytest_mock import MockerFixture

from ianazone import OffsetStrategy, ZoneState
from ianazone.cli.main import cli
from ianazone.cli.zone import offset

from ..conftest import WINTER, millis


def test_offset(runner):
    res = runner.invoke(cli, ["offset", "Etc/GMT+1", "--at", "0"])
    assert res.exit_code == 0
    assert "Etc/GMT+1: -01:00 (-60 minutes)" in res.output


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [("short", "-03:30"), ("techie", "-0330"), ("narrow", "-3:30")],
)
def test_offset_format(runner, fmt, expected):
    res = runner.invoke(
        cli,
        ["offset", "America/St_Johns", "--at", str(millis(WINTER)), "--format", fmt],
    )
    assert res.exit_code == 0
    assert f"America/St_Johns: {expected} (-210 minutes)" in res.output


def test_offset_iso(runner):
    res = runner.invoke(
        cli, ["offset", "America/New_York", "--iso", "2024-07-15T12:00:00+00:00"]
    )
    assert res.exit_code == 0
    assert "America/New_York: -04:00 (-240 minutes)" in res.output


def test_offset_now(runner):
    res = runner.invoke(cli, ["offset", "Etc/GMT-1"])
    assert res.exit_code == 0
    assert "Etc/GMT-1: +01:00 (60 minutes)" in res.output


def test_offset_json(runner):
    res = runner.invoke(cli, ["--json", "offset", "Etc/GMT+1", "--at", "0"])
    assert res.exit_code == 0
    report = json.loads(res.output)
    assert report == {
        "zone": "Etc/GMT+1",
        "valid": True,
        "instant": 0.0,
        "offset": -60.0,
        "formatted": "-01:00",
        "strategy": "calculated",
    }


def test_offset_invalid_zone(runner):
    res = runner.invoke(cli, ["offset", "Fantasia/Castle", "--at", "0"])
    assert res.exit_code == 0
    assert "Unable to resolve offset for Fantasia/Castle" in res.output

    res = runner.invoke(cli, ["--json", "offset", "Fantasia/Castle", "--at", "0"])
    report = json.loads(res.output)
    assert report["valid"] is False
    assert report["offset"] is None
    assert report["formatted"] is None


def test_offset_instant_options(runner):
    res = runner.invoke(
        cli, ["offset", "Etc/GMT", "--at", "0", "--iso", "2024-01-01T00:00:00"]
    )
    assert res.exit_code == 2
    assert "either --at or --iso" in res.output

    res = runner.invoke(cli, ["offset", "Etc/GMT", "--iso", "yesterday"])
    assert res.exit_code == 2
    assert "--iso" in res.output


def test_offset_with_state(runner, mocker: MockerFixture):
    """Commands use the state given as context object."""
    state = ZoneState()
    mocker.patch.object(state.selector, "probe", return_value=OffsetStrategy.Direct)
    direct = mocker.spy(state, "direct_offset")

    res = runner.invoke(offset, ["Asia/Kolkata", "--at", "0"], obj=state)
    assert res.exit_code == 0
    assert "Asia/Kolkata: +05:30 (330 minutes)" in res.output
    direct.assert_called_with("Asia/Kolkata", 0.0)
    assert "Asia/Kolkata" in state.zones


def test_validate(runner):
    res = runner.invoke(cli, ["validate", "Etc/GMT", "America/New_York"])
    assert res.exit_code == 0
    assert "Etc/GMT: valid" in res.output
    assert "America/New_York: valid" in res.output

    res = runner.invoke(cli, ["validate", "Etc/GMT", "Fantasia/Castle"])
    assert res.exit_code == 1
    assert "Fantasia/Castle: invalid" in res.output
    assert "Invalid zone names given" in res.output


def test_validate_json(runner):
    res = runner.invoke(cli, ["--json", "validate", "Etc/GMT", "Europe/Paris"])
    assert res.exit_code == 0
    assert json.loads(res.output) == {"Etc/GMT": True, "Europe/Paris": True}


def test_validate_requires_zone(runner):
    res = runner.invoke(cli, ["validate"])
    assert res.exit_code == 2


def test_name(runner):
    res = runner.invoke(
        cli, ["name", "America/New_York", "--iso", "2024-01-15T12:00:00"]
    )
    assert res.exit_code == 0
    assert "Eastern Standard Time" in res.output


def test_name_locale(runner):
    args = ["name", "America/New_York", "--iso", "2024-01-15T12:00:00"]
    res = runner.invoke(cli, [*args, "--locale", "fr_FR"])
    assert res.exit_code == 0
    assert "heure normale de l’Est nord-américain" in res.output

    res = runner.invoke(cli, ["--locale", "fr_FR", *args])
    assert res.exit_code == 0
    assert "heure normale de l’Est nord-américain" in res.output

    res = runner.invoke(cli, [*args, "--locale", "xx_XX"])
    assert res.exit_code == 2
    assert "--locale" in res.output


def test_name_invalid_zone(runner):
    res = runner.invoke(cli, ["name", "Fantasia/Castle", "--at", "0"])
    assert res.exit_code == 1
    assert "No name for Fantasia/Castle" in res.output


def test_strategy(runner):
    res = runner.invoke(cli, ["strategy"])
    assert res.exit_code == 0
    assert "Offset strategy: calculated" in res.output

    res = runner.invoke(cli, ["--json", "strategy"])
    assert json.loads(res.output) == "calculated"


def test_text_only(runner, mocker: MockerFixture):
    init = mocker.spy(ZoneState, "__init__")
    res = runner.invoke(cli, ["--text-only", "offset", "Asia/Kathmandu", "--at", "0"])
    assert res.exit_code == 0
    assert "Asia/Kathmandu: +05:30 (330 minutes)" in res.output
    config = init.call_args.args[1]
    assert config.structured is False


def test_invalid_locale(runner):
    res = runner.invoke(cli, ["--locale", "nope", "strategy"])
    assert res.exit_code == 2
    assert "Unknown locale 'nope'" in res.output


def test_debug_logging(runner, caplog):
    caplog.set_level(logging.DEBUG)
    res = runner.invoke(cli, ["-d", "strategy"])
    assert res.exit_code == 0
    assert "Using calculated offsets" in caplog.text
