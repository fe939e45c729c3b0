"""Module for cli zone commands."""

from __future__ import annotations

import math

import click
from babel import UnknownLocaleError

from ianazone import IANAZone, OffsetFormat, ZoneState
from ianazone.instant import to_epoch_millis

from .common import OffsetReport, echo, error, parse_instant, pass_state

_instant_options = [
    click.option(
        "--at",
        type=float,
        required=False,
        default=None,
        help="Instant as milliseconds since the epoch, defaults to now.",
    ),
    click.option(
        "--iso",
        type=str,
        required=False,
        default=None,
        help="Instant as an ISO 8601 timestamp, naive values are read as UTC.",
    ),
]


def instant_options(func):
    """Add the --at and --iso options."""
    for option in reversed(_instant_options):
        func = option(func)
    return func


@click.command()
@click.argument("zone", type=str)
@instant_options
@click.option(
    "--format",
    "offset_format",
    type=click.Choice([f.value for f in OffsetFormat]),
    default=OffsetFormat.Short.value,
    show_default=True,
    help="How to render the offset.",
)
@pass_state
def offset(
    state: ZoneState, zone: str, at: float | None, iso: str | None, offset_format: str
):
    """Print the UTC offset of a zone."""
    instant = parse_instant(at, iso)
    iana = IANAZone.create(zone, state)
    minutes = iana.offset(instant)
    report = OffsetReport(
        zone=iana.name,
        valid=iana.is_valid,
        instant=to_epoch_millis(instant),
        offset=None if math.isnan(minutes) else minutes,
        formatted=iana.format_offset(instant, offset_format),
        strategy=state.strategy.value,
    )
    if report.offset is None:
        echo(f"[bold red]Unable to resolve offset for {zone}[/bold red]")
    else:
        echo(f"{report.zone}: {report.formatted} ({report.offset:g} minutes)")
    return report


@click.command()
@click.argument("zones", nargs=-1, required=True)
@pass_state
def validate(state: ZoneState, zones: tuple[str, ...]):
    """Check that zone names are known."""
    results = {zone: IANAZone.is_valid_zone(zone, state) for zone in zones}
    for zone, valid in results.items():
        echo(f"{zone}: {'[green]valid[/green]' if valid else '[red]invalid[/red]'}")
    if not all(results.values()):
        error("Invalid zone names given")
    return results


@click.command()
@click.argument("zone", type=str)
@instant_options
@click.option(
    "--width",
    type=click.Choice(["short", "long"]),
    default="long",
    show_default=True,
    help="Abbreviated or full zone name.",
)
@click.option(
    "--locale",
    type=str,
    default=None,
    help="Locale of the zone name, defaults to the tool's locale.",
)
@pass_state
def name(
    state: ZoneState,
    zone: str,
    at: float | None,
    iso: str | None,
    width: str,
    locale: str | None,
):
    """Print the localized name of a zone."""
    instant = parse_instant(at, iso)
    iana = IANAZone.create(zone, state)
    try:
        zone_name = iana.offset_name(instant, format=width, locale=locale)
    except UnknownLocaleError as ex:
        raise click.BadParameter(str(ex), param_hint="--locale") from ex
    if zone_name is None:
        error(f"No name for {zone}")
    echo(zone_name)
    return zone_name


@click.command()
@pass_state
def strategy(state: ZoneState):
    """Print the offset strategy used with this oracle."""
    selected = state.strategy
    echo(f"Offset strategy: {selected.value}")
    return selected.value
