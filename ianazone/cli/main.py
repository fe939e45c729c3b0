"""Main module for cli tool."""

from __future__ import annotations

import logging
from typing import Any

import click

from ianazone import OracleConfig, ZoneState
from ianazone.oracleconfig import DEFAULT_LOCALE

from .common import json_formatter_cb
from .zone import name, offset, strategy, validate


@click.group(result_callback=json_formatter_cb)
@click.option(
    "--locale",
    envvar="IANAZONE_LOCALE",
    default=DEFAULT_LOCALE,
    show_default=True,
    help="Locale used for zone names.",
)
@click.option(
    "--text-only",
    envvar="IANAZONE_TEXT_ONLY",
    default=False,
    is_flag=True,
    help="Read offsets back from plain text instead of formatted fields.",
)
@click.option(
    "-d",
    "--debug",
    envvar="IANAZONE_DEBUG",
    default=False,
    is_flag=True,
    help="Print debug output",
)
@click.option(
    "--json/--no-json",
    envvar="IANAZONE_JSON",
    default=False,
    is_flag=True,
    help="Output results as JSON.",
)
@click.version_option(package_name="python-ianazone")
@click.pass_context
def cli(ctx, locale, text_only, debug, json):
    """A tool for looking up UTC offsets of IANA time zones."""
    logging_config: dict[str, Any] = {
        "level": logging.DEBUG if debug > 0 else logging.INFO
    }
    try:
        from rich.logging import RichHandler

        rich_config = {
            "show_time": False,
        }
        logging_config["handlers"] = [RichHandler(**rich_config)]
        logging_config["format"] = "%(message)s"
    except ImportError:
        pass

    # The configuration should be converted to use dictConfig,
    # but this keeps mypy happy for now
    logging.basicConfig(**logging_config)  # type: ignore

    try:
        config = OracleConfig(locale=locale, structured=not text_only)
    except ValueError as ex:
        raise click.BadParameter(f"Unknown locale {locale!r}", param_hint="--locale") from ex

    ctx.obj = ZoneState(config)


cli.add_command(offset)
cli.add_command(validate)
cli.add_command(name)
cli.add_command(strategy)


if __name__ == "__main__":
    cli()
