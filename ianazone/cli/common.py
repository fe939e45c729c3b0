"""Common cli module."""

from __future__ import annotations

import re
import sys
from datetime import datetime
from functools import singledispatch, wraps
from typing import Any, NoReturn

import click
from pydantic import BaseModel

from ianazone import ZoneState
from ianazone.json import dumps as json_dumps

pass_state = click.make_pass_decorator(ZoneState)


try:
    from rich import print as _echo
except ImportError:
    # Strip out rich formatting if rich is not installed
    # but only lower case tags to avoid stripping out
    # zone names printed from user input.
    rich_formatting = re.compile(r"\[/?[a-z]+]")

    def _strip_rich_formatting(echo_func):
        """Strip rich formatting from messages."""

        @wraps(echo_func)
        def wrapper(message=None, *args, **kwargs) -> None:
            if message is not None:
                message = rich_formatting.sub("", message)
            echo_func(message, *args, **kwargs)

        return wrapper

    _echo = _strip_rich_formatting(click.echo)


class OffsetReport(BaseModel):
    """Offset of a zone at an instant, as printed by the cli."""

    zone: str
    valid: bool
    instant: float
    offset: float | None
    formatted: str | None
    strategy: str


def echo(*args, **kwargs) -> None:
    """Print a message."""
    ctx = click.get_current_context().find_root()
    if "json" not in ctx.params or ctx.params["json"] is False:
        _echo(*args, **kwargs)


def error(msg: str) -> NoReturn:
    """Print an error and exit."""
    echo(f"[bold red]{msg}[/bold red]")
    sys.exit(1)


def parse_instant(at: float | None, iso: str | None) -> float | datetime:
    """Return the instant given on the command line, defaulting to now."""
    if at is not None and iso is not None:
        raise click.BadOptionUsage("iso", "Use either --at or --iso, not both.")
    if iso is not None:
        try:
            return datetime.fromisoformat(iso)
        except ValueError as ex:
            raise click.BadParameter(str(ex), param_hint="--iso") from ex
    if at is not None:
        return at
    return datetime.now().astimezone()


def json_formatter_cb(result: Any, **kwargs) -> None:
    """Format and output the result as JSON, if requested."""
    if not kwargs.get("json"):
        return

    @singledispatch
    def to_serializable(val):
        """Regular obj-to-string for json serialization."""
        return str(val)

    @to_serializable.register(BaseModel)
    def _model_to_serializable(val: BaseModel):
        return val.model_dump()

    click.echo(json_dumps(result, default=to_serializable, indent=True))
