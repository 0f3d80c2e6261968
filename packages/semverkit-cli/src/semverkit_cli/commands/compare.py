# SPDX-License-Identifier: MIT
"""Compare two semantic versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from semverkit_version import InvalidVersionError

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--strict/--lenient",
    default=None,
    help="Validate identifiers and numeric ranges (default from [tool.semverkit].strict).",
)
@pass_context
def compare(ctx: Context, first: str, second: str, strict: Optional[bool]) -> None:
    """Print -1, 0 or 1 as FIRST has lower, equal or higher precedence than SECOND.

    Build metadata is ignored.

    \b
    Examples:
        semverkit compare 1.0.0-alpha 1.0.0      # -1
        semverkit compare 1.0.0+1 1.0.0+2        # 0
    """
    try:
        v1 = ctx.resolve_version(first, strict)
        v2 = ctx.resolve_version(second, strict)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    result = v1.compare_to(v2)
    click.echo(str(result))

    if ctx.verbose:
        echo_info(f"{v1} {_SYMBOLS[result]} {v2}")
