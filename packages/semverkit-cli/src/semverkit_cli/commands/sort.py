# SPDX-License-Identifier: MIT
"""Sort semantic versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from semverkit_version import InvalidVersionError, version_key

from ..config import ConfigError
from ..main import Context, echo_error, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest precedence first.",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Validate identifiers and numeric ranges (default from [tool.semverkit].strict).",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, strict: Optional[bool]) -> None:
    """Print each VERSION on its own line, lowest precedence first.

    Versions with equal precedence keep their input order.

    \b
    Examples:
        semverkit sort 1.0.0 1.0.0-rc.1 0.9.0     # 0.9.0, 1.0.0-rc.1, 1.0.0
    """
    try:
        parsed = [ctx.resolve_version(text, strict) for text in versions]
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    for item in sorted(parsed, key=version_key, reverse=reverse):
        click.echo(str(item))
