# SPDX-License-Identifier: MIT
"""Render a semantic version with a format pattern."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import click

from semverkit_version import InvalidVersionError

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context


@click.command("format")
@click.argument("version", required=False)
@click.option(
    "--pattern",
    "-f",
    help="Format pattern (default from [tool.semverkit].format, else G).",
)
@click.option(
    "--time",
    "reference_time",
    type=click.DateTime(),
    help="UTC reference time for date tokens (default: now).",
)
@pass_context
def format_command(
    ctx: Context,
    version: Optional[str],
    pattern: Optional[str],
    reference_time: Optional[datetime],
) -> None:
    """Render VERSION using a format pattern.

    Uses the project version from pyproject.toml when VERSION is omitted.

    \b
    Pattern tokens:
        x y z      major, minor, patch
        p b        pre-release, build metadata
        G g C      full, without build, major.minor.patch only
        YYYY MM dd HH hh mm ss f   date and time of the reference time
        T          ticks of the reference time
        \\c         literal c

    \b
    Examples:
        semverkit format 1.2.3-beta+456 -f "x.y.z_p"      # 1.2.3_beta
        semverkit format -f "C-YYYYMMdd" --time 2024-03-09
    """
    try:
        config = ctx.load_config()
        parsed = ctx.resolve_version(version)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    pattern = pattern or config.format
    if ctx.verbose:
        echo_info(f"Formatting {parsed} with pattern {pattern!r}")

    click.echo(parsed.format(pattern, reference_time))
