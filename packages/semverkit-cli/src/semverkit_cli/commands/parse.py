# SPDX-License-Identifier: MIT
"""Show the components of a semantic version."""

from __future__ import annotations

import json
from typing import Optional

import click

from semverkit_version import InvalidVersionError

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_warning, pass_context


@click.command()
@click.argument("version", required=False)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Validate identifiers and numeric ranges (default from [tool.semverkit].strict).",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON.",
)
@pass_context
def parse(ctx: Context, version: Optional[str], strict: Optional[bool], as_json: bool) -> None:
    """Parse VERSION and print its components.

    Uses the project version from pyproject.toml when VERSION is omitted.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit parse --strict --json 2.0.0-beta
    """
    try:
        parsed = ctx.resolve_version(version, strict)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    data = {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": parsed.prerelease,
        "build": parsed.build,
        "well_formed": parsed.is_well_formed(),
    }

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        for key, value in data.items():
            echo_info(f"{key}: {'' if value is None else value}")

    if not data["well_formed"]:
        echo_warning(f"'{parsed}' is not a well-formed semantic version")
