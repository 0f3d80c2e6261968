# SPDX-License-Identifier: MIT
"""Compute the next semantic version."""

from __future__ import annotations

from typing import Optional

import click

from semverkit_version import InvalidVersionError

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_warning, pass_context


@click.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version", required=False)
@click.option(
    "--value",
    type=click.IntRange(min=0),
    help="Set the bumped number instead of incrementing it.",
)
@click.option(
    "--prerelease",
    "-p",
    help="Replace the pre-release identifiers.",
)
@click.option(
    "--build",
    "-b",
    help="Replace the build metadata.",
)
@pass_context
def bump(
    ctx: Context,
    part: str,
    version: Optional[str],
    value: Optional[int],
    prerelease: Optional[str],
    build: Optional[str],
) -> None:
    """Print the version that follows VERSION by bumping PART.

    Bumping major resets minor and patch; bumping minor resets patch.
    Pre-release and build metadata carry over unless replaced. Uses the
    project version from pyproject.toml when VERSION is omitted.

    \b
    Examples:
        semverkit bump patch 1.4.2            # 1.4.3
        semverkit bump major 1.4.2 -p rc.1    # 2.0.0-rc.1
        semverkit bump minor                  # bump the project version
    """
    try:
        current = ctx.resolve_version(version)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    bumpers = {
        "major": current.next_major,
        "minor": current.next_minor,
        "patch": current.next_patch,
    }
    result = bumpers[part](value, prerelease, build)

    if not result.is_well_formed():
        echo_warning(f"'{result}' is not a well-formed semantic version")
    if ctx.verbose:
        echo_info(f"Bumped {part}: {current} -> {result}")

    click.echo(str(result))
