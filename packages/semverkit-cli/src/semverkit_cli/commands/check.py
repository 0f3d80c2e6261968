# SPDX-License-Identifier: MIT
"""Check that strings are well-formed semantic versions."""

from __future__ import annotations

import click

from semverkit_version import is_well_formed

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a well-formed semantic version.

    Checks the project version when no VERSION is given. Exits with status 1
    if any version is not well-formed.

    \b
    Examples:
        semverkit check 1.0.0 1.0.0-alpha.1+001
        semverkit check
    """
    if not versions:
        try:
            config = ctx.load_config()
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)
        if not config.version:
            echo_error(f"No version given and no [project].version in {config.project_dir}")
            raise SystemExit(1)
        versions = (config.version,)

    failed = 0
    for text in versions:
        if is_well_formed(text):
            echo_success(f"{text}: well-formed")
        else:
            echo_error(f"{text}: not a well-formed semantic version")
            failed += 1

    if failed:
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"Checked {len(versions)} version(s)")
