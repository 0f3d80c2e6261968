# SPDX-License-Identifier: MIT
"""CLI entry point for the semverkit command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from semverkit_version import InvalidVersionError, Version, parse_version

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve_version(self, text: Optional[str], strict: Optional[bool] = None) -> Version:
        """Parse ``text``, falling back to the project version when it is omitted.

        Raises:
            ConfigError: If no version was given and the project has none
            InvalidVersionError: If the version cannot be parsed
        """
        config = self.load_config()
        if strict is None:
            strict = config.strict

        if text is None:
            if not config.version:
                raise ConfigError(
                    f"No version given and no [project].version in {config.project_dir}"
                )
            text = config.version
            if self.verbose:
                echo_info(f"Using project version {text}")

        return parse_version(text, strict=strict)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="semverkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read project settings from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version toolkit.

    Parse, validate, compare, format and bump semantic versions.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit check 1.0.0 1.0
        semverkit compare 1.0.0-alpha 1.0.0
        semverkit format -f "x.y.z (YYYY-MM-dd)"
        semverkit bump minor
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import bump, check, compare, format, parse, sort

cli.add_command(parse.parse)
cli.add_command(check.check)
cli.add_command(compare.compare)
cli.add_command(format.format_command)
cli.add_command(bump.bump)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
