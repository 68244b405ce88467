# SPDX-License-Identifier: MIT
"""CLI entry point for the vercompare command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import compare, validate, sort
from .config import ConfigError
from .console import Context, echo_error, pass_context
from .semver import VersionError


def setup_logging(verbose: bool) -> None:
    """Configure root logging: DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.group()
@click.version_option(package_name="vercompare")
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
    help="Look for pyproject.toml starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Compare, validate and sort version strings.

    \b
    Examples:
        vercompare compare 1.0.0-alpha 1.0.0
        vercompare validate v2.x 1.0.0-rc.1+build.5
        vercompare sort --reverse 1.2 1.10 1.2.0-beta
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    setup_logging(verbose)


cli.add_command(compare.compare)
cli.add_command(validate.validate)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
