# SPDX-License-Identifier: MIT
"""Sort version strings."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import sort_versions
from ..console import Context, echo_error, echo_info, pass_context
from ..semver import VersionError


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Newest first (defaults to [tool.vercompare].descending).",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: Optional[bool]) -> None:
    """Print VERSIONS from oldest to newest, one per line."""
    if reverse is None:
        reverse = ctx.load_config().descending

    try:
        ordered = sort_versions(versions, reverse=reverse)
    except VersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(version)
