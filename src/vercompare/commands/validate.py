# SPDX-License-Identifier: MIT
"""Validate version strings."""

from __future__ import annotations

import click

from ..console import echo_error, echo_success
from ..semver import VersionError, validate_version


@click.command()
@click.argument("versions", nargs=-1, required=True)
def validate(versions: tuple[str, ...]) -> None:
    """Check that each VERSION follows the version syntax.

    Exits with status 1 if any version is invalid.
    """
    failed = 0
    for version in versions:
        try:
            validate_version(version)
        except VersionError as e:
            echo_error(str(e))
            failed += 1
        else:
            echo_success(f"ok: {version}")

    if failed:
        raise SystemExit(1)
