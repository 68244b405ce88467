# SPDX-License-Identifier: MIT
"""Compare two version strings."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import compare_versions
from ..config import OUTPUT_FORMATS
from ..console import Context, echo_error, echo_info, pass_context
from ..semver import VersionError

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}
_WORDS = {-1: "older", 0: "equal", 1: "newer"}


def format_result(result: int, output: str) -> str:
    """Render a comparison result in the given output format."""
    if output == "symbol":
        return _SYMBOLS[result]
    if output == "word":
        return _WORDS[result]
    return str(result)


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Result format (defaults to [tool.vercompare].output or 'number').",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, output: Optional[str]) -> None:
    """Compare VERSION1 against VERSION2.

    Prints 1 when VERSION1 is newer, -1 when it is older and 0 when both
    are equal.

    \b
    Examples:
        vercompare compare 2.1.0 2.0.9          # 1
        vercompare compare -o symbol 1.2 1.2.0  # =
    """
    if output is None:
        output = ctx.load_config().output

    try:
        result = compare_versions(version1, version2)
    except VersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(format_result(result, output))
