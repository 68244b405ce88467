# SPDX-License-Identifier: MIT
"""Version string validation, segmentation and identifier coercion.

Accepted syntax (letters are case-insensitive):

- Optional leading ``v``: ``v1.2.3``
- One to four release fields, each a numeral or a wildcard: ``1``, ``1.2.x``, ``1.*``
- Pre-release: ``-alpha``, ``-alpha.1``, ``-rc-2.0``
- Build metadata: ``+build``, ``+build.123`` (accepted, never compared)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

# Up to four release fields, each a numeral or a single wildcard token
VERSION_PATTERN = re.compile(
    r"[vV]?"
    r"(?P<release>(?:[0-9]+|[xX*])(?:\.(?:[0-9]+|[xX*])){0,3})"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

WILDCARDS = frozenset({"x", "X", "*"})

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")

# A pre-release identifier: Number (int) or String (str)
Identifier = Union[int, str]

# A release field: int, or None for a wildcard
ReleaseField = Optional[int]


class VersionError(Exception):
    """Base class for errors raised while reading a version string."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class VersionTypeError(VersionError, TypeError):
    """Raised when a version argument is not a string."""

    def __init__(self, version: Any):
        super().__init__(
            version, f"Version must be a string, got {type(version).__name__}"
        )


class InvalidVersionError(VersionError, ValueError):
    """Raised when a string does not follow the version syntax."""


@dataclass(frozen=True, slots=True)
class Version:
    """A validated version string split into its comparable parts.

    Attributes:
        raw: The string exactly as it was given
        release: Release fields; ``None`` marks a wildcard (``x``, ``X``, ``*``)
        prerelease: Coerced pre-release identifiers, empty for a release
        build: Build metadata without the ``+``, or None
    """

    raw: str
    release: tuple[ReleaseField, ...]
    prerelease: tuple[Identifier, ...] = ()
    build: Optional[str] = None

    def __str__(self) -> str:
        return self.raw

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a pre-release tail."""
        return bool(self.prerelease)

    @property
    def has_wildcard(self) -> bool:
        """Return True if any release field is a wildcard."""
        return any(field is None for field in self.release)

    @property
    def base_version(self) -> str:
        """Return the release part as written, without ``v``, pre-release or build."""
        return _strip_decorations(self.raw).split("-", 1)[0]


def validate_version(version: Any) -> str:
    """Check that ``version`` is a version string.

    Args:
        version: The value to check

    Returns:
        The same string, unchanged

    Raises:
        VersionTypeError: If ``version`` is not a ``str``
        InvalidVersionError: If the string does not follow the version syntax

    Examples:
        >>> validate_version("v1.2.3-rc.1")
        'v1.2.3-rc.1'
    """
    if not isinstance(version, str):
        raise VersionTypeError(version)
    if VERSION_PATTERN.fullmatch(version) is None:
        raise InvalidVersionError(version)
    return version


def is_valid_version(version: Any) -> bool:
    """Check if a value is a valid version string.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0.0.0.0")
        False
        >>> is_valid_version(100)
        False
    """
    if not isinstance(version, str):
        return False
    return VERSION_PATTERN.fullmatch(version) is not None


def _strip_decorations(version: str) -> str:
    if version[:1] in ("v", "V"):
        version = version[1:]
    return version.split("+", 1)[0]


def segment_version(version: str) -> tuple[tuple[ReleaseField, ...], list[str]]:
    """Split a validated version string into release fields and raw pre-release segments.

    The leading ``v`` and any build metadata are discarded. Everything before
    the first ``-`` is the release part; everything after it is the pre-release
    text, split on ``.``.

    Examples:
        >>> segment_version("v1.x.3-alpha.1+build.7")
        ((1, None, 3), ['alpha', '1'])
        >>> segment_version("2.0")
        ((2, 0), [])
    """
    release_text, _, prerelease_text = _strip_decorations(version).partition("-")

    release = tuple(
        None if field in WILDCARDS else int(field) for field in release_text.split(".")
    )
    segments = prerelease_text.split(".") if prerelease_text else []
    return release, segments


def coerce_identifier(segment: str) -> Identifier:
    """Tag one pre-release segment as a Number (``int``) or a String (``str``).

    Only plain ASCII digits make a Number; signs, letters and hyphens keep the
    segment a String. The empty segment is the empty String.
    """
    if _NUMERIC_IDENTIFIER.fullmatch(segment):
        return int(segment)
    return segment


def coerce_prerelease(segments: list[str]) -> tuple[Identifier, ...]:
    """Coerce raw pre-release segments into identifiers.

    Examples:
        >>> coerce_prerelease(["alpha", "10", "0x1"])
        ('alpha', 10, '0x1')
    """
    return tuple(coerce_identifier(segment) for segment in segments)


def parse_version(version: Any) -> Version:
    """Parse a version string into a Version object.

    Args:
        version: A string such as ``1.2.3``, ``v2.x`` or ``1.0.0-beta.2+exp.sha``

    Returns:
        A Version with release fields and coerced pre-release identifiers

    Raises:
        VersionTypeError: If ``version`` is not a string
        InvalidVersionError: If the string does not follow the version syntax

    Examples:
        >>> parse_version("1.2.3-alpha.1+build.456")
        Version(raw='1.2.3-alpha.1+build.456', release=(1, 2, 3), prerelease=('alpha', 1), build='build.456')
    """
    validate_version(version)
    release, segments = segment_version(version)
    _, _, build = version.partition("+")
    return Version(
        raw=version,
        release=release,
        prerelease=coerce_prerelease(segments),
        build=build or None,
    )
