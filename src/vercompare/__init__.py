# SPDX-License-Identifier: MIT
"""Version string comparison.

Compares version identifiers such as ``1.2.3``, ``v2.x`` or
``1.0.0-alpha.1+build.5``: release fields first, then pre-release identifiers,
with build metadata ignored.

Example:
    >>> from vercompare import compare_versions, is_valid_version, parse_version
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
    >>> compare_versions("1.0.0-1", "1.0.0-alpha")
    1
    >>> is_valid_version("not-a-version")
    False
    >>> parse_version("v1.2.x-rc.1").release
    (1, 2, None)
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    Identifier,
    parse_version,
    validate_version,
    is_valid_version,
    segment_version,
    coerce_identifier,
    coerce_prerelease,
    VersionError,
    VersionTypeError,
    InvalidVersionError,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    latest_version,
)

__all__ = [
    # Parsing
    "Version",
    "Identifier",
    "parse_version",
    "validate_version",
    "is_valid_version",
    "segment_version",
    "coerce_identifier",
    "coerce_prerelease",
    # Errors
    "VersionError",
    "VersionTypeError",
    "InvalidVersionError",
    "VERSION_PATTERN",
    # Comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "latest_version",
]
