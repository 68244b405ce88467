# SPDX-License-Identifier: MIT
"""Two-version ordering.

Release fields are compared first; a missing field counts as 0 and a wildcard
ties with anything. On a release tie the pre-release tails decide:

- A version without a pre-release is newer than one with a pre-release
- Identifiers are compared position by position with ``String < missing < Number``
- Numbers compare by value, Strings by code point
- Build metadata is ignored
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from typing import Any, Union

from .semver import (
    Identifier,
    ReleaseField,
    Version,
    coerce_prerelease,
    segment_version,
    validate_version,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _sign(left: Any, right: Any) -> int:
    if left > right:
        return 1
    if left < right:
        return -1
    return 0


def _split(version: Union[str, Version]) -> tuple[tuple[ReleaseField, ...], tuple[Identifier, ...]]:
    if isinstance(version, Version):
        return version.release, version.prerelease
    release, segments = segment_version(validate_version(version))
    return release, coerce_prerelease(segments)


def _compare_release(
    release1: tuple[ReleaseField, ...], release2: tuple[ReleaseField, ...]
) -> tuple[int, int]:
    """Compare release fields.

    Returns (result, index) where index is the deciding position, or -1 on a tie.
    """
    for index in range(max(len(release1), len(release2))):
        field1 = release1[index] if index < len(release1) else 0
        field2 = release2[index] if index < len(release2) else 0
        if field1 is None or field2 is None:
            continue
        if field1 != field2:
            return _sign(field1, field2), index
    return 0, -1


def _compare_identifier(id1: object, id2: object) -> int:
    """Order two pre-release identifiers at the same position.

    Either side may be ``_MISSING`` when its tail is shorter.
    """
    if id1 is _MISSING:
        # A String loses to a missing identifier, a Number beats it
        return 1 if isinstance(id2, str) else -1
    if id2 is _MISSING:
        return -1 if isinstance(id1, str) else 1

    if isinstance(id1, int) and isinstance(id2, int):
        return _sign(id1, id2)
    if isinstance(id1, str) and isinstance(id2, str):
        return _sign(id1, id2)
    if isinstance(id1, int):
        # Number vs String
        return 1
    # String vs Number
    return -1


def _compare_prerelease(pre1: tuple[Identifier, ...], pre2: tuple[Identifier, ...]) -> int:
    """Compare two pre-release tails.

    Returns:
        -1 if pre1 is older, 0 if equal, 1 if pre1 is newer
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for index in range(max(len(pre1), len(pre2))):
        id1 = pre1[index] if index < len(pre1) else _MISSING
        id2 = pre2[index] if index < len(pre2) else _MISSING
        result = _compare_identifier(id1, id2)
        if result:
            return result

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        1 if version1 is newer than version2
        0 if they are equal
        -1 if version1 is older than version2

    Raises:
        VersionTypeError: If either argument is not a string or Version
        InvalidVersionError: If either string is not a valid version

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("v1.2", "1.2.0")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    # Both operands are validated before any ordering decision
    release1, pre1 = _split(version1)
    release2, pre2 = _split(version2)

    result, index = _compare_release(release1, release2)
    if result:
        logger.debug("%s vs %s: release field %d decides (%d)", version1, version2, index, result)
        return result

    result = _compare_prerelease(pre1, pre2)
    logger.debug("%s vs %s: pre-release decides (%d)", version1, version2, result)
    return result


_VersionKey = functools.cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version.

    The key orders exactly as compare_versions does.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(version)


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list:
    """Sort versions from oldest to newest, or newest first with ``reverse``.

    Every element is validated before sorting starts. Equal versions keep
    their input order.

    Raises:
        VersionTypeError: If an element is not a string or Version
        InvalidVersionError: If an element is not a valid version
    """
    items = list(versions)
    for item in items:
        if not isinstance(item, Version):
            validate_version(item)
    return sorted(items, key=version_key, reverse=reverse)


def latest_version(versions: Iterable[Union[str, Version]]) -> Union[str, Version]:
    """Return the newest version; on ties the first occurrence wins.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If an element is not a valid version
    """
    latest = None
    for item in versions:
        if latest is None:
            latest = item if isinstance(item, Version) else validate_version(item)
        elif compare_versions(item, latest) > 0:
            latest = item
    if latest is None:
        raise ValueError("latest_version() arg is an empty iterable")
    return latest
