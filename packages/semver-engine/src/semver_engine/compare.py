# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers < alphanumeric identifiers,
fewer identifiers < more identifiers, any pre-release < release.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import logging
import re
from functools import cmp_to_key
from typing import Iterable, Union

from .semver import Version, parse_version, InvalidVersionError

logger = logging.getLogger(__name__)

VersionLike = Union[str, Version]

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_identifier(id1: str, id2: str) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare as integers and always sort below
    alphanumeric ones. Alphanumeric identifiers compare by code point.
    """
    is_num1 = _NUMERIC_IDENTIFIER.fullmatch(id1) is not None
    is_num2 = _NUMERIC_IDENTIFIER.fullmatch(id2) is not None

    if is_num1 and is_num2:
        # Digit strings compare by magnitude; int() is length-limited
        n1, n2 = id1.lstrip("0"), id2.lstrip("0")
        return _cmp((len(n1), n1), (len(n2), n2))
    if is_num1:
        return -1
    if is_num2:
        return 1
    return _cmp(id1, id2)


def _compare_prerelease(v1: Version, v2: Version) -> int:
    """Compare the pre-release parts of two versions with equal cores.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not v1.is_prerelease and not v2.is_prerelease:
        return 0
    if not v1.is_prerelease:
        return 1
    if not v2.is_prerelease:
        return -1

    parts1 = v1.prerelease_identifiers
    parts2 = v2.prerelease_identifiers

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifier(p1, p2)
        if result != 0:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(parts1), len(parts2))


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Never raises. If either side is not a version at all, the two values
    are compared as plain strings instead.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2", "1.2.0+build.7")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    try:
        v1 = version1 if isinstance(version1, Version) else parse_version(version1)
        v2 = version2 if isinstance(version2, Version) else parse_version(version2)
    except InvalidVersionError as e:
        logger.debug("Falling back to string comparison: %s", e.message)
        return _cmp(str(version1), str(version2))

    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1, v2)


compare = compare_versions


def is_greater_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) > 0


def is_less_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) < 0


def is_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same precedence.

    "1.0" and "1.0.0+build" are equal; build metadata does not count.
    """
    return compare_versions(version1, version2) == 0


def sort_versions(versions: Iterable[VersionLike], descending: bool = False) -> list:
    """Return a new list of versions in precedence order.

    The sort is stable in both directions: versions of equal precedence
    keep their original relative order. The input is not modified.

    Examples:
        >>> sort_versions(["11.11.1", "9.9.0", "10.0.0"])
        ['9.9.0', '10.0.0', '11.11.1']
    """
    key = cmp_to_key(compare_versions)
    if descending:
        key = cmp_to_key(lambda a, b: compare_versions(b, a))
    return sorted(versions, key=key)


def max_version(version1: VersionLike, version2: VersionLike) -> VersionLike:
    """Return whichever argument has higher precedence; version1 on ties."""
    return version1 if compare_versions(version1, version2) >= 0 else version2


def min_version(version1: VersionLike, version2: VersionLike) -> VersionLike:
    """Return whichever argument has lower precedence; version1 on ties."""
    return version1 if compare_versions(version1, version2) <= 0 else version2
