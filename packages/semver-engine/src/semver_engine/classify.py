# SPDX-License-Identifier: MIT
"""Release classification and upgrade recommendation."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .compare import VersionLike, compare_versions, is_greater_than
from .config import DEFAULT_POLICY, UpgradeType, VersionPolicy
from .semver import Version, parse_version, InvalidVersionError

logger = logging.getLogger(__name__)


def _as_version(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def is_prerelease(version: VersionLike) -> bool:
    """Return True if the version carries a pre-release segment.

    Examples:
        >>> is_prerelease("1.6.0-bigip.6")
        True
        >>> is_prerelease("v1.0.0")
        False
    """
    try:
        return _as_version(version).is_prerelease
    except InvalidVersionError as e:
        logger.debug("Checking %r for '-' instead: %s", version, e.message)
        return "-" in str(version)


def is_stable(version: VersionLike) -> bool:
    return not is_prerelease(version)


def should_recommend_upgrade(
    current_version: VersionLike,
    new_version: VersionLike,
    policy: Optional[VersionPolicy] = None,
) -> bool:
    """Decide whether moving from current_version to new_version is advisable.

    Only strict upgrades are recommended. A stable release is never
    pointed at a pre-release unless the policy allows it; pre-release
    users are recommended both newer pre-releases and stable releases.

    Examples:
        >>> should_recommend_upgrade("1.5.2", "1.6.0-bigip.6")
        False
        >>> should_recommend_upgrade("1.6.0-rc.1", "1.6.0")
        True
    """
    policy = policy or DEFAULT_POLICY

    if not is_greater_than(new_version, current_version):
        return False

    if (
        not policy.allow_stable_to_prerelease
        and is_stable(current_version)
        and is_prerelease(new_version)
    ):
        return False

    return True


def get_upgrade_type(
    current_version: VersionLike,
    new_version: VersionLike,
    policy: Optional[VersionPolicy] = None,
) -> UpgradeType:
    """Classify the change from current_version to new_version.

    Returns the first core component that differs (major, minor, patch),
    "prerelease" when only the pre-release differs, "same" for equal
    precedence and "downgrade" when new_version is lower.

    If either version cannot be parsed, "same" and "downgrade" are still
    decided by the fallback comparison; any other result is the policy's
    unresolved_upgrade_type ("minor" by default).

    Examples:
        >>> get_upgrade_type("1.0.0", "2.0.0")
        <UpgradeType.MAJOR: 'major'>
        >>> get_upgrade_type("1.0.0-alpha.1", "1.0.0-alpha.2") == "prerelease"
        True
    """
    policy = policy or DEFAULT_POLICY
    comparison = compare_versions(current_version, new_version)

    if comparison == 0:
        return UpgradeType.SAME
    if comparison > 0:
        return UpgradeType.DOWNGRADE

    try:
        current = _as_version(current_version)
        new = _as_version(new_version)
    except InvalidVersionError as e:
        logger.debug(
            "Cannot classify upgrade %r -> %r (%s); using %s",
            current_version,
            new_version,
            e.message,
            policy.unresolved_upgrade_type.value,
        )
        return policy.unresolved_upgrade_type

    if current.major != new.major:
        return UpgradeType.MAJOR
    if current.minor != new.minor:
        return UpgradeType.MINOR
    if current.patch != new.patch:
        return UpgradeType.PATCH

    # Same major.minor.patch, must be a pre-release difference
    return UpgradeType.PRERELEASE


def latest_recommended_upgrade(
    current_version: VersionLike,
    candidates: Iterable[VersionLike],
    policy: Optional[VersionPolicy] = None,
) -> Optional[VersionLike]:
    """Return the highest candidate worth recommending, or None.

    Examples:
        >>> latest_recommended_upgrade("1.5.2", ["1.5.3", "1.6.0-beta.1", "1.4.0"])
        '1.5.3'
    """
    best: Optional[VersionLike] = None

    for candidate in candidates:
        if not should_recommend_upgrade(current_version, candidate, policy):
            continue
        if best is None or is_greater_than(candidate, best):
            best = candidate

    return best
