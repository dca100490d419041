# SPDX-License-Identifier: MIT
"""Semantic version comparison and upgrade classification.

This package parses version strings leniently, orders them by SemVer 2.0.0
precedence and classifies the change between two versions. Every function
returns a value for every string; malformed input degrades to defaults
instead of raising.

Example:
    >>> from semver_engine import parse_version, compare_versions, get_upgrade_type
    >>>
    >>> version = parse_version("v1.2-alpha.1+build.456")
    >>> version.patch
    0
    >>> version.prerelease
    ('alpha.1',)
    >>>
    >>> compare_versions("1.10.0", "1.9.0")
    1
    >>>
    >>> str(get_upgrade_type("1.4.2", "1.5.0"))
    'minor'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    get_prerelease_identifiers,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    compare,
    compare_versions,
    is_greater_than,
    is_less_than,
    is_equal,
    sort_versions,
    max_version,
    min_version,
)
from .config import (
    UpgradeType,
    VersionPolicy,
    PolicyConfigError,
    DEFAULT_POLICY,
)
from .classify import (
    is_prerelease,
    is_stable,
    should_recommend_upgrade,
    get_upgrade_type,
    latest_recommended_upgrade,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "get_prerelease_identifiers",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Version comparison
    "compare",
    "compare_versions",
    "is_greater_than",
    "is_less_than",
    "is_equal",
    "sort_versions",
    "max_version",
    "min_version",
    # Policy
    "UpgradeType",
    "VersionPolicy",
    "PolicyConfigError",
    "DEFAULT_POLICY",
    # Classification
    "is_prerelease",
    "is_stable",
    "should_recommend_upgrade",
    "get_upgrade_type",
    "latest_recommended_upgrade",
]
