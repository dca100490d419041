# SPDX-License-Identifier: MIT
"""Upgrade policy configuration.

The defaults reproduce the standard recommendation rules; the environment
can loosen them for deployments that track pre-release channels.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

ENV_PREFIX = "SEMVER_ENGINE_"


class UpgradeType(str, Enum):
    """Kind of change between two versions."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    DOWNGRADE = "downgrade"
    SAME = "same"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class PolicyConfigError(Exception):
    """Raised when policy configuration is invalid."""

    def __init__(self, message: str, field_name: str | None = None):
        self.message = message
        self.field_name = field_name
        super().__init__(message)


@dataclass(frozen=True)
class VersionPolicy:
    """Policy knobs for upgrade recommendation and classification.

    Attributes:
        allow_stable_to_prerelease: Recommend moving from a stable release
            to a newer pre-release
        unresolved_upgrade_type: Label returned by get_upgrade_type for an
            upgrade whose versions could not be parsed
    """

    allow_stable_to_prerelease: bool = False
    unresolved_upgrade_type: UpgradeType = UpgradeType.MINOR

    @classmethod
    def from_env(cls) -> "VersionPolicy":
        """Create a policy from environment variables.

        Raises:
            PolicyConfigError: If SEMVER_ENGINE_UNRESOLVED_UPGRADE_TYPE is
                not an upgrade type name
        """
        allow = os.getenv(f"{ENV_PREFIX}ALLOW_STABLE_TO_PRERELEASE", "").lower() == "true"

        unresolved = UpgradeType.MINOR
        if raw := os.getenv(f"{ENV_PREFIX}UNRESOLVED_UPGRADE_TYPE"):
            try:
                unresolved = UpgradeType(raw.strip().lower())
            except ValueError:
                valid = ", ".join(t.value for t in UpgradeType)
                raise PolicyConfigError(
                    f"Unknown upgrade type '{raw}', expected one of: {valid}",
                    field_name="unresolved_upgrade_type",
                ) from None

        return cls(allow_stable_to_prerelease=allow, unresolved_upgrade_type=unresolved)


DEFAULT_POLICY = VersionPolicy()
