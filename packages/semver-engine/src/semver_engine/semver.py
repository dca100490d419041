# SPDX-License-Identifier: MIT
"""Lenient semantic version parsing.

Any string parses. Missing or non-numeric core components become 0:
- "1.2" -> 1.2.0, "v1" -> 1.0.0, "" -> 0.0.0
- Pre-release: text after the first "-" (e.g. "alpha.1", "rc.2")
- Build metadata: text after the first "+" (e.g. "build.5")
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Union

logger = logging.getLogger(__name__)

# Strict SemVer 2.0.0 grammar, for callers that want to validate input
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

_LEADING_DIGITS = re.compile(r"[0-9]+")


class InvalidVersionError(Exception):
    """Raised when a value cannot be treated as a version string at all."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release segment, e.g. ("alpha.1",); empty for releases
        build: Build metadata segment, e.g. ("build.5",); ignored for equality
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    def __str__(self) -> str:
        version = self.base_version
        if self.prerelease:
            version += "-" + "-".join(self.prerelease)
        if self.build:
            version += "+" + "+".join(self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        return len(self.prerelease) > 0

    @property
    def base_version(self) -> str:
        """Return "MAJOR.MINOR.PATCH" without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> list[str]:
        """Return the dot-separated pre-release identifiers used for precedence.

        >>> parse_version("1.0.0-rc.1").prerelease_identifiers
        ['rc', '1']
        """
        identifiers: list[str] = []
        for segment in self.prerelease:
            identifiers.extend(segment.split("."))
        return identifiers


def _to_component(part: str) -> int:
    # "3" -> 3, "3rc" -> 3, "x" -> 0
    match = _LEADING_DIGITS.match(part)
    if not match:
        return 0
    try:
        return int(match.group())
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        logger.debug("Version component too long, using 0: %.20s...", part)
        return 0


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Parsing never fails for strings: absent or malformed components
    default to 0 and absent pre-release/build segments to ().

    Args:
        version_string: A string roughly following
            [v]MAJOR[.MINOR[.PATCH]][-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the value is not a string

    Examples:
        >>> parse_version("v1.2")
        Version(major=1, minor=2, patch=0, prerelease=(), build=())

        >>> parse_version("1.2.3-alpha.1+build.5")
        Version(major=1, minor=2, patch=3, prerelease=('alpha.1',), build=('build.5',))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    text = version_string.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]

    text, plus, build = text.partition("+")
    core, dash, prerelease = text.partition("-")

    parts = core.split(".")
    numbers = [_to_component(part) for part in parts[:3]]
    numbers += [0] * (3 - len(numbers))

    return Version(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=(prerelease,) if dash else (),
        build=(build,) if plus else (),
    )


def get_prerelease_identifiers(version: Union[str, Version]) -> list[str]:
    """Return the pre-release identifiers of a version, or [] if it has none.

    Examples:
        >>> get_prerelease_identifiers("1.6.0-bigip.6")
        ['bigip', '6']
        >>> get_prerelease_identifiers("1.6.0")
        []
    """
    try:
        parsed = parse_version(version) if not isinstance(version, Version) else version
    except InvalidVersionError as e:
        logger.debug("No pre-release identifiers for %r: %s", version, e.message)
        return []
    return parsed.prerelease_identifiers


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a strictly valid SemVer 2.0.0 version.

    parse_version accepts far more than this; use it to validate input
    before trusting a comparison.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string.strip()) is not None
