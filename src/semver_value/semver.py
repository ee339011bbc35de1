# SPDX-License-Identifier: MIT
"""Semantic version parsing and the immutable Version value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata
as defined by SemVer 2.0.0:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -01a
- Build metadata: +build, +build.123, +001, +exp.sha.5114f85
"""

from __future__ import annotations

import dataclasses
import logging
import re
import sys
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_OPTIONS, ParseOptions
from .errors import (
    InvalidIdentifierError,
    InvalidNumericComponentError,
    MalformedVersionError,
    MissingComponentError,
    VersionError,
)

logger = logging.getLogger(__name__)

# Largest value accepted for major, minor and patch (the native signed word)
MAX_COMPONENT = sys.maxsize

_NUMERIC = r"0|[1-9][0-9]*"
# Purely numeric identifiers may not carry a leading zero; anything with a
# letter or hyphen in it is unrestricted
_PRERELEASE_IDENTIFIER = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"

PRERELEASE_PATTERN = re.compile(
    rf"{_PRERELEASE_IDENTIFIER}(?:\.{_PRERELEASE_IDENTIFIER})*"
)
BUILD_PATTERN = re.compile(rf"{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*")

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{PRERELEASE_PATTERN.pattern}))?"
    rf"(?:\+(?P<buildmetadata>{BUILD_PATTERN.pattern}))?"
)

_MAX_COMPONENT_DIGITS = len(str(MAX_COMPONENT))


def _reject(error: VersionError) -> VersionError:
    logger.debug("Rejected version: %s", error.message)
    return error


def _validate_numeric(component: str, value: object) -> None:
    if value is None:
        raise _reject(MissingComponentError(component))
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(InvalidNumericComponentError(
            component,
            value,
            f"Version component {component!r} must be an int, got {type(value).__name__}",
        ))
    if value < 0:
        raise _reject(InvalidNumericComponentError(
            component, value, f"Version component {component!r} can't be negative: {value}"
        ))
    if value > MAX_COMPONENT:
        raise _reject(InvalidNumericComponentError(
            component,
            value,
            f"Version component {component!r} exceeds {MAX_COMPONENT}: {value}",
        ))


def _validate_identifiers(component: str, value: object, pattern: re.Pattern) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        raise _reject(InvalidIdentifierError(
            component, value, f"{component} must be a string, got {type(value).__name__}"
        ))
    if pattern.fullmatch(value) is None:
        raise _reject(InvalidIdentifierError(
            component,
            value,
            f"Provided {component} {value!r} doesn't match pattern: {pattern.pattern}",
        ))


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a validated semantic version.

    Instances are immutable. The ``with_*`` and ``increment_*`` methods
    return new instances, and every instance has passed the same validation
    whether it came from :func:`parse_version` or was built directly.

    Equality covers all five fields, build metadata included. Ordering
    follows SemVer precedence and ignores build metadata, so two versions
    that differ only in build metadata are neither ``<`` nor ``>`` one
    another, yet are not ``==``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g., "alpha.1", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for component in ("major", "minor", "patch"):
            _validate_numeric(component, getattr(self, component))
        _validate_identifiers("prerelease", self.prerelease, PRERELEASE_PATTERN)
        _validate_identifiers("build", self.build, BUILD_PATTERN)

    @classmethod
    def parse(cls, version_string: str, options: Optional[ParseOptions] = None) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, options)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        if self.prerelease is None:
            return ()
        return tuple(self.prerelease.split("."))

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        if self.build is None:
            return ()
        return tuple(self.build.split("."))

    def with_major(self, major: int) -> Version:
        return dataclasses.replace(self, major=major)

    def with_minor(self, minor: int) -> Version:
        return dataclasses.replace(self, minor=minor)

    def with_patch(self, patch: int) -> Version:
        return dataclasses.replace(self, patch=patch)

    def with_prerelease(self, prerelease: Optional[str]) -> Version:
        return dataclasses.replace(self, prerelease=prerelease)

    def with_build(self, build: Optional[str]) -> Version:
        return dataclasses.replace(self, build=build)

    # Increments always drop pre-release and build metadata, even when the
    # current version is already a pre-release of the target release.

    def increment_major(self) -> Version:
        """Return ``(major + 1).0.0``."""
        return Version(self.major + 1, 0, 0)

    def increment_minor(self) -> Version:
        """Return ``major.(minor + 1).0``."""
        return Version(self.major, self.minor + 1, 0)

    def increment_patch(self) -> Version:
        """Return ``major.minor.(patch + 1)``."""
        return Version(self.major, self.minor, self.patch + 1)

    def compare(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            -1 if self < other, 0 if they have equal precedence, 1 if self > other
        """
        from .compare import compare_versions

        return compare_versions(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def _parse_component(component: str, digits: str) -> int:
    # Python refuses to convert very long digit strings, so reject by length first
    if len(digits) > _MAX_COMPONENT_DIGITS:
        raise _reject(InvalidNumericComponentError(
            component,
            digits,
            f"Version component {component!r} exceeds {MAX_COMPONENT}: {digits}",
        ))
    return int(digits)


def parse_version(version_string: str, options: Optional[ParseOptions] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]). Numeric
            components may not have leading zeros, so "01.2.3" is rejected
        options: Parser options; strict SemVer when omitted

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not follow semantic versioning
        InvalidNumericComponentError: If a numeric component is out of range

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    options = options or DEFAULT_OPTIONS

    if not isinstance(version_string, str):
        raise _reject(MalformedVersionError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        ))

    text = version_string
    if options.strip_whitespace:
        text = text.strip()
    if options.allow_v_prefix and text[:1] in ("v", "V"):
        text = text[1:]

    match = SEMVER_PATTERN.fullmatch(text)
    if not match:
        raise _reject(MalformedVersionError(version_string))

    return Version(
        major=_parse_component("major", match.group("major")),
        minor=_parse_component("minor", match.group("minor")),
        patch=_parse_component("patch", match.group("patch")),
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )


def is_valid_semver(version_string: str, options: Optional[ParseOptions] = None) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    try:
        parse_version(version_string, options)
    except (MalformedVersionError, InvalidNumericComponentError):
        return False
    return True
