# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Numeric identifiers < alphanumeric identifiers < release.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Optional, Union

from .semver import Version, parse_version


def _cmp(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _is_numeric(part: str) -> bool:
    return part.isascii() and part.isdigit()


def _numeric_key(part: str) -> tuple[int, str]:
    """Order digit strings by value without converting them to int.

    Identifiers may be longer than Python's int conversion limit.
    """
    digits = part.lstrip("0") or "0"
    return (len(digits), digits)


def _compare_identifier(part1: str, part2: str) -> int:
    """Compare a single pair of pre-release identifiers."""
    is_num1 = _is_numeric(part1)
    is_num2 = _is_numeric(part2)

    if is_num1 and is_num2:
        return _cmp(_numeric_key(part1), _numeric_key(part2))
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    # Ordinal comparison, no locale collation
    return _cmp(part1, part2)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 == pre2:
        return 0
    if pre1 is None:
        return 1  # Release > pre-release
    if pre2 is None:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _cmp(len(parts1), len(parts2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Note:
        Build metadata is ignored, so "1.0.0+a" and "1.0.0+b" compare as 0
        even though the Version objects are not equal.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    return compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Release sorts after every pre-release of the same base version
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = tuple(
            (0, *_numeric_key(part)) if _is_numeric(part) else (1, 0, part)
            for part in v.prerelease_identifiers
        )
        prerelease_key = (0, parts)

    return (v.major, v.minor, v.patch, prerelease_key)
