# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and precedence.

This package provides an immutable Version value type that follows the
SemVer 2.0.0 grammar and precedence rules.

Example:
    >>> from semver_value import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version.increment_minor())
    '1.3.0'
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_OPTIONS,
    ParseOptions,
)
from .errors import (
    ErrorKind,
    VersionError,
    MalformedVersionError,
    MissingComponentError,
    InvalidNumericComponentError,
    InvalidIdentifierError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    MAX_COMPONENT,
    SEMVER_PATTERN,
    PRERELEASE_PATTERN,
    BUILD_PATTERN,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    version_key,
)

__all__ = [
    # Configuration
    "DEFAULT_OPTIONS",
    "ParseOptions",
    # Errors
    "ErrorKind",
    "VersionError",
    "MalformedVersionError",
    "MissingComponentError",
    "InvalidNumericComponentError",
    "InvalidIdentifierError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "MAX_COMPONENT",
    "SEMVER_PATTERN",
    "PRERELEASE_PATTERN",
    "BUILD_PATTERN",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "version_key",
]
