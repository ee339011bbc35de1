# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing or constructing versions."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Category of a version validation failure."""

    MALFORMED_INPUT = "malformed_input"
    MISSING_COMPONENT = "missing_component"
    INVALID_NUMERIC_COMPONENT = "invalid_numeric_component"
    INVALID_IDENTIFIER = "invalid_identifier"


class VersionError(Exception):
    """Base class for every version validation failure."""

    kind: ErrorKind


class MalformedVersionError(VersionError, ValueError):
    """Raised when a version string does not follow semantic versioning."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class MissingComponentError(VersionError, TypeError):
    """Raised when major, minor or patch is not supplied."""

    kind = ErrorKind.MISSING_COMPONENT

    def __init__(self, component: str):
        self.component = component
        self.value = None
        self.message = f"Version component {component!r} is required"
        super().__init__(self.message)


class InvalidNumericComponentError(VersionError, ValueError):
    """Raised when a numeric component is negative, out of range or not an int."""

    kind = ErrorKind.INVALID_NUMERIC_COMPONENT

    def __init__(self, component: str, value: Any, message: str = ""):
        self.component = component
        self.value = value
        self.message = message or f"Invalid {component} version component: {value!r}"
        super().__init__(self.message)


class InvalidIdentifierError(VersionError, ValueError):
    """Raised when pre-release or build metadata fails its identifier grammar."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, component: str, value: Any, message: str = ""):
        self.component = component
        self.value = value
        self.message = message or f"Invalid {component} identifiers: {value!r}"
        super().__init__(self.message)
