# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing or strictly constructing versions."""

from __future__ import annotations

GRAMMAR_URL = "https://semver.org/#backusnaur-form-grammar-for-valid-semver-versions"


class InvalidVersionError(Exception):
    """Raised when a version string or component does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class IllegalCharacterError(InvalidVersionError):
    """Raised when the parser meets a character outside the version alphabet."""

    def __init__(self, version: str, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            version,
            f"Value is not well-formed, {character!r} at position {position} is an "
            f"illegal character; see {GRAMMAR_URL}",
        )


class NumberFormatError(InvalidVersionError):
    """Raised when a major, minor or patch segment is not an integer."""

    def __init__(self, version: str, field: str, segment: str):
        self.field = field
        self.segment = segment
        super().__init__(
            version,
            f"Invalid {field} number {segment!r} in version {version!r}",
        )


class OutOfRangeError(InvalidVersionError):
    """Raised by strict construction when a numeric component is negative."""

    def __init__(self, version: str, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(
            version,
            f"{field} must be greater or equal to zero, but was {value}",
        )


class MalformedIdentifierError(InvalidVersionError):
    """Raised by strict construction when prerelease or build fails the identifier grammar."""

    def __init__(self, version: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(
            version,
            f"Value is not well-formed, {field} {value!r} must only contain "
            f"dot-separated alphanumeric identifiers; see {GRAMMAR_URL}",
        )
