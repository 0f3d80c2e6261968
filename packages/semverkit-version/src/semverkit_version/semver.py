# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Parsing is lenient by default: only the text up to the first ``+`` is checked
for illegal characters and identifiers are kept as written. Pass
``strict=True`` to also enforce the identifier grammar and non-negative
numbers.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from datetime import datetime
from typing import Optional, Sequence

from .errors import (
    IllegalCharacterError,
    InvalidVersionError,
    MalformedIdentifierError,
    NumberFormatError,
    OutOfRangeError,
)
from .formatter import format_version
from .grammar import is_identifier_list, is_numeric
from .precedence import precedence


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")

    Pass ``strict=True`` to reject negative numbers and malformed
    identifiers; otherwise components are stored exactly as given.

    Equality, hashing and ordering follow precedence, so build metadata is
    ignored: ``Version(1, 0, 0, build="a") == Version(1, 0, 0, build="b")``.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: Optional[str] = None
    build: Optional[str] = None
    strict: InitVar[bool] = False

    def __post_init__(self, strict: bool) -> None:
        if not strict:
            return

        for field in ("major", "minor", "patch"):
            value = getattr(self, field)
            if value < 0:
                raise OutOfRangeError(self._text(), field, value)

        for field in ("prerelease", "build"):
            value = getattr(self, field)
            if value and not is_identifier_list(value):
                raise MalformedIdentifierError(self._text(), field, value)

    def _text(self) -> str:
        return format_version(self, "G")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self, "G")

    def __format__(self, format_spec: str) -> str:
        return format_version(self, format_spec)

    def format(
        self, pattern: Optional[str] = None, reference_time: Optional[datetime] = None
    ) -> str:
        """Render this version with a format pattern (see ``formatter``)."""
        return format_version(self, pattern, reference_time)

    # Equality and ordering

    def _key(self) -> tuple:
        return (self.major, self.minor, self.patch, self.prerelease or None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence(self, other) >= 0

    def compare_to(self, other: "Version") -> int:
        """Return -1, 0 or 1 as this version has lower, equal or higher precedence."""
        return precedence(self, other)

    # Properties

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def is_stable(self) -> bool:
        """Return True for a release past initial development (major > 0)."""
        return self.major > 0 and not self.is_prerelease

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return format_version(self, "C")

    def is_well_formed(self) -> bool:
        """Return True if every component satisfies the semantic version grammar."""
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            return False
        if self.prerelease and not is_identifier_list(self.prerelease):
            return False
        if self.build and not is_identifier_list(self.build):
            return False
        return True

    # Evolution

    def next_major(
        self,
        value: Optional[int] = None,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ) -> "Version":
        """Return a new version with the major number incremented (or set to ``value``).

        Minor and patch are reset to zero. Pre-release and build are replaced
        when given, otherwise carried over.

        Examples:
            >>> Version(1, 4, 2).next_major()
            Version(major=2, minor=0, patch=0, prerelease=None, build=None)
        """
        return Version(
            self.major + 1 if value is None else value,
            0,
            0,
            self.prerelease if prerelease is None else prerelease,
            self.build if build is None else build,
        )

    def next_minor(
        self,
        value: Optional[int] = None,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ) -> "Version":
        """Return a new version with the minor number incremented (or set to ``value``).

        Patch is reset to zero.
        """
        return Version(
            self.major,
            self.minor + 1 if value is None else value,
            0,
            self.prerelease if prerelease is None else prerelease,
            self.build if build is None else build,
        )

    def next_patch(
        self,
        value: Optional[int] = None,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ) -> "Version":
        """Return a new version with the patch number incremented (or set to ``value``)."""
        return Version(
            self.major,
            self.minor,
            self.patch + 1 if value is None else value,
            self.prerelease if prerelease is None else prerelease,
            self.build if build is None else build,
        )

    # Numeric tuples

    def to_tuple(self) -> tuple[int, ...]:
        """Return the version as a numeric tuple.

        A purely numeric build becomes the fourth element; any other build and
        the pre-release are dropped.

        Examples:
            >>> Version(1, 2, 3, "rc.1", "45").to_tuple()
            (1, 2, 3, 45)
            >>> Version(1, 2, 3, build="sha.5114f85").to_tuple()
            (1, 2, 3)
        """
        if self.build and is_numeric(self.build):
            try:
                return (self.major, self.minor, self.patch, int(self.build))
            except ValueError:
                # Too many digits to convert; dropped like any other build
                pass
        return (self.major, self.minor, self.patch)

    @classmethod
    def from_tuple(cls, parts: Sequence[int]) -> "Version":
        """Create a version from a ``(major, minor, patch[, revision])`` tuple.

        The revision, if present, becomes the build metadata.

        Raises:
            ValueError: If ``parts`` does not hold three or four integers
        """
        if len(parts) not in (3, 4) or not all(isinstance(p, int) for p in parts):
            raise ValueError(f"Expected 3 or 4 integers, got {parts!r}")

        build = str(parts[3]) if len(parts) == 4 else None
        return cls(parts[0], parts[1], parts[2], None, build)


def _parse_number(text: str, field: str, segment: str) -> int:
    if not is_numeric(segment):
        raise NumberFormatError(text, field, segment)
    try:
        return int(segment)
    except ValueError as e:
        # Longer than the interpreter's integer string conversion limit
        raise NumberFormatError(text, field, segment) from e


def parse_version(text: Optional[str], strict: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        text: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]). Empty or None yields 0.0.0.
        strict: Also validate identifiers and numeric ranges

    Returns:
        A Version object with parsed components

    Raises:
        IllegalCharacterError: If a character before the first ``+`` is not a
            letter, digit, ``.``, ``-`` or ``+``
        NumberFormatError: If major, minor or patch is missing or not a number
        MalformedIdentifierError: If ``strict`` and pre-release or build are
            not dot-separated alphanumeric identifiers

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("0.0.1-beta+sha64")
        Version(major=0, minor=0, patch=1, prerelease='beta', build='sha64')
    """
    if not text:
        return Version()
    if not isinstance(text, str):
        raise InvalidVersionError(str(text), f"Version must be a string, got {type(text).__name__}")

    dot1 = dot2 = hyphen = plus = -1
    for i, c in enumerate(text):
        if c == ".":
            if dot1 == -1:
                dot1 = i
            elif dot2 == -1:
                dot2 = i
        elif c == "-":
            if hyphen == -1:
                hyphen = i
        elif c == "+":
            plus = i
            # Build metadata is only checked in strict mode
            break
        elif not c.isalnum():
            raise IllegalCharacterError(text, c, i)

    n = len(text)
    if dot1 == -1:
        raise NumberFormatError(text, "minor", "")
    if dot2 == -1:
        raise NumberFormatError(text, "patch", "")

    if hyphen != -1:
        patch_end = hyphen
    elif plus != -1:
        patch_end = plus
    else:
        patch_end = n

    major = _parse_number(text, "major", text[:dot1])
    minor = _parse_number(text, "minor", text[dot1 + 1 : dot2])
    patch = _parse_number(text, "patch", text[dot2 + 1 : patch_end])

    prerelease = None
    if hyphen != -1:
        prerelease = text[hyphen + 1 : plus if plus != -1 else n]
    build = text[plus + 1 :] if plus != -1 else None

    return Version(major, minor, patch, prerelease, build, strict=strict)


def try_parse_version(text: Optional[str], strict: bool = True) -> tuple[bool, Version]:
    """Parse a version without raising.

    Returns:
        ``(True, version)`` on success, ``(False, Version(0, 0, 0))`` otherwise

    Examples:
        >>> try_parse_version("1.0.0-rc.1")
        (True, Version(major=1, minor=0, patch=0, prerelease='rc.1', build=None))
        >>> try_parse_version("1.0.0-rc;1")
        (False, Version(major=0, minor=0, patch=0, prerelease=None, build=None))
    """
    try:
        return True, parse_version(text, strict)
    except InvalidVersionError:
        return False, Version()
