# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and formatting.

This package provides a value type for semantic versions following the
SemVer 2.0.0 specification, with lenient and strict parsing, precedence
ordering and a small pattern language for rendering.

Example:
    >>> from semverkit_version import parse_version, compare_versions, is_well_formed
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> version.format("x.y.z")
    '1.2.3'
    >>>
    >>> is_well_formed("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    IllegalCharacterError,
    NumberFormatError,
    OutOfRangeError,
    MalformedIdentifierError,
)
from .semver import (
    Version,
    parse_version,
    try_parse_version,
)
from .grammar import (
    is_well_formed,
    is_identifier_list,
)
from .compare import (
    compare_versions,
    version_key,
)
from .formatter import (
    DEFAULT_PATTERN,
    format_version,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "IllegalCharacterError",
    "NumberFormatError",
    "OutOfRangeError",
    "MalformedIdentifierError",
    # Version parsing
    "Version",
    "parse_version",
    "try_parse_version",
    "is_well_formed",
    "is_identifier_list",
    # Version comparison
    "compare_versions",
    "version_key",
    # Formatting
    "DEFAULT_PATTERN",
    "format_version",
]
