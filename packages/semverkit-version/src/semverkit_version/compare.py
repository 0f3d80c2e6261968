# SPDX-License-Identifier: MIT
"""Version comparison following semantic version precedence.

Numeric pre-release identifiers compare numerically, everything else
compares ordinally. Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Union

from .precedence import precedence
from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string cannot be parsed

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0+1", "1.0.0+2")
        0
    """
    return precedence(_coerce(version1), _coerce(version2))


_PrecedenceKey = cmp_to_key(precedence)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _PrecedenceKey(_coerce(version))
