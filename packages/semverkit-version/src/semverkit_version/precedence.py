# SPDX-License-Identifier: MIT
"""Semantic version precedence.

Implements https://semver.org/#spec-item-11. Build metadata never takes part
in precedence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .grammar import is_numeric

if TYPE_CHECKING:
    from .semver import Version


def _sign(a, b) -> int:
    return -1 if a < b else 1


def _numeric_key(digits: str) -> tuple[int, str]:
    """Order digit strings by value without converting them to int."""
    significant = digits.lstrip("0") or "0"
    return (len(significant), significant)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty or missing pre-release marks a release, which has higher
    precedence than any pre-release (1.0.0 > 1.0.0-alpha).
    """
    if (pre1 or None) == (pre2 or None):
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        if p1 == p2:
            continue

        if is_numeric(p1) and is_numeric(p2):
            n1, n2 = _numeric_key(p1), _numeric_key(p2)
            if n1 != n2:
                return _sign(n1, n2)

        # Ordinal comparison; also settles "01" vs "1"
        return _sign(p1, p2)

    # All compared parts equal - shorter pre-release has lower precedence
    return _sign(len(parts1), len(parts2))


def precedence(v1: "Version", v2: "Version") -> int:
    """Order two versions by semantic version precedence.

    Returns:
        -1 if v1 < v2
        0 if v1 and v2 have the same precedence
        1 if v1 > v2
    """
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return _sign(val1, val2)

    return compare_prerelease(v1.prerelease, v2.prerelease)
