# SPDX-License-Identifier: MIT
"""Character-class scanner for the semantic version grammar.

Accepts the same language as::

    ^\\d+\\.\\d+\\.\\d+(-IDENT(\\.IDENT)*)?(\\+IDENT(\\.IDENT)*)?$

where ``IDENT`` is ``[0-9A-Za-z-]+``, without going through a regex engine.
"""

from __future__ import annotations

from typing import Optional

DIGITS = frozenset("0123456789")
IDENTIFIER_CHARS = frozenset(
    "0123456789" "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "abcdefghijklmnopqrstuvwxyz" "-"
)


def is_numeric(text: str) -> bool:
    """Return True if ``text`` is a non-empty run of ASCII digits."""
    return bool(text) and all(c in DIGITS for c in text)


def is_identifier_list(text: Optional[str]) -> bool:
    """Check that ``text`` is one or more dot-separated identifiers.

    Examples:
        >>> is_identifier_list("alpha.1")
        True
        >>> is_identifier_list("alpha..1")
        False
        >>> is_identifier_list("beta;1")
        False
    """
    if not text:
        return False

    run = 0
    for c in text:
        if c == ".":
            if run == 0:
                return False
            run = 0
        elif c in IDENTIFIER_CHARS:
            run += 1
        else:
            return False

    return run > 0


def _scan_number(text: str, start: int) -> int:
    """Return the index just past the run of digits starting at ``start``."""
    end = start
    while end < len(text) and text[end] in DIGITS:
        end += 1
    return end


def is_well_formed(text: Optional[str]) -> bool:
    """Check if a string is a well-formed semantic version.

    Leading and trailing whitespace is ignored. Never raises.

    Examples:
        >>> is_well_formed("1.0.0-alpha+001")
        True
        >>> is_well_formed("1.0")
        False
        >>> is_well_formed("1.1.1-beta;1")
        False
    """
    if not isinstance(text, str):
        return False

    text = text.strip()
    if not text:
        return False

    # major.minor.patch
    pos = 0
    for index in range(3):
        end = _scan_number(text, pos)
        if end == pos:
            return False
        pos = end
        if index < 2:
            if pos >= len(text) or text[pos] != ".":
                return False
            pos += 1

    if pos == len(text):
        return True

    plus = text.find("+", pos)
    if text[pos] == "-":
        prerelease_end = plus if plus != -1 else len(text)
        if not is_identifier_list(text[pos + 1 : prerelease_end]):
            return False
        pos = prerelease_end

    if pos == len(text):
        return True
    if text[pos] != "+":
        return False
    return is_identifier_list(text[pos + 1 :])
